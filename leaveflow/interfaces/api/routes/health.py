from fastapi import APIRouter, Depends

from leaveflow.infrastructure.notifications import EventDispatcher
from leaveflow.interfaces.api.dependencies import get_event_dispatcher

router = APIRouter(tags=["health"])


@router.get("/health")
def health(dispatcher: EventDispatcher = Depends(get_event_dispatcher)) -> dict[str, object]:
    return {"status": "ok", "connections": dispatcher.registry.count()}
