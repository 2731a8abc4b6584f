from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from leaveflow.application.use_cases.university_updates import list_updates
from leaveflow.domain.entities import User
from leaveflow.infrastructure.database import get_db
from leaveflow.interfaces.api.dependencies import get_current_active_user
from leaveflow.interfaces.api.schemas import UniversityUpdateRead

router = APIRouter(prefix="/updates", tags=["updates"])


@router.get("", response_model=list[UniversityUpdateRead])
def read_updates(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
) -> list[UniversityUpdateRead]:
    return [UniversityUpdateRead.model_validate(update) for update in list_updates(db)]
