"""In-memory registry of live notification streams."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from leaveflow.domain.entities import UserRole
from leaveflow.utils import now_in_app_timezone

from .channel import EventChannel

logger = logging.getLogger(__name__)


def _new_connection_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class Connection:
    """One open event stream owned by an authenticated user.

    ``role`` is the owner's role at the moment the stream was admitted and is
    never refreshed. A student promoted to admin keeps receiving only student
    traffic on existing streams until they reconnect.
    """

    connection_id: str
    owner_user_id: str
    role: UserRole
    channel: EventChannel = field(repr=False, compare=False)
    opened_at: datetime | None = field(default=None, compare=False)


class ConnectionRegistry:
    """Audience index mapping connection identifiers to live connections.

    The table is guarded by a single lock so lookups from threadpool workers
    (health checks, admin endpoints) see a consistent view. Iteration order is
    admission order.
    """

    def __init__(self, id_factory: Callable[[], str] = _new_connection_id) -> None:
        self._connections: dict[str, Connection] = {}
        self._lock = threading.Lock()
        self._id_factory = id_factory

    def admit(self, owner_user_id: str, role: UserRole | str, channel: EventChannel) -> str:
        """Store a new connection and return its identifier."""

        parsed_role = UserRole.parse(role)
        with self._lock:
            connection_id = self._id_factory()
            while connection_id in self._connections:
                logger.debug("Connection id %s already in use, generating another", connection_id)
                connection_id = self._id_factory()
            self._connections[connection_id] = Connection(
                connection_id=connection_id,
                owner_user_id=owner_user_id,
                role=parsed_role,
                channel=channel,
                opened_at=now_in_app_timezone(),
            )
            total = len(self._connections)
        logger.info(
            "Client %s connected for user %s (%s), %d total connections",
            connection_id,
            owner_user_id,
            parsed_role.value,
            total,
        )
        return connection_id

    def remove(self, connection_id: str) -> None:
        """Forget ``connection_id``; unknown identifiers are ignored."""

        with self._lock:
            removed = self._connections.pop(connection_id, None)
            total = len(self._connections)
        if removed is not None:
            logger.info(
                "Client %s disconnected, %d connections remaining", connection_id, total
            )

    def get(self, connection_id: str) -> Connection | None:
        with self._lock:
            return self._connections.get(connection_id)

    def find_by_user(self, user_id: str) -> list[Connection]:
        with self._lock:
            return [c for c in self._connections.values() if c.owner_user_id == user_id]

    def find_by_role(self, role: UserRole | str) -> list[Connection]:
        parsed_role = UserRole.parse(role)
        with self._lock:
            return [c for c in self._connections.values() if c.role is parsed_role]

    def all(self) -> list[Connection]:
        with self._lock:
            return list(self._connections.values())

    def count(self) -> int:
        with self._lock:
            return len(self._connections)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, connection_id: object) -> bool:
        with self._lock:
            return connection_id in self._connections


__all__ = ["Connection", "ConnectionRegistry"]
