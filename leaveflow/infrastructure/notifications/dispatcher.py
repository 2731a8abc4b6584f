"""Fan-out of live notification events to registered connections."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from leaveflow.domain.entities import Event, UserRole

from .channel import EventChannel
from .registry import Connection, ConnectionRegistry
from .wire import CONNECTED_FRAME, encode_event

logger = logging.getLogger(__name__)


class EventDispatcher:
    """Deliver events to a user, to administrators or to everybody.

    Delivery is best effort. A connection whose channel rejects a write is
    removed from the registry and its siblings are still served; nothing is
    raised to the caller. Every method returns the number of connections that
    accepted the frame.
    """

    def __init__(self, registry: ConnectionRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ConnectionRegistry:
        return self._registry

    def open(self, owner_user_id: str, role: UserRole | str, channel: EventChannel) -> str:
        """Admit ``channel`` and greet the client with the handshake frame."""

        connection_id = self._registry.admit(owner_user_id, role, channel)
        connection = self._registry.get(connection_id)
        if connection is not None:
            self._deliver(connection, CONNECTED_FRAME)
        return connection_id

    def send_to_user(self, user_id: str, event: Event) -> int:
        connections = self._registry.find_by_user(user_id)
        if not connections:
            logger.info("No active connection for user %s", user_id)
            return 0
        return self._deliver_all(connections, encode_event(event))

    def send_to_admins(self, event: Event) -> int:
        connections = self._registry.find_by_role(UserRole.ADMIN)
        if not connections:
            logger.info("No active admin connections")
            return 0
        return self._deliver_all(connections, encode_event(event))

    def broadcast(self, event: Event) -> int:
        return self._deliver_all(self._registry.all(), encode_event(event))

    def disconnect(self, connection_id: str) -> bool:
        """Close and forget ``connection_id``; ``False`` when it was not live."""

        connection = self._registry.get(connection_id)
        if connection is None:
            return False
        self._close_quietly(connection)
        self._registry.remove(connection_id)
        return True

    def _deliver_all(self, connections: Iterable[Connection], frame: str) -> int:
        return sum(1 for connection in connections if self._deliver(connection, frame))

    def _deliver(self, connection: Connection, frame: str) -> bool:
        try:
            connection.channel.write(frame)
        except Exception as exc:
            logger.warning(
                "Error sending to client %s (user %s): %s; dropping connection",
                connection.connection_id,
                connection.owner_user_id,
                exc,
            )
            self._close_quietly(connection)
            self._registry.remove(connection.connection_id)
            return False
        return True

    @staticmethod
    def _close_quietly(connection: Connection) -> None:
        try:
            connection.channel.close()
        except Exception:  # pragma: no cover - transport already gone
            logger.debug("Closing channel %s failed", connection.connection_id, exc_info=True)


__all__ = ["EventDispatcher"]
