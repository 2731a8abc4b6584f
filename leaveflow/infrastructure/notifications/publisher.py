"""Bridge between request handlers and the live event dispatcher."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TypeVar

from anyio import from_thread

from leaveflow.domain.entities import Event, Notification

from .dispatcher import EventDispatcher

T = TypeVar("T")


class NotificationPublisher:
    """Push persisted notifications to live connections.

    Sync route handlers run in the anyio threadpool while the channels belong
    to the event loop, so dispatch hops onto the loop and waits for it. The
    wait is short (writes never block) and keeps delivery in the order the
    handler issued the calls.
    """

    def __init__(self, dispatcher: EventDispatcher) -> None:
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> EventDispatcher:
        return self._dispatcher

    def to_user(self, user_id: str, notification: Notification) -> int:
        event = Event.from_notification(notification)
        return self._run(self._dispatcher.send_to_user, user_id, event)

    def to_admins(self, notification: Notification) -> int:
        event = Event.from_notification(notification)
        return self._run(self._dispatcher.send_to_admins, event)

    def broadcast(self, event: Event) -> int:
        return self._run(self._dispatcher.broadcast, event)

    @staticmethod
    def _run(func: Callable[..., T], *args: object) -> T:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            return func(*args)

        try:
            return from_thread.run_sync(func, *args)
        except RuntimeError:
            # Not an anyio worker thread (CLI scripts, plain unit tests): no
            # loop owns the channels, call inline.
            return func(*args)


__all__ = ["NotificationPublisher"]
