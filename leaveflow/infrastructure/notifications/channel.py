"""Transport handles that carry Server-Sent Events frames to a client."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Protocol

HEARTBEAT_FRAME = ": keep-alive\n\n"


class ChannelWriteError(ConnectionError):
    """Raised when a frame cannot be handed to the transport."""


class ChannelClosedError(ChannelWriteError):
    """The client went away or the channel was closed administratively."""


class ChannelOverflowError(ChannelWriteError):
    """The client stopped draining frames and the buffer is full."""


class EventChannel(Protocol):
    """Write-capable handle owned by a single live connection."""

    def write(self, frame: str) -> None: ...

    def close(self) -> None: ...


class SSEChannel:
    """Bounded frame buffer drained by a streaming HTTP response.

    ``write`` never blocks: a full buffer means the consumer is stuck and the
    write fails immediately so the caller can drop the connection.
    """

    def __init__(self, max_pending: int = 100) -> None:
        if max_pending < 1:
            raise ValueError("max_pending must be at least 1")
        self._queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=max_pending)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def write(self, frame: str) -> None:
        if self._closed:
            raise ChannelClosedError("Channel is closed")
        try:
            self._queue.put_nowait(frame)
        except asyncio.QueueFull as exc:
            raise ChannelOverflowError(
                f"Channel buffer is full ({self._queue.maxsize} frames pending)"
            ) from exc

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._queue.put_nowait(None)
        except asyncio.QueueFull:
            # The reader stops once the buffered frames are drained.
            pass

    async def frames(self, heartbeat_interval: float | None = None) -> AsyncIterator[str]:
        """Yield buffered frames in write order until the channel is closed.

        Frames written before ``close`` are still delivered. When
        ``heartbeat_interval`` is set, an SSE comment is yielded after that
        many idle seconds so intermediaries keep the stream open.
        """

        while not (self._closed and self._queue.empty()):
            try:
                frame = await asyncio.wait_for(self._queue.get(), timeout=heartbeat_interval)
            except asyncio.TimeoutError:
                if self._closed:
                    break
                yield HEARTBEAT_FRAME
                continue
            if frame is None:
                break
            yield frame


__all__ = [
    "ChannelClosedError",
    "ChannelOverflowError",
    "ChannelWriteError",
    "EventChannel",
    "HEARTBEAT_FRAME",
    "SSEChannel",
]
