"""In-memory doubles shared by the notification delivery tests."""

from __future__ import annotations

from leaveflow.infrastructure.notifications import ChannelClosedError, decode_frame


class RecordingChannel:
    """Channel double that keeps every frame written to it."""

    def __init__(self) -> None:
        self.frames: list[str] = []
        self.closed = False

    def write(self, frame: str) -> None:
        if self.closed:
            raise ChannelClosedError("closed")
        self.frames.append(frame)

    def close(self) -> None:
        self.closed = True

    def payloads(self) -> list[dict]:
        return [decode_frame(frame) for frame in self.frames]


class BrokenChannel(RecordingChannel):
    """Channel double whose writes always fail, like a vanished client."""

    def write(self, frame: str) -> None:
        raise BrokenPipeError("client went away")
