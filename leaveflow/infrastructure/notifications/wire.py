"""Server-Sent Events wire format for live notifications."""

from __future__ import annotations

import json
from typing import Any

from leaveflow.domain.entities import Event, NotificationKind
from leaveflow.utils import to_utc_isoformat

DATA_MARKER = "data: "
FRAME_TERMINATOR = "\n\n"
CONNECTED_PAYLOAD: dict[str, Any] = {"connected": True}


def serialize_event(event: Event) -> dict[str, Any]:
    """Return the JSON object clients receive for ``event``."""

    return {
        "id": event.id,
        "title": event.title,
        "message": event.message,
        "type": NotificationKind(event.kind).value,
        "createdAt": to_utc_isoformat(event.created_at),
    }


def encode_frame(payload: dict[str, Any]) -> str:
    """Encode ``payload`` as a single ``data:`` frame followed by a blank line."""

    # json.dumps never emits raw newlines, so one data line is enough.
    return f"{DATA_MARKER}{json.dumps(payload, ensure_ascii=False)}{FRAME_TERMINATOR}"


def encode_event(event: Event) -> str:
    return encode_frame(serialize_event(event))


def decode_frame(frame: str) -> dict[str, Any]:
    """Parse a frame produced by :func:`encode_frame` back into its payload."""

    if not frame.startswith(DATA_MARKER) or not frame.endswith(FRAME_TERMINATOR):
        raise ValueError(f"Malformed event frame: {frame!r}")
    return json.loads(frame[len(DATA_MARKER) : -len(FRAME_TERMINATOR)])


CONNECTED_FRAME = encode_frame(CONNECTED_PAYLOAD)


__all__ = [
    "CONNECTED_FRAME",
    "CONNECTED_PAYLOAD",
    "decode_frame",
    "encode_event",
    "encode_frame",
    "serialize_event",
]
