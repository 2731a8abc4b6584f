"""Tests for the Server-Sent Events frame format."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from leaveflow.domain.entities import Event, NotificationKind
from leaveflow.infrastructure.notifications import (
    CONNECTED_FRAME,
    HEARTBEAT_FRAME,
    decode_frame,
    encode_event,
    encode_frame,
    serialize_event,
)


def test_connected_frame_is_the_handshake_payload() -> None:
    assert CONNECTED_FRAME == 'data: {"connected": true}\n\n'
    assert decode_frame(CONNECTED_FRAME) == {"connected": True}


def test_event_frame_carries_client_fields() -> None:
    event = Event(
        id=7,
        title="New Leave Request",
        message="Asha Rao submitted a sick leave request",
        kind=NotificationKind.COMMENT,
        related_id=3,
        created_at=datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc),
    )

    frame = encode_event(event)

    assert frame.startswith("data: ")
    assert frame.endswith("\n\n")
    assert frame.count("\n") == 2
    assert decode_frame(frame) == {
        "id": 7,
        "title": "New Leave Request",
        "message": "Asha Rao submitted a sick leave request",
        "type": "comment",
        "createdAt": "2024-03-01T09:30:00Z",
    }


def test_created_at_is_normalised_to_utc() -> None:
    offset = timezone(timedelta(hours=5, minutes=30))
    event = Event(
        title="t",
        message="m",
        kind=NotificationKind.STATUS,
        created_at=datetime(2024, 3, 1, 15, 0, tzinfo=offset),
    )

    assert serialize_event(event)["createdAt"] == "2024-03-01T09:30:00Z"


def test_multiline_message_stays_on_one_data_line() -> None:
    frame = encode_frame({"message": "first\nsecond"})

    assert frame.count("\n") == 2
    assert decode_frame(frame) == {"message": "first\nsecond"}


def test_non_ascii_text_is_kept_verbatim() -> None:
    frame = encode_frame({"message": "Réunion annulée"})

    assert "Réunion annulée" in frame


@pytest.mark.parametrize("frame", [HEARTBEAT_FRAME, "data: {}", "event: x\n\n"])
def test_decode_rejects_non_data_frames(frame: str) -> None:
    with pytest.raises(ValueError):
        decode_frame(frame)
