"""Live notification delivery over Server-Sent Events."""

from .channel import (
    HEARTBEAT_FRAME,
    ChannelClosedError,
    ChannelOverflowError,
    ChannelWriteError,
    EventChannel,
    SSEChannel,
)
from .dispatcher import EventDispatcher
from .publisher import NotificationPublisher
from .registry import Connection, ConnectionRegistry
from .wire import (
    CONNECTED_FRAME,
    decode_frame,
    encode_event,
    encode_frame,
    serialize_event,
)

__all__ = [
    "CONNECTED_FRAME",
    "ChannelClosedError",
    "ChannelOverflowError",
    "ChannelWriteError",
    "Connection",
    "ConnectionRegistry",
    "EventChannel",
    "EventDispatcher",
    "HEARTBEAT_FRAME",
    "NotificationPublisher",
    "SSEChannel",
    "decode_frame",
    "encode_event",
    "encode_frame",
    "serialize_event",
]
