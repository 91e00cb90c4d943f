"""Segment analytics: message builders and the service facade."""

from segwire.analytics.builders import (
    MessageBuilder,
    MessageBuilderWithProperties,
    MessageBuilderWithTraits,
    SimpleMessageBuilder,
)
from segwire.analytics.messages import (
    AliasMessage,
    GroupMessage,
    IdentifyMessage,
    Message,
    MessageType,
    PageMessage,
    ScreenMessage,
    TrackMessage,
)
from segwire.analytics.noop import NoOpSegmentService
from segwire.analytics.protocols import SegmentServiceProtocol
from segwire.analytics.safe_map import safe_map
from segwire.analytics.service import SegmentService

__all__ = [
    "AliasMessage",
    "GroupMessage",
    "IdentifyMessage",
    "Message",
    "MessageBuilder",
    "MessageBuilderWithProperties",
    "MessageBuilderWithTraits",
    "MessageType",
    "NoOpSegmentService",
    "PageMessage",
    "ScreenMessage",
    "SegmentService",
    "SegmentServiceProtocol",
    "SimpleMessageBuilder",
    "TrackMessage",
    "safe_map",
]
