"""Analytics delivery adapters."""

from segwire.adapters.analytics.fake import FakeAnalyticsClient
from segwire.adapters.analytics.protocols import (
    AnalyticsClientProtocol,
    MessageInterceptor,
    MessageTransformer,
)
from segwire.adapters.analytics.segment import SegmentAnalyticsClient, log_delivery_error

__all__ = [
    "AnalyticsClientProtocol",
    "FakeAnalyticsClient",
    "MessageInterceptor",
    "MessageTransformer",
    "SegmentAnalyticsClient",
    "log_delivery_error",
]
