"""Protocols for the analytics delivery client and its plug-ins."""

from typing import Optional, Protocol, runtime_checkable

from segwire.analytics.messages import Message


@runtime_checkable
class AnalyticsClientProtocol(Protocol):
    """Queue-backed delivery of built messages.

    Adapter boundary between the Segment service facade and the SDK that
    owns batching, retries and HTTP transport.
    """

    def enqueue(self, message: Message) -> None:
        """Queue a message for delivery."""
        ...

    def flush(self, block: bool = False) -> None:
        """Ask the delivery queue to flush.

        With ``block=True`` wait until the network worker confirms the
        queue was drained, raising ``InvalidStateError`` otherwise.
        """
        ...

    def shutdown(self) -> None:
        """Flush pending messages and stop background workers."""
        ...


@runtime_checkable
class MessageTransformer(Protocol):
    """Rewrites messages before they are queued.

    Return a (possibly new) message, or None to drop it.
    """

    def transform(self, message: Message) -> Optional[Message]:
        """Transform a single message."""
        ...


@runtime_checkable
class MessageInterceptor(Protocol):
    """Inspects messages after transformation.

    Return the message to let it through, or None to veto delivery.
    """

    def intercept(self, message: Message) -> Optional[Message]:
        """Intercept a single message."""
        ...
