"""Fake analytics client for testing."""

from segwire.analytics.messages import Message, MessageType


class FakeAnalyticsClient:
    """In-memory test double for AnalyticsClientProtocol.

    Records all enqueued messages for assertions.

    Usage:
        client = FakeAnalyticsClient()
        service = SegmentService(client, configuration)
        service.track("user-1", "Signed Up")
        assert client.get(MessageType.TRACK).event == "Signed Up"
    """

    def __init__(self) -> None:
        """Initialize with an empty message log."""
        self.messages: list[Message] = []
        self.flush_calls: list[bool] = []
        self.shut_down = False

    def enqueue(self, message: Message) -> None:
        """Record the message."""
        self.messages.append(message)

    def flush(self, block: bool = False) -> None:
        """Record the flush and whether it was blocking."""
        self.flush_calls.append(block)

    def shutdown(self) -> None:
        """Mark the client as shut down."""
        self.shut_down = True

    # Test helpers

    @property
    def flush_count(self) -> int:
        """Number of flush calls."""
        return len(self.flush_calls)

    @property
    def last(self) -> Message:
        """Most recently enqueued message, or raise AssertionError."""
        if not self.messages:
            raise AssertionError("No Segment message enqueued")
        return self.messages[-1]

    def has(self, message_type: MessageType) -> bool:
        """Return True if a message of the given type was enqueued."""
        return any(m.type == message_type for m in self.messages)

    def get(self, message_type: MessageType) -> Message:
        """Return the first message of the given type, or raise AssertionError."""
        for m in self.messages:
            if m.type == message_type:
                return m
        raise AssertionError(
            f"No Segment message of type '{message_type.value}' enqueued. "
            f"Enqueued: {[m.type.value for m in self.messages]}"
        )

    def clear(self) -> None:
        """Reset recorded messages and flushes."""
        self.messages.clear()
        self.flush_calls.clear()
