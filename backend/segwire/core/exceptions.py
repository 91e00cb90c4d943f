"""Shared exceptions module."""

from typing import Optional


class SegwireException(Exception):
    """Base exception for Segwire services."""

    pass


class InvalidStateError(SegwireException):
    """Exception raised when a component is in an invalid state.

    Raised by a blocking flush when the analytics network worker cannot
    confirm that pending deliveries were drained.
    """

    def __init__(self, message: Optional[str] = "Object is in an invalid state"):
        """Create a new InvalidStateError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)
