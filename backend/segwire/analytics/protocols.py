"""Protocol for the Segment service facade."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from segwire.analytics.builders import (
    MessageBuilderWithProperties,
    MessageBuilderWithTraits,
    SimpleMessageBuilder,
)

ConfigureSimple = Callable[[SimpleMessageBuilder], Any]
ConfigureTraits = Callable[[MessageBuilderWithTraits], Any]
ConfigureProperties = Callable[[MessageBuilderWithProperties], Any]


@runtime_checkable
class SegmentServiceProtocol(Protocol):
    """Single entry point for emitting analytics events.

    Each call takes an optional ``configure`` callback receiving the
    message builder, e.g.::

        segment.track("user-1", "Played Song", lambda b: b.properties("genre", "jazz"))

    The ``properties``/``traits``/``timestamp``/``options`` keywords are
    the deprecated map-based style and emit a ``DeprecationWarning``.
    """

    def flush(self) -> None:
        """Flush queued messages to Segment."""
        ...

    def alias(
        self,
        previous_id: str,
        user_id: str,
        configure: Optional[ConfigureSimple] = None,
    ) -> None:
        """Merge ``previous_id`` into ``user_id``."""
        ...

    def group(
        self,
        user_id: str,
        group_id: str,
        configure: Optional[ConfigureTraits] = None,
        *,
        traits: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Associate ``user_id`` with the group ``group_id``."""
        ...

    def identify(
        self,
        user_id: str,
        configure: Optional[ConfigureTraits] = None,
        *,
        traits: Optional[Mapping[str, Any]] = None,
        timestamp: Optional[datetime] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Tie ``user_id`` to its traits."""
        ...

    def page(
        self,
        user_id: str,
        name: str,
        configure: Optional[ConfigureProperties] = None,
        *,
        category: Optional[str] = None,
        properties: Optional[Mapping[str, Any]] = None,
        timestamp: Optional[datetime] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Record a web page view."""
        ...

    def screen(
        self,
        user_id: str,
        name: str,
        configure: Optional[ConfigureProperties] = None,
        *,
        category: Optional[str] = None,
        properties: Optional[Mapping[str, Any]] = None,
        timestamp: Optional[datetime] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Record a mobile screen view."""
        ...

    def track(
        self,
        user_id: str,
        event: str,
        configure: Optional[ConfigureProperties] = None,
        *,
        properties: Optional[Mapping[str, Any]] = None,
        timestamp: Optional[datetime] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Record an action performed by ``user_id``."""
        ...
