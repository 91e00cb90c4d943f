"""Segment service facade backed by a delivery client."""

from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

from segwire.analytics.builders import (
    MessageBuilder,
    MessageBuilderWithProperties,
    MessageBuilderWithTraits,
    SimpleMessageBuilder,
)
from segwire.analytics.legacy import add_options, chain, legacy_step
from segwire.analytics.protocols import (
    ConfigureProperties,
    ConfigureSimple,
    ConfigureTraits,
    SegmentServiceProtocol,
)
from segwire.core.config.segment import SegmentConfiguration

if TYPE_CHECKING:
    from segwire.adapters.analytics.protocols import AnalyticsClientProtocol

B = TypeVar("B", bound=MessageBuilder)


class SegmentService(SegmentServiceProtocol):
    """Builds messages and hands them to the analytics client.

    Every call creates a fresh builder, seeds the user id, applies the
    static default options from configuration, then the caller's
    ``configure`` step, which may override any of them.
    """

    def __init__(
        self,
        client: "AnalyticsClientProtocol",
        configuration: SegmentConfiguration,
    ) -> None:
        """Initialize with the delivery client and validated configuration."""
        self._client = client
        self._configuration = configuration

    def flush(self) -> None:
        """Flush the client queue, waiting for delivery in blocking mode."""
        self._client.flush(block=self._configuration.blocking_flush)

    def alias(
        self,
        previous_id: str,
        user_id: str,
        configure: Optional[ConfigureSimple] = None,
    ) -> None:
        """Merge ``previous_id`` into ``user_id``."""
        builder = self._builder(user_id, SimpleMessageBuilder, configure)
        self._client.enqueue(builder.build_alias_message(previous_id))

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
        step = chain(legacy_step(traits=traits, options=options), configure)
        builder = self._builder(user_id, MessageBuilderWithTraits, step)
        self._client.enqueue(builder.build_group_message(group_id))

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
        step = chain(legacy_step(traits=traits, timestamp=timestamp, options=options), configure)
        builder = self._builder(user_id, MessageBuilderWithTraits, step)
        self._client.enqueue(builder.build_identify_message())

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
        step = chain(
            _category_step(category),
            legacy_step(properties=properties, timestamp=timestamp, options=options),
            configure,
        )
        builder = self._builder(user_id, MessageBuilderWithProperties, step)
        self._client.enqueue(builder.build_page_message(name))

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
        step = chain(
            _category_step(category),
            legacy_step(properties=properties, timestamp=timestamp, options=options),
            configure,
        )
        builder = self._builder(user_id, MessageBuilderWithProperties, step)
        self._client.enqueue(builder.build_screen_message(name))

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
        step = chain(
            legacy_step(properties=properties, timestamp=timestamp, options=options),
            configure,
        )
        builder = self._builder(user_id, MessageBuilderWithProperties, step)
        self._client.enqueue(builder.build_track_message(event))

    def _builder(
        self,
        user_id: str,
        factory: Callable[[], B],
        configure: Optional[Callable[[B], Any]],
    ) -> B:
        builder = factory()
        builder.user_id(user_id)
        if self._configuration.options:
            add_options(builder, self._configuration.options)
        if configure is not None:
            configure(builder)
        return builder


def _category_step(category: Optional[str]) -> Optional[ConfigureProperties]:
    if category is None:
        return None
    return lambda builder: builder.properties("category", category)
