"""Fluent message builders.

A builder is created per service call, configured through chained setters
and consumed once by one of the ``build_*_message`` methods::

    builder = MessageBuilderWithProperties()
    builder.user_id("user-1").properties("plan", "pro").context("ip", "10.0.0.1")
    message = builder.build_track_message("Upgraded")

Setters ignore ``None`` so an optional value can be passed through without
clearing what was set before.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Dict, Optional, TypeVar, Union
from uuid import UUID

from segwire.analytics.messages import (
    AliasMessage,
    GroupMessage,
    IdentifyMessage,
    PageMessage,
    ScreenMessage,
    TrackMessage,
)
from segwire.analytics.safe_map import safe_map

B = TypeVar("B", bound="MessageBuilder")

_MISSING = object()


def _put_entries(
    target: Dict[str, Any], key: Union[str, Mapping[str, Any], None], value: Any
) -> None:
    if isinstance(key, Mapping):
        for name, entry in key.items():
            _put_entries(target, name, entry)
    elif key is not None and value is not None:
        target[key] = value


class MessageBuilder:
    """Common fields for every message kind."""

    def __init__(self) -> None:
        """Start with every field unset."""
        self._message_id: Optional[str] = None
        self._timestamp: Optional[datetime] = None
        self._anonymous_id: Optional[str] = None
        self._user_id: Optional[str] = None
        self._context: Dict[str, Any] = {}
        self._integrations_enabled: Dict[str, bool] = {}
        self._integration_options: Dict[str, Dict[str, Any]] = {}

    def message_id(self: B, message_id: Union[str, UUID, None]) -> B:
        """Set an explicit message id (generated by Segment otherwise)."""
        if message_id is not None:
            self._message_id = str(message_id)
        return self

    def timestamp(self: B, timestamp: Optional[datetime]) -> B:
        """Set when the event happened (defaults to send time)."""
        if timestamp is not None:
            self._timestamp = timestamp
        return self

    def context(self: B, key: Union[str, Mapping[str, Any], None], value: Any = None) -> B:
        """Add one context entry, or merge a mapping of entries."""
        _put_entries(self._context, key, value)
        return self

    def anonymous_id(self: B, anonymous_id: Union[str, UUID, None]) -> B:
        """Set the anonymous (cookie) id."""
        if anonymous_id is not None:
            self._anonymous_id = str(anonymous_id)
        return self

    def user_id(self: B, user_id: Optional[str]) -> B:
        """Set the user id."""
        if user_id is not None:
            self._user_id = user_id
        return self

    def enable_integration(self: B, name: str, enabled: Optional[bool]) -> B:
        """Switch a single downstream integration on or off."""
        if enabled is not None:
            self._integrations_enabled[name] = bool(enabled)
        return self

    def integration_options(
        self: B,
        name: str,
        options: Union[Mapping[str, Any], str, None],
        value: Any = _MISSING,
    ) -> B:
        """Set the option map for an integration.

        Called with a key and a value instead of a mapping, sets a single
        option: ``integration_options("Google Analytics", "clientId", "123.456")``.
        """
        if value is not _MISSING:
            if options is None or value is None:
                return self
            options = {options: value}
        if options is None:
            return self
        self._integration_options[name] = safe_map(options)
        return self

    def _common_fields(self) -> Dict[str, Any]:
        """Fields for the wire message, skipping everything left empty."""
        fields: Dict[str, Any] = {}
        if self._message_id:
            fields["message_id"] = self._message_id
        if self._timestamp is not None:
            fields["timestamp"] = self._timestamp
        if self._context:
            fields["context"] = safe_map(self._context)
        if self._anonymous_id:
            fields["anonymous_id"] = self._anonymous_id
        if self._user_id:
            fields["user_id"] = self._user_id
        if self._integrations_enabled:
            fields["integrations_enabled"] = dict(self._integrations_enabled)
        if self._integration_options:
            fields["integration_options"] = {
                name: safe_map(options) for name, options in self._integration_options.items()
            }
        return fields


class SimpleMessageBuilder(MessageBuilder):
    """Builder for alias messages."""

    def build_alias_message(self, previous_id: str) -> AliasMessage:
        """Materialize an alias message merging ``previous_id`` into the user id."""
        return AliasMessage(previous_id=previous_id, **self._common_fields())


class MessageBuilderWithTraits(MessageBuilder):
    """Builder for group and identify messages."""

    def __init__(self) -> None:
        """Start with no traits."""
        super().__init__()
        self._traits: Dict[str, Any] = {}

    def traits(
        self, key: Union[str, Mapping[str, Any], None], value: Any = None
    ) -> "MessageBuilderWithTraits":
        """Add one trait, or merge a mapping of traits."""
        _put_entries(self._traits, key, value)
        return self

    def _traits_field(self) -> Dict[str, Any]:
        return {"traits": safe_map(self._traits)} if self._traits else {}

    def build_group_message(self, group_id: str) -> GroupMessage:
        """Materialize a group message."""
        return GroupMessage(group_id=group_id, **self._traits_field(), **self._common_fields())

    def build_identify_message(self) -> IdentifyMessage:
        """Materialize an identify message."""
        return IdentifyMessage(**self._traits_field(), **self._common_fields())


class MessageBuilderWithProperties(MessageBuilder):
    """Builder for page, screen and track messages."""

    def __init__(self) -> None:
        """Start with no properties."""
        super().__init__()
        self._properties: Dict[str, Any] = {}

    def properties(
        self, key: Union[str, Mapping[str, Any], None], value: Any = None
    ) -> "MessageBuilderWithProperties":
        """Add one property, or merge a mapping of properties."""
        _put_entries(self._properties, key, value)
        return self

    def _properties_field(self) -> Dict[str, Any]:
        return {"properties": safe_map(self._properties)} if self._properties else {}

    def build_page_message(self, name: str) -> PageMessage:
        """Materialize a page message."""
        return PageMessage(name=name, **self._properties_field(), **self._common_fields())

    def build_screen_message(self, name: str) -> ScreenMessage:
        """Materialize a screen message."""
        return ScreenMessage(name=name, **self._properties_field(), **self._common_fields())

    def build_track_message(self, event: str) -> TrackMessage:
        """Materialize a track message."""
        return TrackMessage(event=event, **self._properties_field(), **self._common_fields())
