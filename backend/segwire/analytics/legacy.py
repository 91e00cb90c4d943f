"""Support for the flat option maps of the old calling style.

Before the ``configure`` callback existed, callers passed ``options`` maps
such as ``{"anonymousId": "...", "integrations": {...}, "ip": "..."}``.
These helpers translate them into builder calls. The static default
options from configuration go through the same translation.
"""

import warnings
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable, Optional

from segwire.analytics.builders import MessageBuilder

SUPPORTED_CONTEXT_OPTIONS = ("ip", "language", "userAgent", "Intercom")

Configure = Callable[[Any], Any]


def add_options(
    builder: MessageBuilder,
    options: Optional[Mapping[str, Any]],
    timestamp: Optional[datetime] = None,
) -> MessageBuilder:
    """Apply a legacy option map to ``builder``."""
    builder.timestamp(timestamp)
    if not options:
        return builder

    anonymous_id = options.get("anonymousId")
    if anonymous_id is not None:
        builder.anonymous_id(str(anonymous_id))

    integrations = options.get("integrations")
    if isinstance(integrations, Mapping):
        for name, payload in integrations.items():
            if isinstance(payload, bool):
                builder.enable_integration(name, payload)
            elif isinstance(payload, Mapping):
                builder.integration_options(name, payload)

    for option in SUPPORTED_CONTEXT_OPTIONS:
        if option in options:
            builder.context(option, options[option])
    return builder


def legacy_step(
    *,
    properties: Optional[Mapping[str, Any]] = None,
    traits: Optional[Mapping[str, Any]] = None,
    timestamp: Optional[datetime] = None,
    options: Optional[Mapping[str, Any]] = None,
) -> Optional[Configure]:
    """Turn deprecated keyword arguments into a configure step.

    Returns None when none of them was supplied.
    """
    if properties is None and traits is None and timestamp is None and options is None:
        return None

    warnings.warn(
        "Passing properties, traits, timestamp or options directly is deprecated; "
        "use the configure callback instead.",
        DeprecationWarning,
        stacklevel=3,
    )

    def _apply(builder: Any) -> None:
        if properties is not None:
            builder.properties(properties)
        if traits is not None:
            builder.traits(traits)
        add_options(builder, options, timestamp)

    return _apply


def chain(*steps: Optional[Configure]) -> Configure:
    """Combine configure steps; later steps override earlier ones."""

    def _apply(builder: Any) -> None:
        for step in steps:
            if step is not None:
                step(builder)

    return _apply
