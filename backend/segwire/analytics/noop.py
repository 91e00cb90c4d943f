"""Segment service used when no API key is configured."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

from segwire.analytics.protocols import (
    ConfigureProperties,
    ConfigureSimple,
    ConfigureTraits,
    SegmentServiceProtocol,
)
from segwire.core.logging import logger


class NoOpSegmentService(SegmentServiceProtocol):
    """Accepts every call and does nothing.

    Lets application code call the service unconditionally in local
    development and tests where Segment is not configured.
    """

    def __init__(self) -> None:
        """Log once that events will be discarded."""
        logger.info("Segment API key 'SEGMENT_API_KEY' not found, using no-op service")

    def flush(self) -> None:
        """No-op."""

    def alias(
        self,
        previous_id: str,
        user_id: str,
        configure: Optional[ConfigureSimple] = None,
    ) -> None:
        """No-op."""

    def group(
        self,
        user_id: str,
        group_id: str,
        configure: Optional[ConfigureTraits] = None,
        *,
        traits: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """No-op."""

    def identify(
        self,
        user_id: str,
        configure: Optional[ConfigureTraits] = None,
        *,
        traits: Optional[Mapping[str, Any]] = None,
        timestamp: Optional[datetime] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """No-op."""

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
        """No-op."""

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
        """No-op."""

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
        """No-op."""
