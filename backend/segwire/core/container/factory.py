"""Container Factory.

All construction logic lives here. The factory reads settings and builds
the container with the Segment service or its no-op stand-in.

Design principles:
- Single place for all wiring decisions
- Decided once at startup, never re-checked at call time
- Testable: can unit test factory logic with mock settings
"""

from typing import Optional, Sequence

from segment.analytics.client import Client

from segwire.adapters.analytics.protocols import MessageInterceptor, MessageTransformer
from segwire.adapters.analytics.segment import SegmentAnalyticsClient, log_delivery_error
from segwire.analytics.noop import NoOpSegmentService
from segwire.analytics.protocols import SegmentServiceProtocol
from segwire.analytics.service import SegmentService
from segwire.core.config import SegmentConfiguration, Settings
from segwire.core.container.container import Container
from segwire.core.logging import logger


def create_container(
    settings: Settings,
    *,
    interceptors: Sequence[MessageInterceptor] = (),
    transformers: Sequence[MessageTransformer] = (),
) -> Container:
    """Build container with configuration-appropriate implementations.

    Args:
        settings: Application settings (from core/config)
        interceptors: Host-supplied interceptors run after transformers
        transformers: Host-supplied transformers run on every message

    Returns:
        Fully constructed Container ready for use
    """
    configuration = settings.segment_configuration()

    analytics_client = _create_analytics_client(configuration, interceptors, transformers)
    segment_service = _create_segment_service(analytics_client, configuration)

    return Container(
        segment_service=segment_service,
        analytics_client=analytics_client,
    )


# ---------------------------------------------------------------------------
# Private factory functions for each dependency
# ---------------------------------------------------------------------------


def _create_analytics_client(
    configuration: Optional[SegmentConfiguration],
    interceptors: Sequence[MessageInterceptor],
    transformers: Sequence[MessageTransformer],
) -> Optional[SegmentAnalyticsClient]:
    """Create the SDK client wrapped in the delivery adapter.

    One consumer thread, bounded HTTP timeout and retries; delivery
    errors are routed to our logger.
    """
    if configuration is None:
        return None

    sdk_client = Client(
        write_key=configuration.api_key,
        host=configuration.host,
        debug=configuration.debug,
        max_queue_size=configuration.max_queue_size,
        send=configuration.send,
        on_error=log_delivery_error,
        max_retries=configuration.max_retries,
        timeout=configuration.timeout,
        thread=1,
        upload_size=configuration.upload_size,
        upload_interval=configuration.upload_interval,
    )

    logger.info(
        "Segment analytics client initialized with %d interceptors and %d transformers",
        len(interceptors),
        len(transformers),
    )

    return SegmentAnalyticsClient(
        sdk_client,
        interceptors=interceptors,
        transformers=transformers,
        flush_timeout=configuration.flush_timeout,
        flush_probe_delay=configuration.flush_probe_delay,
    )


def _create_segment_service(
    analytics_client: Optional[SegmentAnalyticsClient],
    configuration: Optional[SegmentConfiguration],
) -> SegmentServiceProtocol:
    """Select the real service when a client exists, the no-op otherwise."""
    if analytics_client is None or configuration is None:
        return NoOpSegmentService()
    return SegmentService(analytics_client, configuration)
