"""Dependency Injection Container.

The container is a simple immutable dataclass that holds protocol implementations.
It has no construction logic; that lives in the factory.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

from segwire.adapters.analytics.protocols import AnalyticsClientProtocol
from segwire.analytics.protocols import SegmentServiceProtocol


@dataclass(frozen=True)
class Container:
    """Immutable container holding all protocol implementations.

    Usage:
        # Production: use the global container built by factory
        from segwire.core.container import container
        container.segment_service.track("user-1", "Signed Up")

        # Testing: construct directly with fakes
        test_container = Container(segment_service=NoOpSegmentService())

        # FastAPI endpoints: use Inject() to pull individual protocols
        from segwire.api.deps import Inject
        async def my_endpoint(segment: SegmentServiceProtocol = Inject(SegmentServiceProtocol)):
            segment.track(...)
    """

    # Segment facade: real service or no-op depending on configuration
    segment_service: SegmentServiceProtocol

    # Delivery client; None when Segment is not configured
    analytics_client: Optional[AnalyticsClientProtocol] = None

    def replace(self, **changes: Any) -> "Container":
        """Create a new container with some dependencies replaced.

        Useful for partial overrides in tests:

            modified = container.replace(segment_service=NoOpSegmentService())
        """
        return replace(self, **changes)
