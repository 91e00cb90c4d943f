"""Dependency Injection Container Module.

This module provides the DI container and factory for wiring the Segment
service into the application.

Usage:
------
    # Initialize at startup (call once, e.g. from the FastAPI lifespan)
    from segwire.core.container import initialize_container
    from segwire.core.config import settings
    initialize_container(settings)

    # Import the global container after initialization
    from segwire.core import container as container_mod
    segment = container_mod.container.segment_service

    # In tests (construct directly with fakes, don't use global)
    from segwire.core.container import Container
    test_container = Container(
        segment_service=SegmentService(FakeAnalyticsClient(), configuration),
    )

Module structure:
-----------------
    container/
    ├── __init__.py      # This file - exports public API
    ├── container.py     # Container dataclass (serves)
    └── factory.py       # create_container() (builds)
"""

from typing import TYPE_CHECKING, Sequence

from segwire.core.container.container import Container
from segwire.core.container.factory import create_container

if TYPE_CHECKING:
    from segwire.adapters.analytics.protocols import MessageInterceptor, MessageTransformer
    from segwire.core.config import Settings

__all__ = ["Container", "create_container", "container", "initialize_container", "reset_container"]


# ---------------------------------------------------------------------------
# Global container instance
# ---------------------------------------------------------------------------

container: Container | None = None
"""Global container instance.

Initialized via `initialize_container()` at application startup.
Read it through `segwire.api.deps.get_container()` in FastAPI code.
"""


def initialize_container(
    settings: "Settings",
    *,
    interceptors: Sequence["MessageInterceptor"] = (),
    transformers: Sequence["MessageTransformer"] = (),
) -> Container:
    """Initialize the global container. Call once at startup.

    Args:
        settings: Application settings from core/config
        interceptors: Host-supplied message interceptors
        transformers: Host-supplied message transformers

    Returns:
        The initialized container

    Raises:
        RuntimeError: If called more than once (container already initialized)
    """
    global container

    if container is not None:
        raise RuntimeError(
            "Container already initialized. "
            "initialize_container() should only be called once at startup."
        )

    container = create_container(settings, interceptors=interceptors, transformers=transformers)
    return container


def reset_container() -> None:
    """Reset the global container to None. For testing and shutdown only."""
    global container
    container = None
