"""Lifespan wiring for FastAPI applications.

Usage:
    from fastapi import FastAPI
    from segwire.api import segment_lifespan

    app = FastAPI(lifespan=segment_lifespan(transformers=[MyTransformer()]))
"""

from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import AsyncIterator, Callable, Optional, Sequence

from fastapi import FastAPI

from segwire.adapters.analytics.protocols import MessageInterceptor, MessageTransformer
from segwire.core import container as container_mod
from segwire.core.config import Settings
from segwire.core.container import initialize_container, reset_container
from segwire.core.logging import configure_logging, logger


def segment_lifespan(
    settings: Optional[Settings] = None,
    *,
    interceptors: Sequence[MessageInterceptor] = (),
    transformers: Sequence[MessageTransformer] = (),
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build a lifespan that owns the Segment container.

    On startup the container is initialized (fail fast if wiring is broken);
    on shutdown the analytics client is drained and the container reset.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings is None:
            from segwire.core.config import settings as app_settings
        else:
            app_settings = settings

        configure_logging(app_settings.LOG_LEVEL, sdk_debug=app_settings.SEGMENT_DEBUG)

        logger.info("Initializing dependency injection container...")
        initialize_container(app_settings, interceptors=interceptors, transformers=transformers)
        logger.info("Container initialized successfully")

        try:
            yield
        finally:
            client = container_mod.container.analytics_client if container_mod.container else None
            if client is not None:
                client.shutdown()
            reset_container()

    return lifespan
