"""FastAPI integration: lifespan wiring and dependency injection."""

from segwire.api.deps import Inject, get_container
from segwire.api.lifespan import segment_lifespan

__all__ = ["Inject", "get_container", "segment_lifespan"]
