"""Logging setup for Segwire.

Usage:
    from segwire.core.logging import logger

    logger.info("Segment service ready")
    logger.with_context(message_type="track").debug("Message dropped")
"""

import logging
import sys
from typing import Any, MutableMapping

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that carries key/value dimensions.

    Dimensions are appended to every message and exposed to handlers
    through ``extra``.
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        """Append dimensions to the message and merge them into ``extra``."""
        if not self.extra:
            return msg, kwargs
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        dims = " ".join(f"{key}={value}" for key, value in self.extra.items())
        return f"{msg} [{dims}]", kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a child logger with additional dimensions."""
        return ContextualLogger(self.logger, {**(self.extra or {}), **dimensions})


def configure_logging(level: str = "INFO", *, sdk_debug: bool = False) -> None:
    """Attach a stream handler to the ``segwire`` logger once.

    The SDK logs through the ``segment`` logger; it is only raised to
    DEBUG when SDK debugging is switched on.
    """
    root = logging.getLogger("segwire")
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    root.setLevel(level.upper())

    logging.getLogger("segment").setLevel(logging.DEBUG if sdk_debug else logging.WARNING)


logger = ContextualLogger(logging.getLogger("segwire"), {})
