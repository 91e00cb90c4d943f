"""Segment SDK delivery client adapter."""

import copy
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from segwire.adapters.analytics.protocols import MessageInterceptor, MessageTransformer
from segwire.analytics.messages import (
    AliasMessage,
    GroupMessage,
    IdentifyMessage,
    Message,
    MessageType,
    PageMessage,
    ScreenMessage,
    TrackMessage,
)
from segwire.core.exceptions import InvalidStateError
from segwire.core.logging import logger

DEFAULT_FLUSH_TIMEOUT = 10.0
DEFAULT_FLUSH_PROBE_DELAY = 0.01


def _detached(value: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Deep copy handed to the SDK, which writes into the dicts it receives."""
    return None if value is None else copy.deepcopy(dict(value))


def log_delivery_error(error: Exception, batch: Sequence[Dict[str, Any]]) -> None:
    """``on_error`` hook for the SDK: delivery failures are logged, not raised."""
    logger.with_context(batch_size=len(batch)).error("Failed to deliver Segment batch: %s", error)


class SegmentAnalyticsClient:
    """Wraps ``segment.analytics.Client`` behind AnalyticsClientProtocol.

    Runs host-supplied transformers and interceptors on every message
    before handing it to the SDK queue. SDK flushes run on a dedicated
    single-thread network executor so that a non-blocking ``flush()``
    returns immediately, while ``flush(block=True)`` can wait for the
    executor to confirm the queue was drained.
    """

    def __init__(
        self,
        sdk_client: Any,
        *,
        interceptors: Sequence[MessageInterceptor] = (),
        transformers: Sequence[MessageTransformer] = (),
        flush_timeout: float = DEFAULT_FLUSH_TIMEOUT,
        flush_probe_delay: float = DEFAULT_FLUSH_PROBE_DELAY,
    ) -> None:
        """Initialize with an SDK client and optional message plug-ins."""
        self._sdk = sdk_client
        self._interceptors = list(interceptors)
        self._transformers = list(transformers)
        self._flush_timeout = flush_timeout
        self._flush_probe_delay = flush_probe_delay
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="segment-network")
        self._senders: Dict[MessageType, Callable[[Any], None]] = {
            MessageType.ALIAS: self._send_alias,
            MessageType.GROUP: self._send_group,
            MessageType.IDENTIFY: self._send_identify,
            MessageType.PAGE: self._send_page,
            MessageType.SCREEN: self._send_screen,
            MessageType.TRACK: self._send_track,
        }

    def enqueue(self, message: Message) -> None:
        """Transform, intercept and queue a message with the SDK."""
        processed = self._process(message)
        if processed is None:
            logger.with_context(message_type=message.type.value).debug(
                "Segment message dropped before delivery"
            )
            return
        self._senders[processed.type](processed)

    def flush(self, block: bool = False) -> None:
        """Schedule an SDK flush; with ``block=True`` wait for it to finish."""
        try:
            self._executor.submit(self._sdk.flush)
        except RuntimeError as e:
            raise InvalidStateError(f"Segment network executor is closed: {e}") from e
        if block:
            self._await_network_idle()

    def shutdown(self) -> None:
        """Drain the SDK queue, join its consumer and stop the executor."""
        try:
            self._sdk.shutdown()
        finally:
            self._executor.shutdown(wait=True)
        logger.info("Segment analytics client shut down")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _process(self, message: Message) -> Optional[Message]:
        current: Optional[Message] = message
        for transformer in self._transformers:
            current = transformer.transform(current)
            if current is None:
                return None
        for interceptor in self._interceptors:
            current = interceptor.intercept(current)
            if current is None:
                return None
        return current

    def _await_network_idle(self) -> None:
        """Block until a probe task runs on the network executor.

        The executor runs one task at a time, so the probe only runs once
        every previously scheduled flush has returned.
        """
        time.sleep(self._flush_probe_delay)
        try:
            probe = self._executor.submit(lambda: None)
            probe.result(timeout=self._flush_timeout)
        except FuturesTimeoutError as e:
            raise InvalidStateError(
                f"Segment delivery not confirmed within {self._flush_timeout}s"
            ) from e
        except Exception as e:
            raise InvalidStateError(f"Segment delivery could not be confirmed: {e}") from e

    @staticmethod
    def _common(message: Message) -> Dict[str, Any]:
        return {
            "user_id": message.user_id,
            "context": _detached(message.context),
            "timestamp": message.timestamp,
            "integrations": _detached(message.integrations),
            "message_id": message.message_id,
        }

    def _send_alias(self, message: AliasMessage) -> None:
        self._sdk.alias(previous_id=message.previous_id, **self._common(message))

    def _send_group(self, message: GroupMessage) -> None:
        self._sdk.group(
            group_id=message.group_id,
            traits=_detached(message.traits),
            anonymous_id=message.anonymous_id,
            **self._common(message),
        )

    def _send_identify(self, message: IdentifyMessage) -> None:
        self._sdk.identify(
            traits=_detached(message.traits),
            anonymous_id=message.anonymous_id,
            **self._common(message),
        )

    def _send_page(self, message: PageMessage) -> None:
        self._sdk.page(
            name=message.name,
            properties=_detached(message.properties),
            anonymous_id=message.anonymous_id,
            **self._common(message),
        )

    def _send_screen(self, message: ScreenMessage) -> None:
        self._sdk.screen(
            name=message.name,
            properties=_detached(message.properties),
            anonymous_id=message.anonymous_id,
            **self._common(message),
        )

    def _send_track(self, message: TrackMessage) -> None:
        self._sdk.track(
            event=message.event,
            properties=_detached(message.properties),
            anonymous_id=message.anonymous_id,
            **self._common(message),
        )
