"""Tests for the container factory and the global container lifecycle."""

import logging
from unittest.mock import MagicMock

import pytest

from segwire.adapters.analytics.segment import SegmentAnalyticsClient, log_delivery_error
from segwire.analytics.messages import MessageType
from segwire.analytics.noop import NoOpSegmentService
from segwire.analytics.service import SegmentService
from segwire.core import container as container_mod
from segwire.core.config import Settings
from segwire.core.container import (
    Container,
    create_container,
    initialize_container,
    reset_container,
)


@pytest.fixture
def sdk_class(monkeypatch):
    """Replace the SDK client class so no consumer thread is started."""
    mock = MagicMock()
    monkeypatch.setattr("segwire.core.container.factory.Client", mock)
    return mock


@pytest.fixture(autouse=True)
def _clean_global_container():
    reset_container()
    yield
    reset_container()


def _enabled_settings(**overrides) -> Settings:
    return Settings(SEGMENT_API_KEY="key", **overrides)


# ---------------------------------------------------------------------------
# create_container
# ---------------------------------------------------------------------------


class TestCreateContainer:
    def test_no_api_key_selects_noop(self, sdk_class):
        c = create_container(Settings(SEGMENT_API_KEY=""))

        assert isinstance(c.segment_service, NoOpSegmentService)
        assert c.analytics_client is None
        sdk_class.assert_not_called()

    def test_api_key_selects_real_service(self, sdk_class):
        c = create_container(_enabled_settings())
        try:
            assert isinstance(c.segment_service, SegmentService)
            assert isinstance(c.analytics_client, SegmentAnalyticsClient)
        finally:
            c.analytics_client.shutdown()

    def test_sdk_client_configuration(self, sdk_class):
        c = create_container(
            _enabled_settings(
                SEGMENT_HOST="https://events.eu1.segmentapis.com",
                SEGMENT_TIMEOUT=5,
                SEGMENT_MAX_RETRIES=2,
                SEGMENT_SEND=False,
            )
        )
        c.analytics_client.shutdown()

        kwargs = sdk_class.call_args.kwargs
        assert kwargs["write_key"] == "key"
        assert kwargs["host"] == "https://events.eu1.segmentapis.com"
        assert kwargs["timeout"] == 5
        assert kwargs["max_retries"] == 2
        assert kwargs["send"] is False
        assert kwargs["thread"] == 1
        assert kwargs["on_error"] is log_delivery_error

    def test_plugins_reach_the_client(self, sdk_class):
        seen = []

        class Transformer:
            def transform(self, message):
                seen.append(message.type)
                return message

        c = create_container(_enabled_settings(), transformers=[Transformer()])
        try:
            c.segment_service.track("user-1", "Signed Up")
        finally:
            c.analytics_client.shutdown()

        assert seen == [MessageType.TRACK]
        sdk_class.return_value.track.assert_called_once()

    def test_logs_plugin_counts(self, sdk_class, caplog):
        with caplog.at_level(logging.INFO, logger="segwire"):
            c = create_container(_enabled_settings(), interceptors=[object(), object()])
        c.analytics_client.shutdown()

        record = next(r for r in caplog.records if "client initialized" in r.getMessage())
        assert record.args == (2, 0)
        assert record.getMessage().endswith("with 2 interceptors and 0 transformers")

    def test_replace_returns_new_container(self):
        original = Container(segment_service=NoOpSegmentService())
        replacement = NoOpSegmentService()

        modified = original.replace(segment_service=replacement)

        assert modified.segment_service is replacement
        assert original.segment_service is not replacement


# ---------------------------------------------------------------------------
# Global container
# ---------------------------------------------------------------------------


class TestGlobalContainer:
    def test_initialize_sets_global(self):
        c = initialize_container(Settings(SEGMENT_API_KEY=""))

        assert container_mod.container is c

    def test_initialize_twice_raises(self):
        initialize_container(Settings(SEGMENT_API_KEY=""))

        with pytest.raises(RuntimeError, match="already initialized"):
            initialize_container(Settings(SEGMENT_API_KEY=""))

    def test_reset_allows_reinitialize(self):
        initialize_container(Settings(SEGMENT_API_KEY=""))
        reset_container()

        assert container_mod.container is None
        assert initialize_container(Settings(SEGMENT_API_KEY="")) is container_mod.container
