"""Root conftest for pytest configuration and shared fixtures.

Loaded before every colocated ``tests/`` directory under segwire/, so the
fixtures below are available everywhere.
"""

import os

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables: must be set before any segwire module import.
# An empty key keeps the import-time settings singleton on the no-op path.
# ---------------------------------------------------------------------------
os.environ.setdefault("SEGMENT_API_KEY", "")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

API_KEY = "test-write-key"
DEFAULT_LANGUAGE = "sk"
DEFAULT_USER_AGENT = "Safari"


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_analytics_client():
    """Fake AnalyticsClient that records enqueued messages."""
    from segwire.adapters.analytics.fake import FakeAnalyticsClient

    return FakeAnalyticsClient()


@pytest.fixture
def segment_configuration():
    """Configuration with the deprecated static default options set."""
    from segwire.core.config import SegmentConfiguration

    return SegmentConfiguration(
        api_key=API_KEY,
        options={"language": DEFAULT_LANGUAGE, "user-agent": DEFAULT_USER_AGENT},
    )


@pytest.fixture
def segment_service(fake_analytics_client, segment_configuration):
    """SegmentService wired to the fake client."""
    from segwire.analytics.service import SegmentService

    return SegmentService(fake_analytics_client, segment_configuration)


# ---------------------------------------------------------------------------
# Test container: fully faked Container for injection
# ---------------------------------------------------------------------------


@pytest.fixture
def test_container(segment_service, fake_analytics_client):
    """A Container backed by the fake analytics client.

    For partial overrides, use container.replace():
        noop_container = test_container.replace(segment_service=NoOpSegmentService())
    """
    from segwire.core.container import Container

    return Container(
        segment_service=segment_service,
        analytics_client=fake_analytics_client,
    )


@pytest.fixture
def global_container(test_container):
    """Install ``test_container`` as the global container for the test."""
    from segwire.core import container as container_mod

    container_mod.reset_container()
    container_mod.container = test_container
    yield test_container
    container_mod.reset_container()
