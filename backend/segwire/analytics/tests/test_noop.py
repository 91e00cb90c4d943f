"""Tests for NoOpSegmentService."""

import logging

import pytest

from segwire.analytics.noop import NoOpSegmentService
from segwire.analytics.protocols import SegmentServiceProtocol


@pytest.fixture
def noop_service():
    return NoOpSegmentService()


def test_implements_protocol(noop_service):
    assert isinstance(noop_service, SegmentServiceProtocol)


def test_logs_at_construction(caplog):
    with caplog.at_level(logging.INFO, logger="segwire"):
        NoOpSegmentService()

    assert "using no-op service" in caplog.text


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.flush(),
        lambda s: s.alias("previous-id", "user-id", lambda b: b.context("ip", "10.0.0.1")),
        lambda s: s.group("user-id", "group-id", lambda b: b.traits("plan", "pro")),
        lambda s: s.identify("user-id", traits={"plan": "pro"}),
        lambda s: s.page("user-id", "Home", category="VIP"),
        lambda s: s.screen("user-id", "Home", options={"ip": "10.0.0.1"}),
        lambda s: s.track("user-id", "Signed Up", lambda b: b.properties("plan", "pro")),
    ],
    ids=["flush", "alias", "group", "identify", "page", "screen", "track"],
)
def test_calls_accepted_and_ignored(noop_service, call):
    assert call(noop_service) is None


def test_configure_never_invoked(noop_service):
    calls = []

    noop_service.track("user-id", "Signed Up", calls.append)

    assert calls == []
