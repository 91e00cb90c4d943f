"""Tests for the contextual logger."""

import logging

from segwire.core.logging import ContextualLogger, configure_logging, logger


def test_with_context_appends_dimensions(caplog):
    with caplog.at_level(logging.INFO, logger="segwire"):
        logger.with_context(batch_size=3).with_context(message_type="track").info("hello")

    record = caplog.records[-1]
    assert record.getMessage() == "hello [batch_size=3 message_type=track]"
    assert record.batch_size == 3
    assert record.message_type == "track"


def test_without_context_message_unchanged(caplog):
    with caplog.at_level(logging.INFO, logger="segwire"):
        logger.info("plain")

    assert caplog.records[-1].getMessage() == "plain"


def test_with_context_returns_new_logger():
    child = logger.with_context(a=1)

    assert isinstance(child, ContextualLogger)
    assert child is not logger
    assert logger.extra == {}


def test_configure_logging_sets_levels():
    configure_logging("warning", sdk_debug=True)
    try:
        assert logging.getLogger("segwire").level == logging.WARNING
        assert logging.getLogger("segment").level == logging.DEBUG
        handlers = len(logging.getLogger("segwire").handlers)

        configure_logging("debug")

        assert len(logging.getLogger("segwire").handlers) == handlers
        assert logging.getLogger("segment").level == logging.WARNING
    finally:
        logging.getLogger("segwire").setLevel(logging.NOTSET)
