"""Tests for Settings and SegmentConfiguration."""

import pytest
from pydantic import ValidationError

from segwire.core.config import SegmentConfiguration, Settings


class TestSegmentConfiguration:
    @pytest.mark.parametrize("api_key", ["", "   "], ids=["empty", "blank"])
    def test_blank_api_key_rejected(self, api_key):
        with pytest.raises(ValidationError):
            SegmentConfiguration(api_key=api_key)

    def test_defaults(self):
        configuration = SegmentConfiguration(api_key="key")

        assert configuration.options == {}
        assert configuration.blocking_flush is False
        assert configuration.flush_timeout == 10.0
        assert configuration.flush_probe_delay == 0.01

    def test_kebab_option_keys_camel_cased(self):
        configuration = SegmentConfiguration(
            api_key="key",
            options={"user-agent": "Safari", "language": "sk", "ip": "10.0.0.1"},
        )

        assert configuration.options == {"userAgent": "Safari", "language": "sk", "ip": "10.0.0.1"}

    def test_none_options_become_empty(self):
        assert SegmentConfiguration(api_key="key", options=None).options == {}

    def test_frozen(self):
        configuration = SegmentConfiguration(api_key="key")

        with pytest.raises(ValidationError):
            configuration.api_key = "other"

    @pytest.mark.parametrize(
        "field, value",
        [("timeout", 0), ("flush_timeout", 0), ("flush_probe_delay", -1), ("max_retries", -1)],
        ids=["timeout", "flush_timeout", "probe_delay", "retries"],
    )
    def test_out_of_range_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            SegmentConfiguration(api_key="key", **{field: value})


class TestSettings:
    @pytest.mark.parametrize("api_key", [None, "", "  "], ids=["missing", "empty", "blank"])
    def test_no_key_means_no_configuration(self, api_key):
        settings = Settings(SEGMENT_API_KEY=api_key)

        assert settings.segment_enabled is False
        assert settings.segment_configuration() is None

    def test_configuration_from_settings(self):
        settings = Settings(
            SEGMENT_API_KEY="key",
            SEGMENT_OPTIONS={"user-agent": "Safari"},
            SEGMENT_BLOCKING_FLUSH=True,
            SEGMENT_FLUSH_TIMEOUT=2.5,
        )

        configuration = settings.segment_configuration()

        assert settings.segment_enabled is True
        assert configuration.api_key == "key"
        assert configuration.options == {"userAgent": "Safari"}
        assert configuration.blocking_flush is True
        assert configuration.flush_timeout == 2.5

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SEGMENT_API_KEY", "env-key")
        monkeypatch.setenv("SEGMENT_OPTIONS", '{"language": "sk"}')
        monkeypatch.setenv("SEGMENT_TIMEOUT", "30")

        configuration = Settings().segment_configuration()

        assert configuration.api_key == "env-key"
        assert configuration.options == {"language": "sk"}
        assert configuration.timeout == 30
