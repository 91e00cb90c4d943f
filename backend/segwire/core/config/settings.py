"""Application settings loaded from the environment."""

from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from segwire.core.config.segment import SegmentConfiguration


class Settings(BaseSettings):
    """Settings with automatic env var (and ``.env``) loading.

    Everything Segment-related lives under the ``SEGMENT_`` namespace:
        SEGMENT_API_KEY=...
        SEGMENT_OPTIONS='{"language": "sk", "user-agent": "Safari"}'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "segwire"
    LOG_LEVEL: str = "INFO"

    SEGMENT_API_KEY: Optional[str] = None
    SEGMENT_OPTIONS: Dict[str, Any] = Field(
        default_factory=dict,
        description="Deprecated default options applied to every message",
    )
    SEGMENT_HOST: Optional[str] = None

    # Client tuning, forwarded to the SDK
    SEGMENT_TIMEOUT: int = 15
    SEGMENT_MAX_RETRIES: int = 3
    SEGMENT_MAX_QUEUE_SIZE: int = 10000
    SEGMENT_UPLOAD_SIZE: int = 100
    SEGMENT_UPLOAD_INTERVAL: float = 0.5
    SEGMENT_SEND: bool = True
    SEGMENT_DEBUG: bool = False

    # Blocking flush for short-lived runtimes (serverless, CLI jobs)
    SEGMENT_BLOCKING_FLUSH: bool = False
    SEGMENT_FLUSH_TIMEOUT: float = 10.0
    SEGMENT_FLUSH_PROBE_DELAY: float = 0.01

    @property
    def segment_enabled(self) -> bool:
        """Whether an API key is configured."""
        return bool(self.SEGMENT_API_KEY and self.SEGMENT_API_KEY.strip())

    def segment_configuration(self) -> Optional[SegmentConfiguration]:
        """Build the Segment configuration, or None when no API key is set."""
        if not self.segment_enabled:
            return None
        return SegmentConfiguration(
            api_key=self.SEGMENT_API_KEY,
            options=self.SEGMENT_OPTIONS,
            host=self.SEGMENT_HOST,
            timeout=self.SEGMENT_TIMEOUT,
            max_retries=self.SEGMENT_MAX_RETRIES,
            max_queue_size=self.SEGMENT_MAX_QUEUE_SIZE,
            upload_size=self.SEGMENT_UPLOAD_SIZE,
            upload_interval=self.SEGMENT_UPLOAD_INTERVAL,
            send=self.SEGMENT_SEND,
            debug=self.SEGMENT_DEBUG,
            blocking_flush=self.SEGMENT_BLOCKING_FLUSH,
            flush_timeout=self.SEGMENT_FLUSH_TIMEOUT,
            flush_probe_delay=self.SEGMENT_FLUSH_PROBE_DELAY,
        )
