"""Segment client configuration."""

import re
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_KEBAB = re.compile(r"-([a-z0-9])")


def _camel_case(key: str) -> str:
    return _KEBAB.sub(lambda m: m.group(1).upper(), key)


class SegmentConfiguration(BaseModel):
    """Validated configuration for the Segment client and service.

    ``options`` is the deprecated static option map seeded into every
    message. Kebab-case keys coming from env/config files (``user-agent``)
    are normalised to the camelCase names Segment expects (``userAgent``).
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1)
    options: Dict[str, Any] = Field(default_factory=dict)
    host: Optional[str] = None

    timeout: int = Field(15, gt=0, description="HTTP timeout in seconds")
    max_retries: int = Field(3, ge=0)
    max_queue_size: int = Field(10000, gt=0)
    upload_size: int = Field(100, gt=0)
    upload_interval: float = Field(0.5, gt=0)
    send: bool = True
    debug: bool = False

    blocking_flush: bool = False
    flush_timeout: float = Field(10.0, gt=0)
    flush_probe_delay: float = Field(0.01, ge=0)

    @field_validator("api_key")
    @classmethod
    def _api_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Segment API key must not be blank")
        return value

    @field_validator("options", mode="before")
    @classmethod
    def _normalise_option_keys(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        return {_camel_case(str(key)): option for key, option in value.items()}
