"""Pydantic Settings for the response envelope library.

All environment variables use the ENVELOPE_ prefix.
Example: ENVELOPE_STATUS_POLICY=standard, ENVELOPE_LOCALES_DIR=/etc/app/locales
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from response_envelope.config.policy import StatusPolicy


class EnvelopeSettings(BaseSettings):
    """Library configuration validated from environment variables."""

    # Status validation
    status_policy: StatusPolicy = StatusPolicy.EXTENDED

    # Logging
    log_level: str = "INFO"

    # Locale message tables
    locales_dir: str | None = None  # Directory of <locale>.yaml files
    default_locale: str = Field(default="en", min_length=1)

    model_config = {"env_prefix": "ENVELOPE_"}


@lru_cache
def get_settings() -> EnvelopeSettings:
    """Process-wide settings, read from the environment on first use."""
    return EnvelopeSettings()
