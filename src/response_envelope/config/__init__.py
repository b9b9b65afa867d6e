"""Configuration module: settings, status policy and locale tables."""

from response_envelope.config.locales import LocaleMessages, load_locale_messages
from response_envelope.config.policy import StatusPolicy
from response_envelope.config.settings import EnvelopeSettings, get_settings

__all__ = [
    "EnvelopeSettings",
    "LocaleMessages",
    "StatusPolicy",
    "get_settings",
    "load_locale_messages",
]
