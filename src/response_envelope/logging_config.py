"""JSON log output for applications embedding the envelope library.

The library only emits records through ``logging.getLogger(__name__)``;
it never installs handlers on import. ``configure_logging`` is meant to be
called once from an application entry point (a CLI main, a service start-up
hook). It attaches one JSON handler to the root logger and leaves handlers
installed by anything else in place.

Envelope context travels on records via ``extra``: ``status_code`` from
build-time message defaulting, ``locale`` and ``path`` from locale table
loading. Metadata and payload values are never logged, and ``key=value``
fragments whose key names a credential are masked.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

from response_envelope.config.settings import get_settings

_CREDENTIAL_KEYS = ("api.key", "secret", "password", "token", "credential", "authorization")
_CREDENTIAL_VALUE = re.compile(
    r"(%s)\s*[=:]\s*\S+" % "|".join(_CREDENTIAL_KEYS),
    re.IGNORECASE,
)
_MASK = "[REDACTED]"

_CONTEXT_FIELDS = ("status_code", "locale", "path")
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def redact(text: str) -> str:
    """Mask credential-looking ``key=value`` pairs in *text*."""
    return _CREDENTIAL_VALUE.sub(_MASK, text)


class JsonFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message.

    Context fields listed in ``_CONTEXT_FIELDS`` are copied when the record
    carries them; formatted exceptions go under ``exception``.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact(record.getMessage()),
        }
        entry.update(
            (name, getattr(record, name))
            for name in _CONTEXT_FIELDS
            if hasattr(record, name)
        )
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = redact(self.formatException(record.exc_info))
        return json.dumps(entry, default=str)


def configure_logging(level: str | None = None) -> logging.Handler:
    """Route root logger output through a single JSON handler.

    Call from an application entry point, not from library code. Repeated
    calls replace the JSON handler installed earlier; handlers owned by the
    host application are kept.

    Parameters
    ----------
    level:
        Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to the
        ENVELOPE_LOG_LEVEL setting; unknown names fall back to INFO.

    Returns
    -------
    The installed handler.
    """
    level_name = (level or get_settings().log_level).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name) if level_name in _LEVELS else logging.INFO)

    for existing in list(root.handlers):
        if isinstance(existing.formatter, JsonFormatter):
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    return handler

