"""Locale message tables and YAML loader.

Each ``<locale>.yaml`` file in a locales directory maps status codes to
translated messages:

    404: "Không tìm thấy"
    404001: "Không tìm thấy user"

The builder never consults these tables. A caller wanting a localized
message looks it up here and passes it to ``set_message`` before ``build``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import yaml

from response_envelope.config.settings import EnvelopeSettings, get_settings
from response_envelope.models.status import message_for

logger = logging.getLogger(__name__)

LOCALE_SUFFIXES = (".yaml", ".yml")


def _status_key(key: object) -> int | None:
    # YAML gives 404 as int and "404" as str; floats and booleans are not codes
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isascii() and key.isdigit():
        return int(key)
    return None


def _parse_table(locale: str, raw: object, path: Path) -> dict[int, str] | None:
    if not isinstance(raw, dict):
        logger.error(
            "Locale file %s is not a mapping of status code to message, skipping",
            path,
            extra={"locale": locale, "path": str(path)},
        )
        return None

    table: dict[int, str] = {}
    for key, message in raw.items():
        code = _status_key(key)
        if code is None:
            logger.error(
                "Invalid status code %r in locale '%s', skipping", key, locale,
                extra={"locale": locale},
            )
            continue
        if not isinstance(message, str) or not message:
            logger.error(
                "Invalid message for status %d in locale '%s', skipping", code, locale,
                extra={"locale": locale, "status_code": code},
            )
            continue
        table[code] = message
    return table


def load_locale_messages(directory: str) -> dict[str, dict[int, str]]:
    """Parse every locale YAML file in *directory*.

    Args:
        directory: Path to a directory of ``<locale>.yaml`` files.

    Returns:
        A dict mapping locale names (file stems) to code -> message tables.
        If the directory is not found, returns an empty dict.
    """
    root = Path(directory)

    if not root.is_dir():
        logger.warning("Locales directory not found at %s, no localized messages", directory)
        return {}

    tables: dict[str, dict[int, str]] = {}
    for path in sorted(root.iterdir()):
        if path.suffix not in LOCALE_SUFFIXES:
            continue
        locale = path.stem
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            logger.error(
                "Failed to parse locale YAML at %s: %s", path, exc,
                extra={"locale": locale, "path": str(path)},
            )
            continue

        table = _parse_table(locale, raw, path)
        if table is not None:
            tables[locale] = table

    return tables


class LocaleMessages:
    """Read-only lookup over loaded locale tables."""

    def __init__(
        self,
        tables: Mapping[str, Mapping[int, str]],
        default_locale: str = "en",
    ) -> None:
        self._tables = {locale: dict(table) for locale, table in tables.items()}
        self.default_locale = default_locale

    @classmethod
    def from_directory(cls, directory: str, default_locale: str = "en") -> LocaleMessages:
        return cls(load_locale_messages(directory), default_locale=default_locale)

    @classmethod
    def from_settings(cls, settings: EnvelopeSettings | None = None) -> LocaleMessages:
        """Tables from ``ENVELOPE_LOCALES_DIR`` with ``ENVELOPE_DEFAULT_LOCALE``.

        Without a configured directory only the catalog messages are served.
        """
        settings = settings or get_settings()
        if settings.locales_dir is None:
            return cls({}, default_locale=settings.default_locale)
        return cls.from_directory(settings.locales_dir, default_locale=settings.default_locale)

    @property
    def locales(self) -> list[str]:
        return sorted(self._tables)

    def message_for(self, code: int, locale: str | None = None) -> str | None:
        """Localized message for *code*.

        Falls back to the default locale, then to the catalog message.
        """
        for candidate in (locale, self.default_locale):
            if candidate is None:
                continue
            message = self._tables.get(candidate, {}).get(code)
            if message is not None:
                return message
        return message_for(code)
