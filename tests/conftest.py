"""Shared test fixtures for the envelope test suite."""

from __future__ import annotations

import pytest

from response_envelope.config.settings import get_settings


# ---------------------------------------------------------------------------
# Isolate process settings between tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop ENVELOPE_ overrides and the cached settings around every test."""
    for key in ("ENVELOPE_STATUS_POLICY", "ENVELOPE_LOG_LEVEL",
                "ENVELOPE_LOCALES_DIR", "ENVELOPE_DEFAULT_LOCALE"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def locales_dir(tmp_path):
    """Directory with English and Vietnamese locale tables."""
    (tmp_path / "en.yaml").write_text(
        '200: "OK"\n404: "Not Found"\n404001: "User not found"\n',
        encoding="utf-8",
    )
    (tmp_path / "vi.yaml").write_text(
        '404: "Không tìm thấy"\n404001: "Không tìm thấy user"\n',
        encoding="utf-8",
    )
    return tmp_path

