"""Accepted status-code bands for ResponseBuilder.set_status."""

from __future__ import annotations

from enum import Enum

STANDARD_MIN = 100
STANDARD_MAX = 599
CUSTOM_MIN = 4000
CUSTOM_MAX = 9999  # 4-digit application codes
STRUCTURED_MIN = STANDARD_MIN * 1000
STRUCTURED_MAX = STANDARD_MAX * 1000 + 999


class StatusPolicy(str, Enum):
    """Which numeric bands a builder accepts as a status code.

    standard:   100-599 only.
    extended:   100-599 or any integer >= 4000.
    structured: 100-599, 4000-9999, or a 6-digit ``DDDCCC`` code whose
                ``DDD`` base is itself a standard code (100000-599999).
    """

    STANDARD = "standard"
    EXTENDED = "extended"
    STRUCTURED = "structured"

    def accepts(self, code: int) -> bool:
        if STANDARD_MIN <= code <= STANDARD_MAX:
            return True
        if self is StatusPolicy.STANDARD:
            return False
        if self is StatusPolicy.EXTENDED:
            return code >= CUSTOM_MIN
        return CUSTOM_MIN <= code <= CUSTOM_MAX or STRUCTURED_MIN <= code <= STRUCTURED_MAX

    def describe(self) -> str:
        """Human-readable band description used in error messages."""
        if self is StatusPolicy.STANDARD:
            return f"between {STANDARD_MIN} and {STANDARD_MAX}"
        if self is StatusPolicy.EXTENDED:
            return f"between {STANDARD_MIN} and {STANDARD_MAX}, or >= {CUSTOM_MIN}"
        return (
            f"between {STANDARD_MIN} and {STANDARD_MAX}, {CUSTOM_MIN}-{CUSTOM_MAX}, "
            f"or {STRUCTURED_MIN}-{STRUCTURED_MAX}"
        )
