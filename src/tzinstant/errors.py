"""Exception types raised by the parser and the dual-zone wrapper.

Every error also derives from ValueError, so callers that only care about
"bad input" can catch that instead of the project-specific types.
"""

from __future__ import annotations


class InstantError(Exception):
    """Base exception for tzinstant errors."""


class InvalidConfigurationError(InstantError, ValueError):
    """Raised when a parser is configured with unusable settings."""


class InvalidTimezoneError(InstantError, ValueError):
    """Raised when a timezone identifier does not resolve in the host tz database."""

    def __init__(self, timezone: object, message: str | None = None) -> None:
        self.timezone = timezone
        super().__init__(message or f"Invalid IANA timezone: {timezone!r}")


class InvalidDateStringError(InstantError, ValueError):
    """Raised when neither a configured format nor the ISO-8601 fallback can parse a string."""

    def __init__(self, text: str, timezone: str) -> None:
        self.text = text
        self.timezone = timezone
        super().__init__(f"Cannot parse date/time string {text!r} (timezone={timezone})")
