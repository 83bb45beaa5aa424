"""Multi-format parsing of date/time strings into timezone-aware instants.

InstantParser holds an ordered list of strptime patterns and a local timezone.
Parsing tries each pattern in order and stops at the first one that matches
the whole string:

- If the matched text carried its own offset (``%z`` consumed ``Z`` or
  ``+05:00``), that offset wins over the timezone argument. Zero offsets are
  tagged as UTC.
- A zone name read with ``%Z`` ("UTC", "GMT" or a host abbreviation such as
  "EST") is resolved and attached instead of the timezone argument.
- Patterns ending in a literal ``Z`` (``%Y-%m-%dT%H:%M:%SZ``) tag the result
  as UTC.
- Anything else is interpreted in the requested timezone.

When no pattern matches, the string is handed to ``datetime.fromisoformat``
as a best-effort ISO-8601 fallback (dates, ``T`` or space separated times,
fractional seconds, basic ``20210101T000000`` forms, ``Z``/``±HH:MM``
offsets). Anything else raises InvalidDateStringError.

A process-wide parser is available through get_default_parser(); it is
created once, either explicitly via configure_default_parser() or lazily with
default settings, and is read-only afterwards.
"""

from __future__ import annotations

import logging
import re
import threading
import time
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta, tzinfo

from .dual_zone import DualZoneInstant
from .errors import InvalidConfigurationError, InvalidDateStringError
from .global_config import DEFAULT_FORMATS, DEFAULT_RENDER_FORMAT, UTC_TIMEZONE
from .utils.time import (
    canonical_zone_name,
    host_timezone_name,
    resolve_zone,
    resolve_zone_abbreviation,
    utc_now,
)

logger = logging.getLogger(__name__)

# Round-tripped through every configured format to reject unusable patterns
_SAMPLE_INSTANT = datetime(2021, 1, 2, 3, 4, 5, 678901, tzinfo=UTC)
# %Z not preceded by an escaped %%
_ZONE_NAME_DIRECTIVE = re.compile(r"(?<!%)(?:%%)*%Z")
_TRAILING_ZONE_NAME_DIRECTIVE = re.compile(r"(?<!%)(?:%%)*%Z\Z")


class InstantParser:
    """Converts strings to tz-aware datetimes using pre-configured formats."""

    def __init__(
        self,
        timezone: str = "",
        formats: Sequence[str] = DEFAULT_FORMATS,
        *,
        render_format: str = DEFAULT_RENDER_FORMAT,
    ) -> None:
        """Create a new InstantParser.

        Args:
            timezone: Local timezone identifier. An empty string uses the
                host's configured timezone.
            formats: strptime patterns, tried in the order given.
            render_format: Rendering pattern for the DualZoneInstant values
                produced by create_timezoned_instant().

        Raises:
            InvalidConfigurationError: If formats is empty, not a sequence
                of strings, or contains a pattern strptime cannot use.
            InvalidTimezoneError: If timezone cannot be resolved.
        """
        if isinstance(formats, str) or not formats:
            raise InvalidConfigurationError(
                "formats must contain at least one date/time format string"
            )
        if not all(isinstance(fmt, str) and fmt for fmt in formats):
            raise InvalidConfigurationError(
                f"formats must be non-empty strings, got: {list(formats)!r}"
            )
        for fmt in formats:
            _validate_format(fmt)

        self._timezone_name = timezone or host_timezone_name()
        self._local_zone = resolve_zone(self._timezone_name)
        self._formats = tuple(formats)
        self._render_format = render_format

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(timezone={self._timezone_name!r}, "
            f"formats={self._formats!r})"
        )

    @property
    def formats(self) -> tuple[str, ...]:
        return self._formats

    @property
    def local_zone(self) -> tzinfo:
        """The resolved local timezone."""
        return self._local_zone

    def get_local_timezone(self) -> str:
        """Retrieve the local timezone identifier."""
        return self._timezone_name

    def now(self, timezone: str = UTC_TIMEZONE) -> datetime:
        """Return the current instant, tagged with the requested timezone.

        Args:
            timezone: Timezone identifier. "Z" is treated as "UTC".

        Raises:
            InvalidTimezoneError: If timezone cannot be resolved.
        """
        timezone = canonical_zone_name(timezone)
        zone = resolve_zone(timezone)

        current = utc_now()
        if timezone != UTC_TIMEZONE:
            current = current.astimezone(zone)
        return current

    def parse(self, text: str, timezone: str = UTC_TIMEZONE) -> datetime:
        """Parse a date/time string.

        Args:
            text: String to parse.
            timezone: Timezone the string is interpreted in when it carries no
                zone information of its own.

        Returns:
            Aware datetime in the resolved (or embedded) timezone. This is not
            necessarily UTC.

        Raises:
            InvalidTimezoneError: If timezone cannot be resolved.
            InvalidDateStringError: If no format and no ISO-8601 fallback
                matches the string.
        """
        zone = resolve_zone(timezone)
        if not text:
            raise InvalidDateStringError(text, timezone)

        for fmt in self._formats:
            try:
                parsed = datetime.strptime(text, fmt)
            except ValueError:
                continue
            logger.debug("Parsed %r with format %r", text, fmt)
            if parsed.tzinfo is None and _ZONE_NAME_DIRECTIVE.search(fmt):
                embedded = time.strptime(text, fmt).tm_zone
                if embedded:
                    zone = resolve_zone_abbreviation(embedded)
            return _attach_zone(parsed, zone, zulu=_is_zulu_pattern(fmt))

        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidDateStringError(text, timezone) from e

        logger.debug("Parsed %r with ISO-8601 fallback (no configured format matched)", text)
        return _attach_zone(parsed, zone)

    def create_datetime(self, text: str, timezone: str = UTC_TIMEZONE) -> datetime:
        """Alias of parse()."""
        return self.parse(text, timezone)

    def create_local_datetime(self, text: str, timezone: str | None = None) -> datetime:
        """Parse text, interpreting it in the local timezone unless timezone is given."""
        return self.parse(text, timezone or self._timezone_name)

    def create_timezoned_instant(
        self, text: str, timezone: str = UTC_TIMEZONE
    ) -> DualZoneInstant:
        """Parse text and pair the result with the local timezone.

        Raises:
            InvalidTimezoneError: If timezone cannot be resolved.
            InvalidDateStringError: If text cannot be parsed.
        """
        return DualZoneInstant(
            self.parse(text, timezone),
            self._local_zone,
            render_format=self._render_format,
        )


def _validate_format(fmt: str) -> None:
    try:
        datetime.strptime(_SAMPLE_INSTANT.strftime(fmt), fmt)
    except ValueError as e:
        raise InvalidConfigurationError(f"Unusable format {fmt!r}: {e}") from e


def _is_zulu_pattern(fmt: str) -> bool:
    # A trailing literal "Z" (not the %Z directive) marks the text as UTC
    return fmt.endswith("Z") and _TRAILING_ZONE_NAME_DIRECTIVE.search(fmt) is None


def _attach_zone(parsed: datetime, zone: tzinfo, *, zulu: bool = False) -> datetime:
    if parsed.tzinfo is not None:
        if parsed.utcoffset() == timedelta(0):
            return parsed.replace(tzinfo=UTC)
        return parsed
    if zulu:
        return parsed.replace(tzinfo=UTC)
    return parsed.replace(tzinfo=zone)


_default_parser: InstantParser | None = None
_default_parser_lock = threading.Lock()


def configure_default_parser(
    timezone: str = "",
    formats: Sequence[str] | None = None,
    *,
    render_format: str = DEFAULT_RENDER_FORMAT,
) -> InstantParser:
    """Create and install the process-wide parser.

    Must be called before the first get_default_parser() if non-default
    settings are wanted.

    Raises:
        InvalidConfigurationError: If the shared parser already exists, or the
            settings are invalid.
        InvalidTimezoneError: If timezone cannot be resolved.
    """
    global _default_parser
    with _default_parser_lock:
        if _default_parser is not None:
            raise InvalidConfigurationError(
                f"Default parser is already initialized: {_default_parser!r}"
            )
        _default_parser = InstantParser(
            timezone,
            DEFAULT_FORMATS if formats is None else formats,
            render_format=render_format,
        )
        logger.debug("Configured default parser: %r", _default_parser)
        return _default_parser


def get_default_parser() -> InstantParser:
    """Return the process-wide parser, creating it with defaults on first use."""
    global _default_parser
    parser = _default_parser
    if parser is not None:
        return parser

    with _default_parser_lock:
        if _default_parser is None:
            _default_parser = InstantParser()
            logger.debug("Initialized default parser: %r", _default_parser)
        return _default_parser


def reset_default_parser() -> None:
    """Drop the process-wide parser. Intended for tests."""
    global _default_parser
    with _default_parser_lock:
        _default_parser = None
