"""Timezone resolution and instant helpers.

This module is the only place that talks to the host timezone database:
- Resolving IANA identifiers (and the "Z" alias) to tzinfo objects
- Looking up the host's configured default timezone
- Reading the current instant in UTC

Instants are always tz-aware datetimes. UTC is represented by datetime.UTC,
every other zone by a ZoneInfo instance.
"""

from __future__ import annotations

import time

from datetime import UTC, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzlocal import get_localzone_name

from ..errors import InvalidTimezoneError
from ..global_config import UTC_ALIASES, UTC_TIMEZONE, ZULU_ALIAS


def utc_now() -> datetime:
    """Return current UTC time as tz-aware datetime.

    Returns:
        Current UTC datetime with datetime.UTC.
    """
    return datetime.now(UTC)


def host_timezone_name() -> str:
    """Return the host's configured timezone identifier.

    Honors the TZ environment variable and the system configuration (via
    tzlocal). Hosts that report no timezone at all are treated as UTC.
    """
    return get_localzone_name() or UTC_TIMEZONE


def canonical_zone_name(name: str) -> str:
    """Map the Zulu alias onto "UTC"; any other identifier is returned unchanged."""
    return UTC_TIMEZONE if name == ZULU_ALIAS else name


def resolve_zone(name: str) -> tzinfo:
    """Resolve a timezone identifier against the host timezone database.

    Args:
        name: IANA identifier (e.g. "America/New_York"), "UTC" or "Z".

    Returns:
        datetime.UTC for the UTC aliases, a ZoneInfo otherwise.

    Raises:
        InvalidTimezoneError: If name is not a string or is unknown to the host.
    """
    if not isinstance(name, str) or not name:
        raise InvalidTimezoneError(name)

    if name in UTC_ALIASES:
        return UTC

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimezoneError(name) from e


def zone_name(zone: tzinfo, when: datetime | None = None) -> str:
    """Return a printable identifier for a tzinfo.

    ZoneInfo instances report their IANA key; fixed offsets report their
    tzname (e.g. "UTC" or "UTC+05:00").
    """
    if isinstance(zone, ZoneInfo):
        return zone.key
    return zone.tzname(when) or str(zone)


def is_utc(dt: datetime) -> bool:
    """Check whether an aware datetime is already tagged as UTC.

    Both datetime.UTC (and any fixed zero offset) and a ZoneInfo named
    "UTC"/"Z" count. Zones that merely happen to sit at +00:00 on that date
    (e.g. Europe/London in winter) do not.
    """
    zone = dt.tzinfo
    if zone is None:
        return False
    if isinstance(zone, ZoneInfo):
        return zone.key in UTC_ALIASES
    return zone.utcoffset(dt) == timedelta(0)


def require_aware(dt: datetime) -> datetime:
    """Reject naive datetimes.

    Raises:
        ValueError: If dt has no timezone.
    """
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError(
            f"Cannot use naive datetime {dt}. "
            "Attach a timezone or parse it with InstantParser first."
        )
    return dt


def resolve_zone_abbreviation(name: str) -> tzinfo:
    """Resolve a zone name read by strptime's %Z directive.

    strptime only accepts "UTC", "GMT" and the host's own time.tzname
    abbreviations (e.g. "EST"/"EDT"), matching them case-insensitively.
    Host abbreviations map to the host's IANA zone.

    Raises:
        InvalidTimezoneError: If name is none of the above and is not an
            IANA identifier either.
    """
    if name.upper() in ("UTC", "GMT"):
        return UTC
    if name.lower() in {abbrev.lower() for abbrev in time.tzname}:
        return resolve_zone(host_timezone_name())
    return resolve_zone(name)
