"""One instant held in two synchronized representations: UTC and local.

DualZoneInstant is built from any aware datetime plus a local timezone. The
instant is normalized to UTC once, and the local representation is always
derived from that UTC value, so both fields denote the same physical moment.

Rendering (``render()`` / ``str()``) is applied to the UTC side, never the
local one. A wrapper constructed with ``America/New_York`` still renders as
``2021-01-01T00:00:00Z``; use ``get_local()`` when a local string is needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from typing import Any

from .global_config import DEFAULT_RENDER_FORMAT
from .utils.time import is_utc, require_aware, resolve_zone, zone_name


@dataclass(frozen=True, init=False)
class DualZoneInstant:
    """An instant stored both in UTC and in a local timezone."""

    utc: datetime
    local: datetime
    render_format: str = DEFAULT_RENDER_FORMAT

    def __init__(
        self,
        instant: datetime,
        local_timezone: str | tzinfo,
        render_format: str = DEFAULT_RENDER_FORMAT,
    ) -> None:
        """Create a new DualZoneInstant.

        Args:
            instant: Aware datetime in any timezone. Instants already tagged
                UTC are stored unchanged; others are converted to UTC.
            local_timezone: Identifier ("America/New_York", "Z", ...) or a
                tzinfo to project the instant into.
            render_format: strftime pattern used by render() and __str__().

        Raises:
            ValueError: If instant is naive.
            InvalidTimezoneError: If local_timezone is an unknown identifier.
        """
        require_aware(instant)
        local_zone = (
            resolve_zone(local_timezone)
            if isinstance(local_timezone, str)
            else local_timezone
        )

        utc = instant if is_utc(instant) else instant.astimezone(UTC)

        object.__setattr__(self, "utc", utc)
        object.__setattr__(self, "local", utc.astimezone(local_zone))
        object.__setattr__(self, "render_format", render_format)

    def get_utc(self) -> datetime:
        """Retrieve the stored instant in UTC."""
        return self.utc

    def get_local(self) -> datetime:
        """Retrieve the stored instant in the local timezone."""
        return self.local

    @property
    def local_timezone(self) -> str:
        return zone_name(self.local.tzinfo, self.local)

    def render(self) -> str:
        """Format the UTC instant with render_format."""
        return self.utc.strftime(self.render_format)

    def to_dict(self) -> dict[str, Any]:
        """Return both representations as ISO-8601 strings plus the rendered form."""
        return {
            "utc": self.utc.isoformat(),
            "local": self.local.isoformat(),
            "local_timezone": self.local_timezone,
            "rendered": self.render(),
        }

    def __str__(self) -> str:
        return self.render()
