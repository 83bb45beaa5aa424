"""
tzinstant core package.

Provides:
- InstantParser: ordered multi-format parsing of date/time strings into
  timezone-aware datetimes, plus "now" in any timezone
- DualZoneInstant: one instant held both in UTC and in a local timezone
- A Typer-based CLI (`tzinstant.cli`)

Configuration:
- Shared defaults (formats, render pattern, UTC aliases) live in
  `tzinstant.global_config`.
- Parser profiles can be loaded from YAML with `tzinstant.config`.
"""

from .dual_zone import DualZoneInstant
from .errors import (
    InstantError,
    InvalidConfigurationError,
    InvalidDateStringError,
    InvalidTimezoneError,
)
from .parser import (
    InstantParser,
    configure_default_parser,
    get_default_parser,
    reset_default_parser,
)

__all__ = [
    "DualZoneInstant",
    "InstantError",
    "InstantParser",
    "InvalidConfigurationError",
    "InvalidDateStringError",
    "InvalidTimezoneError",
    "configure_default_parser",
    "get_default_parser",
    "reset_default_parser",
]
