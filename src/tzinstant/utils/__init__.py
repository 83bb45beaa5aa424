"""Utility modules.

This package provides the timezone helpers shared by the parser, the
dual-zone wrapper and the CLI.
"""

from .time import (
    canonical_zone_name,
    host_timezone_name,
    is_utc,
    require_aware,
    resolve_zone,
    resolve_zone_abbreviation,
    utc_now,
    zone_name,
)

__all__ = [
    "canonical_zone_name",
    "host_timezone_name",
    "is_utc",
    "require_aware",
    "resolve_zone",
    "resolve_zone_abbreviation",
    "utc_now",
    "zone_name",
]
