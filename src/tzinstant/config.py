"""Parser profiles loaded from YAML.

A profile bundles the constructor settings of an InstantParser so the CLI (or
an application) can keep them in a file:

    timezone: America/New_York
    formats:
      - "%Y-%m-%d %H:%M:%S"
      - "%Y-%m-%dT%H:%M:%S%z"
    render_format: "%Y-%m-%dT%H:%M:%SZ"

All keys are optional; missing keys fall back to the defaults in
tzinstant.global_config.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import InvalidConfigurationError
from .global_config import DEFAULT_FORMATS, DEFAULT_RENDER_FORMAT
from .parser import InstantParser

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset({"timezone", "formats", "render_format"})


@dataclass(frozen=True)
class ParserConfig:
    """Constructor settings for an InstantParser."""

    timezone: str = ""
    formats: tuple[str, ...] = DEFAULT_FORMATS
    render_format: str = DEFAULT_RENDER_FORMAT

    def with_overrides(
        self,
        *,
        timezone: str | None = None,
        formats: list[str] | tuple[str, ...] | None = None,
    ) -> ParserConfig:
        """Return a copy with the given non-empty settings replaced."""
        changes: dict[str, Any] = {}
        if timezone:
            changes["timezone"] = timezone
        if formats:
            changes["formats"] = tuple(formats)
        return replace(self, **changes)

    def build_parser(self) -> InstantParser:
        """Construct the parser described by this profile.

        Raises:
            InvalidConfigurationError: If formats is empty.
            InvalidTimezoneError: If timezone cannot be resolved.
        """
        return InstantParser(
            self.timezone,
            self.formats,
            render_format=self.render_format,
        )


def load_parser_config(path: Path) -> ParserConfig:
    """Load a parser profile from a YAML file.

    Args:
        path: Path to the YAML profile.

    Returns:
        ParserConfig with defaults filled in for missing keys.

    Raises:
        FileNotFoundError: If path does not exist.
        InvalidConfigurationError: If the document is not a mapping, has
            unknown keys, or has values of the wrong type.
    """
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidConfigurationError(
            f"Parser config {path} must be a mapping, got {type(data).__name__}"
        )

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise InvalidConfigurationError(
            f"Unknown keys in parser config {path}: {', '.join(map(str, unknown))}"
        )

    timezone = data.get("timezone") or ""
    if not isinstance(timezone, str):
        raise InvalidConfigurationError(f"timezone must be a string in {path}")

    formats = data.get("formats", list(DEFAULT_FORMATS))
    if not isinstance(formats, list) or not all(isinstance(fmt, str) for fmt in formats):
        raise InvalidConfigurationError(f"formats must be a list of strings in {path}")

    render_format = data.get("render_format", DEFAULT_RENDER_FORMAT)
    if not isinstance(render_format, str) or not render_format:
        raise InvalidConfigurationError(f"render_format must be a non-empty string in {path}")

    logger.debug("Loaded parser config from %s", path)
    return ParserConfig(
        timezone=timezone,
        formats=tuple(formats),
        render_format=render_format,
    )
