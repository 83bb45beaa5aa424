"""CLI helpers for parsing and pairing instants."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from ...config import ParserConfig, load_parser_config
from ...global_config import UTC_TIMEZONE
from ...parser import InstantParser
from ...utils.time import zone_name
from ..base import BaseCLI


def build_parser(
    *,
    config_path: Path | None = None,
    local_tz: str | None = None,
    formats: list[str] | None = None,
) -> InstantParser:
    """Build a parser from an optional YAML profile plus command-line overrides.

    Options given on the command line take precedence over the profile.
    """
    config = load_parser_config(config_path) if config_path else ParserConfig()
    return config.with_overrides(timezone=local_tz, formats=formats).build_parser()


class InstantCLI(BaseCLI):
    """CLI helpers for the now/parse/pair commands."""

    def __init__(self) -> None:
        super().__init__("instant")

    def now(self, *, timezone: str) -> dict[str, Any]:
        return self.handle_cli_operation(
            operation="now",
            op_callable=lambda: self._now_operation(timezone=timezone),
        )

    def parse(
        self,
        *,
        text: str,
        timezone: str,
        config_path: Path | None,
        local_tz: str | None,
        formats: list[str] | None,
    ) -> dict[str, Any]:
        return self.handle_cli_operation(
            operation="parse",
            op_callable=lambda: self._parse_operation(
                text=text,
                timezone=timezone,
                parser=build_parser(
                    config_path=config_path, local_tz=local_tz, formats=formats
                ),
            ),
        )

    def pair(
        self,
        *,
        text: str,
        timezone: str,
        config_path: Path | None,
        local_tz: str | None,
        formats: list[str] | None,
    ) -> dict[str, Any]:
        """Parse text and show its UTC and local representations as a table."""
        return self.handle_cli_operation(
            operation="pair",
            op_callable=lambda: build_parser(
                config_path=config_path, local_tz=local_tz, formats=formats
            )
            .create_timezoned_instant(text, timezone)
            .to_dict(),
            render=self._render_pair,
        )

    def _now_operation(self, *, timezone: str) -> dict[str, Any]:
        # "now" needs no local zone, so the host default is never consulted
        current = InstantParser(UTC_TIMEZONE).now(timezone)
        return {
            "instant": current.isoformat(),
            "timezone": zone_name(current.tzinfo, current),
        }

    def _parse_operation(
        self, *, text: str, timezone: str, parser: InstantParser
    ) -> dict[str, Any]:
        parsed = parser.parse(text, timezone)
        return {
            "input": text,
            "instant": parsed.isoformat(),
            "timezone": zone_name(parsed.tzinfo, parsed),
        }

    @staticmethod
    def _render_pair(result: dict[str, Any]) -> None:
        table = Table(title="✓ pair")
        table.add_column("field", style="bold")
        table.add_column("value")
        for key in ("utc", "local", "local_timezone", "rendered"):
            table.add_row(key, str(result[key]))
        Console().print(table)


cli = InstantCLI()
