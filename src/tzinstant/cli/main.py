from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..global_config import UTC_TIMEZONE
from .base import configure_logging
from .commands.instant import cli

configure_logging()
app = typer.Typer(
    help="Parse date/time strings into timezone-aware instants",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
)

TimezoneOption = Annotated[
    str,
    typer.Option(
        "--tz",
        "-z",
        help="Timezone the input is interpreted in when it carries none ('Z' means UTC)",
    ),
]
LocalTimezoneOption = Annotated[
    str | None,
    typer.Option(
        "--local-tz",
        "-l",
        help="Local timezone of the parser (default: profile or host timezone)",
    ),
]
FormatOption = Annotated[
    list[str] | None,
    typer.Option(
        "--format",
        "-f",
        help="strptime pattern to try, in order; repeat for several (replaces the defaults)",
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML parser profile (timezone, formats, render_format)",
        exists=True,
        dir_okay=False,
    ),
]


@app.command("now")
def now_command(timezone: TimezoneOption = UTC_TIMEZONE) -> None:
    """Print the current instant in the given timezone."""
    cli.now(timezone=timezone)


@app.command("parse")
def parse_command(
    text: Annotated[str, typer.Argument(help="Date/time string to parse")],
    timezone: TimezoneOption = UTC_TIMEZONE,
    local_tz: LocalTimezoneOption = None,
    formats: FormatOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Parse a date/time string and print the resulting instant.

    Formats are tried in order and the first full match wins; strings no
    format matches are tried as ISO-8601.
    """
    cli.parse(
        text=text,
        timezone=timezone,
        config_path=config_path,
        local_tz=local_tz,
        formats=formats,
    )


@app.command("pair")
def pair_command(
    text: Annotated[str, typer.Argument(help="Date/time string to parse")],
    timezone: TimezoneOption = UTC_TIMEZONE,
    local_tz: LocalTimezoneOption = None,
    formats: FormatOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Parse a date/time string and show it in UTC and in the local timezone.

    The rendered string is always produced from the UTC side.
    """
    cli.pair(
        text=text,
        timezone=timezone,
        config_path=config_path,
        local_tz=local_tz,
        formats=formats,
    )


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.
    """
    app()


if __name__ == "__main__":
    main()
