from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import Any

import typer

_LOGGING_CONFIGURED = False


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure CLI-wide logging once.

    Safe to call multiple times; only configures on first call.

    Args:
        level: Logging level (defaults to WARNING; library modules only log
            at DEBUG).
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger hooked into the shared CLI configuration."""
    return logging.getLogger(name)


@contextmanager
def handle_errors(
    operation: str,
    *,
    logger: logging.Logger | None = None,
) -> Generator[None, None, None]:
    """Provide consistent exception handling for CLI operations.

    Catches exceptions, logs them, prints a user-friendly error message and
    exits with code 1. typer.Exit is re-raised unchanged.

    Args:
        operation: Human-readable operation name for error messages.
        logger: Logger instance. Defaults to module logger if None.

    Raises:
        typer.Exit: Always exits with code 1 on exception.

    Logs:
        - ERROR: "Error during {operation}" with full exception traceback.

    User Output:
        - Prints "✗ {operation} failed: {exc}" in red.
    """
    logger = logger or get_logger(__name__)
    try:
        yield
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error during %s", operation)
        typer.secho(f"✗ {operation} failed: {exc}", fg=typer.colors.RED)
        raise typer.Exit(1) from exc


def format_result(result: dict[str, Any], *, operation: str) -> str:
    """Format an operation result into CLI-friendly text.

    Args:
        result: Mapping of field name to value, listed in insertion order.
        operation: Operation name shown on the first line.

    Returns:
        Formatted string ready for CLI display.
    """
    lines = [f"✓ {operation}"]
    lines.extend(f"  {key}: {value}" for key, value in result.items())
    return "\n".join(lines)


class BaseCLI:
    """Utility base class for CLI command groups."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        self.logger = get_logger(__name__)

    def handle_cli_operation(
        self,
        *,
        operation: str,
        op_callable: Callable[[], Any],
        render: Callable[[Any], None] | None = None,
    ) -> Any:
        """Run an operation with consistent logging, formatting, and errors.

        Args:
            operation: Human-readable operation name for error handling.
            op_callable: Callable that performs the operation and returns
                a result.
            render: Optional callable that displays the result itself
                instead of the default format_result() text.

        Returns:
            Result from op_callable.

        User Output:
            - The rendered result, or format_result() output via typer.echo().
            - Error messages handled by handle_errors context manager.
        """
        with handle_errors(operation, logger=self.logger):
            result = op_callable()

        if render is not None:
            render(result)
        else:
            typer.echo(format_result(result, operation=operation))
        return result

