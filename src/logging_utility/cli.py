"""CLI entry point."""

from __future__ import annotations

import asyncio
import sys

import click
from rich.console import Console

from .config import get_settings
from .levels import LogLevel
from .logger import Logger

console = Console()
err_console = Console(stderr=True)


def _open_logger() -> Logger:
    settings = get_settings()
    try:
        return Logger.from_settings(settings)
    except OSError as exc:
        err_console.print(f"[red]FATAL: cannot prepare log file {settings.log_path}: {exc}[/red]")
        sys.exit(1)


async def _run_demo(logger: Logger) -> None:
    await logger.debug("This is a debug message.")
    await logger.info("This is an info message.")
    await logger.warn("This is a warning message.")
    await logger.error("This is an error message.")

    await logger.append("This is a manually logged info message.", LogLevel.INFORMATION)
    await logger.append(
        "This is a manually logged error message with additional data.",
        LogLevel.ERROR,
        {"ErrorCode": 123, "Details": "Something went wrong"},
    )
    await logger.append(
        "This is a critical error message with additional data.",
        LogLevel.CRITICAL,
        {"ErrorCode": 500, "Details": "Critical failure"},
    )


@click.group()
def main() -> None:
    """Logging Utility: structured JSON entries appended to one file."""


@main.command()
def init() -> None:
    """Create the configured log file and its directory."""
    logger = _open_logger()
    console.print(f"[green]Log file ready at {logger.path}[/green]")


@main.command()
def demo() -> None:
    """Write a sample entry at every level to the configured log file."""
    logger = _open_logger()
    asyncio.run(_run_demo(logger))
    console.print("[green]Logging complete. Check the log file for entries.[/green]")


if __name__ == "__main__":
    main()
