"""Main Typer application: imports and registers all CLI commands.

Entry point: ``interaktor`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from interaktor.cli.commands.describe import describe_cmd
from interaktor.cli.commands.invoke import invoke_cmd
from interaktor.config import settings

app = typer.Typer(
    name="interaktor",
    help="Interaktor: service objects with attribute contracts and lifecycle hooks.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="describe", help="Show an interaktor's attributes and hook order.")(describe_cmd)
app.command(name="invoke", help="Run an interaktor with JSON input.")(invoke_cmd)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        settings.log_level,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
