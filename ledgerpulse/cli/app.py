"""Main Typer application — imports and registers all CLI commands.

Entry point: ``ledgerpulse`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ledgerpulse.config import config
from ledgerpulse.cli.commands.entry_types import entry_types_cmd
from ledgerpulse.cli.commands.replay import replay_cmd

app = typer.Typer(
    name="ledgerpulse",
    help="Ledgerpulse: live ledger entry changes, grouped by entry type.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="replay", help="Replay a captured ledger stream.")(replay_cmd)
app.command(name="entry-types", help="List displayable ledger entry types.")(entry_types_cmd)


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to LEDGERPULSE_LOG_LEVEL).",
    ),
) -> None:
    """Configure logging before any subcommand runs."""
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=config.debug)],
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
