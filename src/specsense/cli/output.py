"""Candidate rendering and error reporting shared by CLI commands."""

import json
from collections.abc import Sequence

import click
import structlog
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from specsense.core.errors import SpecSenseError
from specsense.core.logging import get_log_file_path
from specsense.suggestion.models import Candidate

log = structlog.get_logger()


def echo_candidates(
    candidates: Sequence[Candidate], *, as_json: bool, limit: int | None = None
) -> None:
    """Print candidates as a rich table or a JSON array."""
    shown = list(candidates[:limit]) if limit else list(candidates)

    if as_json:
        click.echo(json.dumps([c.to_dict() for c in shown], indent=2))
        return

    console = Console()
    if not shown:
        console.print("[dim]No candidates[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Type")
    table.add_column("Origin", style="cyan")
    table.add_column("Spec")
    for c in shown:
        # cell text is literal; specs use [...] list syntax
        table.add_row(
            escape(f"{c.name}/{c.arity}"),
            escape(c.origin) if c.origin else "(builtin)",
            escape(c.spec),
        )
    console.print(table)

    hidden = len(candidates) - len(shown)
    if hidden > 0:
        console.print(f"[dim]... {hidden} more[/dim]")


def command_error(error: SpecSenseError) -> click.ClickException:
    """Wrap a SpecSenseError for click, pointing at the log file when one is configured."""
    log_file = get_log_file_path()
    if log_file is None:
        return click.ClickException(str(error))

    log.error("cli.command_failed", **error.to_dict())
    return click.ClickException(f"{error}. See {log_file} for details.")
