"""specsense complete command - typespec candidates for a hint."""

from pathlib import Path

import click

from specsense.cli.output import command_error, echo_candidates
from specsense.config.models import SpecSenseConfig
from specsense.core.errors import SpecSenseError
from specsense.core.logging import clear_request_id, set_request_id
from specsense.suggestion.matcher import get_matcher
from specsense.suggestion.snapshot import load_snapshot
from specsense.suggestion.type_specs import TypeSpecSuggester


@click.command()
@click.argument("hint", default="")
@click.option(
    "-s",
    "--snapshot",
    "snapshot_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML workspace snapshot (environment, file_metadata, compiled)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Max candidates shown")
@click.pass_context
def complete_command(
    ctx: click.Context, hint: str, snapshot_path: Path, as_json: bool, limit: int | None
) -> None:
    """List typespec candidates for HINT (e.g. 't', 'Bar.t', '@repo.t').

    Nothing is listed unless the snapshot's scope is a typespec scope.
    """
    config: SpecSenseConfig = ctx.obj["config"]

    try:
        snapshot = load_snapshot(snapshot_path)
    except SpecSenseError as e:
        raise command_error(e) from e

    suggester = TypeSpecSuggester(
        snapshot.registry, matcher=get_matcher(config.completion.match_mode)
    )
    set_request_id()
    try:
        candidates = suggester.suggest(hint, snapshot.environment, snapshot.file_metadata)
    finally:
        clear_request_id()

    echo_candidates(candidates, as_json=as_json, limit=limit or config.completion.max_results)
