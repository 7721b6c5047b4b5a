"""specsense builtins command - search the builtin type catalog."""

import click

from specsense.cli.output import echo_candidates
from specsense.config.models import SpecSenseConfig
from specsense.suggestion.introspection import ModuleRegistry
from specsense.suggestion.matcher import get_matcher
from specsense.suggestion.models import Environment, FileMetadata, Scope
from specsense.suggestion.type_specs import TypeSpecSuggester


def _validate_hint(_ctx: click.Context, _param: click.Parameter, value: str) -> str:
    if "." in value:
        raise click.BadParameter(
            f"builtin types are unqualified, got {value!r}; use 'specsense complete' "
            "for module types"
        )
    return value


@click.command()
@click.argument("hint", default="", callback=_validate_hint)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def builtins_command(ctx: click.Context, hint: str, as_json: bool) -> None:
    """List basic and built-in types matching HINT.

    HINT is a bare type name such as 'str'; qualified hints are rejected.
    """
    config: SpecSenseConfig = ctx.obj["config"]
    suggester = TypeSpecSuggester(
        ModuleRegistry(), matcher=get_matcher(config.completion.match_mode)
    )
    # no module and no qualifier: only the builtin catalog can match
    env = Environment(scope=Scope.typespec("t", 0))
    candidates = suggester.suggest(hint, env, FileMetadata())
    echo_candidates(candidates, as_json=as_json, limit=config.completion.max_results)
