"""specsense CLI - specsense command."""

import click

from specsense import __version__
from specsense.cli.builtins import builtins_command
from specsense.cli.complete import complete_command
from specsense.config import load_config
from specsense.core.errors import SpecSenseError
from specsense.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="specsense")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """specsense - typespec completion candidates from a workspace snapshot."""
    ctx.ensure_object(dict)
    try:
        config = load_config()
    except SpecSenseError as e:
        raise click.ClickException(str(e)) from e
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    ctx.obj["config"] = config


cli.add_command(complete_command, name="complete")
cli.add_command(builtins_command, name="builtins")


if __name__ == "__main__":
    cli()
