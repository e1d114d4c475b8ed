"""autoversion CLI"""

import click

from autoversion import __version__
from autoversion.cli.run import plan, run
from autoversion.cli.version import compare, next_version

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="autoversion")
@click.pass_context
def cli(ctx):
    """
    Keep a manifest version and its release tags in step.
    """
    ctx.ensure_object(dict)


# Add subcommands to the CLI
cli.add_command(add_debug_option(run))
cli.add_command(add_debug_option(plan))
cli.add_command(compare)
cli.add_command(next_version)

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
