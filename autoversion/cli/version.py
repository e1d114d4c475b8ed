"""CLI commands for inspecting version strings."""

from typing import Optional

import click

from autoversion.versioning import compare_versions, increment_version, parse_version


@click.command(name="compare")
@click.argument("current")
@click.argument("previous")
def compare(current: str, previous: str):
    """Compare CURRENT with PREVIOUS and print greater, equal or less."""
    click.echo(compare_versions(current, previous).name.lower())


@click.command(name="next")
@click.argument("version", required=False)
def next_version(version: Optional[str]):
    """Print the version following VERSION (1.0.0+1 if omitted)."""
    click.echo(increment_version(parse_version(version)).raw)
