"""Action outputs for a reconciliation result."""

from pathlib import Path
from typing import Optional

import click

from autoversion.versioning import ReconciliationResult


def emit_outputs(result: ReconciliationResult, dest: Optional[Path] = None) -> None:
    """
    Echo the outputs and append them to the GitHub Actions output file.

    Args:
        result: The result to report
        dest: Path of the GITHUB_OUTPUT file, if running inside an action
    """
    outputs = result.as_outputs()
    for key, value in outputs.items():
        click.echo(f"{key}={value}")

    if dest is None:
        return

    with Path(dest).open("a", encoding="utf-8") as fh:
        for key, value in outputs.items():
            fh.write(f"{key}={value}\n")
