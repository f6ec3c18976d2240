"""
Compile - merge the zcom-*.js variable files into one module.
"""

from __future__ import annotations

from typing import Optional

import click

from ..artifacts import COMPILED_FILE_NAME
from ._common import build_registry, reported_errors


@click.command("compile")
@click.option("--delete-inputs", is_flag=True, help="Delete the merged files afterwards")
@click.option("--file-name", default=None, help=f"Compiled file name (default: {COMPILED_FILE_NAME})")
@click.pass_context
def compile_files(ctx: click.Context, delete_inputs: bool, file_name: Optional[str]) -> None:
    """Compile the variable files of the output directory."""
    registry = build_registry(ctx)
    with reported_errors():
        target = registry.compile_output_files(delete_inputs=delete_inputs, file_name=file_name)
    click.secho(f"Compiled: {target}", fg="green")
