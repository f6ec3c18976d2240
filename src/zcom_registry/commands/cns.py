"""
Register CNS - register the address of a contract naming service.

With --save the address is also written to zcom-cns.js in the output
directory as ``const CNS_ADDRESS = '...';``.
"""

from __future__ import annotations

import click

from ..artifacts import CNS_FILE_NAME
from ._common import build_registry, run_operation


@click.command("register-cns")
@click.argument("address")
@click.option("--save", is_flag=True, help=f"Write the address to {CNS_FILE_NAME}")
@click.pass_context
def register_cns(ctx: click.Context, address: str, save: bool) -> None:
    """Register ADDRESS as the CNS address."""
    registry = build_registry(ctx)
    run_operation(registry.register_cns(address, save_file=save))

    click.secho("CNS address registered.", fg="green")
    click.echo(f"  Address: {address}")
    if save:
        click.echo(f"  Saved:   {registry.config.output_dir / CNS_FILE_NAME}")
