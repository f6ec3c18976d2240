"""
Confirm Token - check that the configured auth token is accepted.
"""

from __future__ import annotations

import click

from ._common import build_registry, run_operation


@click.command("confirm-token")
@click.pass_context
def confirm_token(ctx: click.Context) -> None:
    """Ask the service whether the configured token is valid."""
    registry = build_registry(ctx)
    response = run_operation(registry.confirm_token())

    click.secho("Token confirmed.", fg="green")
    if response.message:
        click.echo(f"  {response.message}")
