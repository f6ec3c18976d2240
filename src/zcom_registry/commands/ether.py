"""
Provide Ether - ask the faucet service to credit ether to an address.

The target is either given on the command line or, with --from-wallet,
derived from the local wallet key.
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from ..sigil.wallet import wallet_address
from ._common import build_registry, run_operation


@click.command("provide-ether")
@click.argument("address", required=False)
@click.option("--ether", required=True, type=int, help="Amount of ether to provide")
@click.option("--from-wallet", is_flag=True, help="Credit the address of the local wallet")
@click.pass_context
def provide_ether(ctx: click.Context, address: Optional[str], ether: int, from_wallet: bool) -> None:
    """Request ETHER for ADDRESS."""
    if from_wallet and address:
        raise click.UsageError("Give either ADDRESS or --from-wallet, not both.")

    if from_wallet:
        try:
            address = wallet_address()
        except ValueError as exc:
            click.secho(f"ERROR: {exc}", fg="red", err=True)
            sys.exit(1)
    elif not address:
        raise click.UsageError("Missing ADDRESS (or use --from-wallet).")

    registry = build_registry(ctx)
    response = run_operation(registry.provide_ether(address, ether))

    click.secho("Ether provided.", fg="green")
    click.echo(f"  Address: {address}")
    click.echo(f"  Amount:  {ether}")
    if response.message:
        click.echo(f"  {response.message}")
