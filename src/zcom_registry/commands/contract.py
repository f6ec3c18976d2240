"""
Contracts - add or update a contract's address, ABI and gas limit.

The ABI is read from a file and sent as text. With --save and --name the
address and ABI are written to zcom-<name>.js in the output directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import click

from ..artifacts import contract_file_name
from ..registry import DEFAULT_GAS_LIMIT
from ._common import build_registry, read_abi_file, run_operation


def _contract_options(func: Callable) -> Callable:
    func = click.option("--name", "contract_name", default="", help="Contract name used for the output file")(func)
    func = click.option("--save", is_flag=True, help="Write address and ABI variables to a js file")(func)
    func = click.option("--gas-limit", default=DEFAULT_GAS_LIMIT, type=int, show_default=True, help="Gas limit")(func)
    func = click.option(
        "--abi-file",
        required=True,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="File containing the contract ABI (JSON)",
    )(func)
    func = click.argument("address")(func)
    return func


def _report(action: str, address: str, output_dir: Path, save: bool, contract_name: str) -> None:
    click.secho(f"Contract {action}.", fg="green")
    click.echo(f"  Address: {address}")
    if not save:
        return
    if not contract_name:
        click.secho("  Not saved: no --name given.", fg="yellow")
        return
    click.echo(f"  Saved:   {output_dir / contract_file_name(contract_name)}")


@click.command("add-contract")
@_contract_options
@click.pass_context
def add_contract(
    ctx: click.Context,
    address: str,
    abi_file: Path,
    gas_limit: int,
    save: bool,
    contract_name: str,
) -> None:
    """Add the contract at ADDRESS."""
    registry = build_registry(ctx)
    abi = read_abi_file(abi_file)
    run_operation(
        registry.add_contract(address, abi, gas_limit, save_file=save, contract_name=contract_name)
    )
    _report("added", address, registry.config.output_dir, save, contract_name)


@click.command("update-contract")
@_contract_options
@click.pass_context
def update_contract(
    ctx: click.Context,
    address: str,
    abi_file: Path,
    gas_limit: int,
    save: bool,
    contract_name: str,
) -> None:
    """Update the contract at ADDRESS."""
    registry = build_registry(ctx)
    abi = read_abi_file(abi_file)
    run_operation(
        registry.update_contract(address, abi, gas_limit, save_file=save, contract_name=contract_name)
    )
    _report("updated", address, registry.config.output_dir, save, contract_name)
