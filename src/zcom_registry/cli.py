"""
zcom CLI

Command-line interface for the Z.com blockchain control-plane API.

The auth token comes from --secret-file, ZCOM_AUTH_TOKEN, or a
.zcom-secret file in the current directory, in that order.

Commands:
  confirm-token    - Check the auth token
  register-cns     - Register the CNS address
  add-contract     - Add a contract (address + ABI + gas limit)
  update-contract  - Update a contract
  provide-ether    - Request ether for an address
  compile          - Merge saved variable files into one module
  whoami           - Show the resolved configuration
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .api.client import DEFAULT_API_ROOT
from .registry import API_URL_ENV, OUTPUT_DIR_ENV, RegistryConfig
from .sigil.wallet import wallet_address
from .utils import mask_secret


# ============ Banner ============


def _print_banner() -> None:
    click.echo(
        click.style("  ◆ ", fg="cyan")
        + click.style("Z C O M", fg="bright_white", bold=True)
        + click.style(f"  v{__version__}", dim=True)
    )
    click.secho("  Contract registry client", fg="cyan")
    click.echo()


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("zcom_registry").setLevel(level)


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="zcom")
@click.option(
    "--api-url",
    envvar=API_URL_ENV,
    default=DEFAULT_API_ROOT,
    show_default=True,
    help="Root URL of the API",
)
@click.option(
    "--secret-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File holding the auth token (overrides ZCOM_AUTH_TOKEN)",
)
@click.option(
    "--output-dir",
    envvar=OUTPUT_DIR_ENV,
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for saved variable files (default: current directory)",
)
@click.option("--verbose", "-v", count=True, help="Log progress (-vv for HTTP detail)")
@click.pass_context
def cli(
    ctx: click.Context,
    api_url: str,
    secret_file: Optional[Path],
    output_dir: Optional[Path],
    verbose: int,
) -> None:
    """Z.com contract registry client."""
    _configure_logging(verbose)

    obj = ctx.ensure_object(dict)
    obj["api_url"] = api_url
    obj["secret_file"] = secret_file
    obj["output_dir"] = output_dir

    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .commands.token import confirm_token
from .commands.cns import register_cns
from .commands.contract import add_contract, update_contract
from .commands.ether import provide_ether
from .commands.compile import compile_files

cli.add_command(confirm_token)
cli.add_command(register_cns)
cli.add_command(add_contract)
cli.add_command(update_contract)
cli.add_command(provide_ether)
cli.add_command(compile_files)


# ============ Identity ============


@cli.command()
@click.pass_context
def whoami(ctx: click.Context) -> None:
    """Show the API root, token and wallet in use."""
    obj = ctx.ensure_object(dict)
    config = RegistryConfig.from_env(
        secret_file=obj.get("secret_file"),
        output_dir=obj.get("output_dir"),
        api_root=obj.get("api_url"),
    )

    click.echo(f"API root:   {config.api_root}")
    click.echo(f"Token:      {mask_secret(config.auth_token)}")
    click.echo(f"Output dir: {config.output_dir}")

    try:
        click.echo(f"Wallet:     {wallet_address()}")
    except ValueError:
        click.echo("Wallet:     (not configured)")


# ============ Entry Points ============


def main() -> None:
    """zcom CLI entry point."""
    # Ensure UTF-8 output on Windows (for the banner symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass
    cli()


if __name__ == "__main__":
    main()
