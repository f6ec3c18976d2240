from __future__ import annotations

import asyncio
import json
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Coroutine, Iterator, TypeVar

import click
import httpx

from ..errors import ZcomError
from ..registry import Registry

T = TypeVar("T")

TRANSPORT_EXIT_CODE = 4


def build_registry(ctx: click.Context) -> Registry:
    """Build the facade from the options stored on the root command."""
    obj = ctx.ensure_object(dict)
    return Registry.from_env(
        secret_file=obj.get("secret_file"),
        output_dir=obj.get("output_dir"),
        api_root=obj.get("api_url"),
        transport=obj.get("transport"),
    )


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn failures inside the block into an error line and exit code."""
    try:
        yield
    except ZcomError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)
    except httpx.HTTPError as exc:
        click.secho(f"ERROR: Request failed: {exc}", fg="red", err=True)
        sys.exit(TRANSPORT_EXIT_CODE)
    except json.JSONDecodeError as exc:
        click.secho(f"ERROR: Response is not JSON: {exc}", fg="red", err=True)
        sys.exit(TRANSPORT_EXIT_CODE)
    except OSError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(1)


def run_operation(coro: Coroutine[Any, Any, T]) -> T:
    with reported_errors():
        return asyncio.run(coro)


def read_abi_file(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8")
