"""
Registry facade.

Wraps ``ZcomApiClient`` with credential resolution, status interpretation
and the optional variable-file side effects. A response whose ``status`` is
not 0 becomes a ``RegistryRejectedError``; validation and transport errors
are logged and re-raised.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Awaitable, Optional

import httpx

from . import artifacts
from .api.client import DEFAULT_API_ROOT, ZcomApiClient
from .errors import InvalidContractNameError, RegistryRejectedError, ZcomError
from .sigil.credentials import load_auth_token, read_secret_file
from .spec.models import ApiResponse

logger = logging.getLogger(__name__)

API_URL_ENV = "ZCOM_API_URL"
OUTPUT_DIR_ENV = "ZCOM_OUTPUT_DIR"
DEFAULT_GAS_LIMIT = 100_000


@dataclass(frozen=True)
class RegistryConfig:
    api_root: str = DEFAULT_API_ROOT
    auth_token: Optional[str] = field(default=None, repr=False)
    output_dir: Path = field(default_factory=Path.cwd)

    @classmethod
    def from_env(
        cls,
        secret_file: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        api_root: Optional[str] = None,
    ) -> "RegistryConfig":
        """
        Build a config from arguments, falling back to the environment.

        Args:
            secret_file: Secret file that overrides ZCOM_AUTH_TOKEN
            output_dir: Output directory (default: ZCOM_OUTPUT_DIR or cwd)
            api_root: API root (default: ZCOM_API_URL or the public endpoint)
        """
        if output_dir is None:
            env_dir = os.environ.get(OUTPUT_DIR_ENV)
            output_dir = Path(env_dir) if env_dir else Path.cwd()

        return cls(
            api_root=api_root or os.environ.get(API_URL_ENV) or DEFAULT_API_ROOT,
            auth_token=load_auth_token(secret_file),
            output_dir=Path(output_dir),
        )

    def with_secret_file(self, secret_file: Path) -> "RegistryConfig":
        return replace(self, auth_token=read_secret_file(secret_file))

    def with_output_dir(self, output_dir: Path) -> "RegistryConfig":
        return replace(self, output_dir=Path(output_dir))


class Registry:
    """High-level registry operations bound to one ``RegistryConfig``."""

    def __init__(
        self,
        config: RegistryConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self.client = ZcomApiClient(config.api_root, transport=transport)

    @classmethod
    def from_env(
        cls,
        secret_file: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        api_root: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "Registry":
        config = RegistryConfig.from_env(
            secret_file=secret_file,
            output_dir=output_dir,
            api_root=api_root,
        )
        return cls(config, transport=transport)

    async def _call(self, operation: str, request: Awaitable[Any]) -> ApiResponse:
        try:
            response = ApiResponse.from_dict(await request)
        except (ZcomError, httpx.HTTPError, json.JSONDecodeError) as exc:
            logger.error("%s failed: %s", operation, exc)
            raise

        if not response.accepted:
            logger.error("%s rejected (status %s): %s", operation, response.status, response.message)
            raise RegistryRejectedError(response)
        return response

    async def confirm_token(self) -> ApiResponse:
        return await self._call(
            "Token confirmation",
            self.client.confirm_token(self.config.auth_token),
        )

    async def confirm_token_or_exit(self) -> ApiResponse:
        """Confirm the token, terminating the process if that fails."""
        try:
            return await self.confirm_token()
        except (ZcomError, httpx.HTTPError, json.JSONDecodeError):
            sys.exit(1)

    async def register_cns(self, address: str, save_file: bool = False) -> ApiResponse:
        response = await self._call(
            "CNS registration",
            self.client.register_cns_address(address, self.config.auth_token),
        )
        logger.info("CNS address: %s", address)

        if save_file:
            path = artifacts.write_cns_file(self.config.output_dir, address)
            logger.info("CNS address variable was saved in %s", path)
        return response

    async def add_contract(
        self,
        address: str,
        abi: str,
        gas_limit: int = DEFAULT_GAS_LIMIT,
        save_file: bool = False,
        contract_name: str = "",
    ) -> ApiResponse:
        self._check_save_target("Contract registration", save_file, contract_name)
        response = await self._call(
            "Contract registration",
            self.client.add_contract(address, abi, gas_limit, self.config.auth_token),
        )
        self._after_contract(address, abi, save_file, contract_name)
        return response

    async def update_contract(
        self,
        address: str,
        abi: str,
        gas_limit: int = DEFAULT_GAS_LIMIT,
        save_file: bool = False,
        contract_name: str = "",
    ) -> ApiResponse:
        self._check_save_target("Contract update", save_file, contract_name)
        response = await self._call(
            "Contract update",
            self.client.update_contract(address, abi, gas_limit, self.config.auth_token),
        )
        self._after_contract(address, abi, save_file, contract_name)
        return response

    def _check_save_target(self, operation: str, save_file: bool, contract_name: str) -> None:
        if not (save_file and contract_name):
            return
        try:
            artifacts.check_contract_name(contract_name)
        except InvalidContractNameError as exc:
            logger.error("%s failed: %s", operation, exc)
            raise

    def _after_contract(self, address: str, abi: str, save_file: bool, contract_name: str) -> None:
        logger.info("Contract address: %s", address)
        logger.info("ABI: %s", abi)

        if not save_file:
            return
        if not contract_name:
            logger.error("Could not save contract! There is no contract name provided")
            return
        self.save_contract_to_file(contract_name, address, abi)

    async def provide_ether(self, address: str, ether: int) -> ApiResponse:
        response = await self._call(
            "Ether request",
            self.client.provide_ether(address, ether, self.config.auth_token),
        )
        logger.info(response.message)
        return response

    def save_contract_to_file(self, contract_name: str, address: str, abi: str) -> Path:
        path = artifacts.write_contract_file(self.config.output_dir, contract_name, address, abi)
        logger.info("Contract address and abi variable was saved in %s", path)
        return path

    def compile_output_files(
        self,
        delete_inputs: bool = False,
        file_name: Optional[str] = None,
    ) -> Path:
        return artifacts.compile_output_files(
            self.config.output_dir,
            delete_inputs=delete_inputs,
            file_name=file_name,
        )
