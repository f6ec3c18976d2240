"""
Async client for the Z.com blockchain control-plane API.

Every operation is one HTTP round trip with a JSON body. Preconditions are
checked in order before any network I/O and the first failure raises its
``ValidationError``. A 2xx response is returned as its parsed JSON body,
whatever its ``status`` field says; deciding whether the registry accepted
the request is left to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..errors import (
    InvalidAbiError,
    InvalidAddressError,
    InvalidAmountError,
    InvalidGasLimitError,
    InvalidTokenError,
)
from ..spec.validators import is_abi, is_addr, is_valid_token

logger = logging.getLogger(__name__)

DEFAULT_API_ROOT = "https://cp.blockchain.z.com/api/v1"
MAX_GAS_LIMIT = 4_000_000


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_token(token: Any) -> None:
    if not is_valid_token(token):
        raise InvalidTokenError()


def _check_address(address: Any) -> None:
    if not is_addr(address):
        raise InvalidAddressError()


def _check_contract(address: Any, abi: Any, gas_limit: Any) -> None:
    _check_address(address)
    if not is_abi(abi):
        raise InvalidAbiError()
    if not _is_int(gas_limit) or gas_limit <= 0 or gas_limit > MAX_GAS_LIMIT:
        raise InvalidGasLimitError()


class ZcomApiClient:
    """
    Stateless API client bound to a root URL.

    Args:
        api_root: Root URL of the API, without trailing slash.
        transport: Optional httpx transport (tests inject ``httpx.MockTransport``).
    """

    def __init__(
        self,
        api_root: str = DEFAULT_API_ROOT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_root = api_root.rstrip("/")
        self.transport = transport

    def __repr__(self) -> str:
        return f"ZcomApiClient(api_root={self.api_root!r})"

    async def _send(self, method: str, path: str, body: dict[str, Any]) -> Any:
        url = f"{self.api_root}/{path}"
        logger.debug("%s %s", method, url)

        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.request(method, url, json=body)
            response.raise_for_status()
            return response.json()

    async def confirm_token(self, auth_token: str) -> Any:
        """POST ``/check-token``."""
        _check_token(auth_token)
        return await self._send("POST", "check-token", {"authToken": auth_token})

    async def register_cns_address(self, address: str, auth_token: str) -> Any:
        """POST ``/cns`` to register a CNS address."""
        _check_token(auth_token)
        _check_address(address)
        return await self._send(
            "POST",
            "cns",
            {"address": address, "authToken": auth_token},
        )

    async def add_contract(
        self,
        address: str,
        abi: str,
        gas_limit: int,
        auth_token: str,
    ) -> Any:
        """
        POST ``/contracts`` to add a new contract.

        Args:
            address: Contract address (lowercase hex)
            abi: Contract ABI as JSON text
            gas_limit: Gas limit, 1 to 4,000,000
            auth_token: Authentication token
        """
        _check_token(auth_token)
        _check_contract(address, abi, gas_limit)
        return await self._send(
            "POST",
            "contracts",
            {
                "address": address,
                "abi": abi,
                "gasLimit": gas_limit,
                "authToken": auth_token,
            },
        )

    async def update_contract(
        self,
        address: str,
        abi: str,
        gas_limit: int,
        auth_token: str,
    ) -> Any:
        """
        PUT ``/contracts/{address}`` to update a contract.

        The address travels in the path only; the body carries the ABI,
        gas limit and token.
        """
        _check_token(auth_token)
        _check_contract(address, abi, gas_limit)
        return await self._send(
            "PUT",
            f"contracts/{address}",
            {
                "abi": abi,
                "gasLimit": gas_limit,
                "authToken": auth_token,
            },
        )

    async def provide_ether(self, address: str, ether: int, auth_token: str) -> Any:
        """POST ``/provide-ether`` to credit ``ether`` to ``address``."""
        _check_token(auth_token)
        _check_address(address)
        if not _is_int(ether) or ether <= 0:
            raise InvalidAmountError()
        return await self._send(
            "POST",
            "provide-ether",
            {"address": address, "ether": ether, "authToken": auth_token},
        )
