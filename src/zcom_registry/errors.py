"""
Error hierarchy for the Z.com registry client.

Validation errors are raised before any network I/O and carry a fixed
message. Transport failures are not wrapped: ``httpx.HTTPError`` and
``json.JSONDecodeError`` reach the caller unchanged.

Each class carries the process exit code the CLI uses for it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .spec.models import ApiResponse


class ZcomError(RuntimeError):
    exit_code: int = 1


class ValidationError(ZcomError, ValueError):
    exit_code = 2
    default_message = "Invalid input"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class InvalidTokenError(ValidationError):
    default_message = "Invalid token"


class InvalidAddressError(ValidationError):
    default_message = "Invalid Address"


class InvalidAbiError(ValidationError):
    default_message = "Invalid ABI"


class InvalidGasLimitError(ValidationError):
    default_message = "Invalid gas limit value"


class InvalidAmountError(ValidationError):
    default_message = "Invalid ether amount"


class InvalidContractNameError(ValidationError):
    default_message = "Invalid contract name"


class RegistryRejectedError(ZcomError):
    """The service answered, but with a nonzero ``status``."""

    exit_code = 3

    def __init__(self, response: "ApiResponse") -> None:
        message = response.message or f"Request rejected with status {response.status}"
        super().__init__(message)
        self.response = response


class ResponseFormatError(ZcomError):
    """The service answered with JSON that is not a status object."""

    exit_code = 4


__all__ = [
    "ZcomError",
    "ValidationError",
    "InvalidTokenError",
    "InvalidAddressError",
    "InvalidAbiError",
    "InvalidGasLimitError",
    "InvalidAmountError",
    "InvalidContractNameError",
    "RegistryRejectedError",
    "ResponseFormatError",
]
