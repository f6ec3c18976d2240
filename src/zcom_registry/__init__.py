__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Facade
    "Registry",
    "RegistryConfig",
    # API client
    "ZcomApiClient",
    "DEFAULT_API_ROOT",
    "MAX_GAS_LIMIT",
    # Models
    "ApiResponse",
    # Validators
    "is_valid_token",
    "is_addr",
    "is_abi",
    "minify_abi",
    # Output files
    "compile_output_files",
    "write_cns_file",
    "write_contract_file",
    # Errors
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

from .errors import (
    InvalidAbiError,
    InvalidAddressError,
    InvalidAmountError,
    InvalidContractNameError,
    InvalidGasLimitError,
    InvalidTokenError,
    RegistryRejectedError,
    ResponseFormatError,
    ValidationError,
    ZcomError,
)
from .spec.models import ApiResponse
from .spec.validators import is_abi, is_addr, is_valid_token, minify_abi
from .api.client import DEFAULT_API_ROOT, MAX_GAS_LIMIT, ZcomApiClient
from .artifacts import compile_output_files, write_cns_file, write_contract_file
from .registry import Registry, RegistryConfig
