"""
Local wallet lookup for ``provide-ether --from-wallet`` and ``whoami``.

Only the address is derived from the key; nothing is signed. The key comes
from PRIVATE_KEY in the environment, else from PRIVATE_KEY in ~/.zcom/.env.
Reading the file does not touch ``os.environ``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from eth_account import Account

logger = logging.getLogger(__name__)

KEY_ENV = "PRIVATE_KEY"
ZCOM_DIR = Path.home() / ".zcom"
ZCOM_ENV = ZCOM_DIR / ".env"


def read_wallet_key(env_file: Optional[Path] = None) -> str:
    """
    Return the wallet key as 0x-prefixed hex.

    Raises:
        ValueError: If neither the environment nor ``env_file`` sets PRIVATE_KEY
    """
    env_file = Path(env_file or ZCOM_ENV)

    key = os.environ.get(KEY_ENV)
    if not key and env_file.is_file():
        key = dotenv_values(env_file).get(KEY_ENV)
        logger.debug("Wallet key read from %s", env_file)

    key = (key or "").strip()
    if not key:
        raise ValueError(f"{KEY_ENV} not found. Set it in the environment or in {env_file}")
    return key if key.startswith("0x") else "0x" + key


def wallet_address(key: Optional[str] = None) -> str:
    """Lowercase address of ``key`` (default: the configured wallet key)."""
    return Account.from_key(key or read_wallet_key()).address.lower()
