"""
Auth token resolution.

Resolution order:
1. An explicitly given secret file
2. ZCOM_AUTH_TOKEN in the environment
3. ``.zcom-secret`` in the current working directory

A secret file holds either the bare token or dotenv-style
``ZCOM_AUTH_TOKEN=...`` lines.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

TOKEN_ENV = "ZCOM_AUTH_TOKEN"
SECRET_FILE_NAME = ".zcom-secret"


def default_secret_file() -> Path:
    return Path.cwd() / SECRET_FILE_NAME


def read_secret_file(path: Path) -> str:
    """
    Read an auth token from a secret file.

    Args:
        path: Secret file location

    Returns:
        The token with surrounding whitespace removed

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Secret file not found: {path}")

    token = dotenv_values(path).get(TOKEN_ENV)
    if token:
        return token.strip()
    return path.read_text(encoding="utf-8").strip()


def load_auth_token(secret_file: Optional[Path] = None) -> Optional[str]:
    """
    Resolve the auth token.

    Args:
        secret_file: Secret file that takes precedence over the environment.

    Returns:
        The token, or None when no source provides one.
    """
    if secret_file is not None:
        return read_secret_file(secret_file)

    token = os.environ.get(TOKEN_ENV)
    if token:
        return token.strip()

    try:
        return read_secret_file(default_secret_file())
    except FileNotFoundError:
        logger.warning(
            "No %s set and no %s file in %s", TOKEN_ENV, SECRET_FILE_NAME, Path.cwd()
        )
        return None
