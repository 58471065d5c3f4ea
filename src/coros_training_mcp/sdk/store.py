"""
File-backed token store.

Persists the most recent AuthToken as JSON in a per-user config directory
with owner-only permissions. An absent or malformed file means "no stored
token", never an error.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from coros_training_mcp.sdk.config import AuthToken

logger = logging.getLogger(__name__)

ENV_CONFIG_DIR = "COROS_CONFIG_DIR"
TOKEN_FILE_NAME = "auth.json"


def default_token_path() -> Path:
    """~/.config/coros-mcp/auth.json, or $COROS_CONFIG_DIR/auth.json."""
    config_dir = os.environ.get(ENV_CONFIG_DIR)
    if config_dir:
        return Path(config_dir) / TOKEN_FILE_NAME
    return Path.home() / ".config" / "coros-mcp" / TOKEN_FILE_NAME


class TokenStore:
    """Durable storage for a single AuthToken."""

    def __init__(self, path: Path = None):
        self._path = Path(path) if path is not None else default_token_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[AuthToken]:
        """Return the stored token, or None if missing or malformed."""
        if not self._path.exists():
            return None
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (ValueError, OSError) as e:
            logger.warning(f"Ignoring unreadable token file {self._path}: {e}")
            return None

        token = AuthToken.from_dict(data)
        if token is None:
            logger.warning(f"Ignoring malformed token file {self._path}")
        return token

    def save(self, token: AuthToken) -> None:
        """Write the token with 0600 permissions.

        Raises:
            OSError: If the directory or file cannot be written
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # Create with owner-only mode so the token is never world-readable
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(token.to_dict(), f, indent=2)
        os.chmod(self._path, 0o600)

    def clear(self) -> None:
        """Remove the stored token.

        Raises:
            OSError: If the file exists but cannot be removed
        """
        self._path.unlink(missing_ok=True)
