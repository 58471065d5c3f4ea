"""
Authentication data types and environment-derived configuration.

The session accepts AuthConfig as plain data. Reading the environment is
left to load_auth_config(), which the session only calls when no explicit
config was supplied.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from coros_training_mcp.sdk.types import DEFAULT_REGION, Region

logger = logging.getLogger(__name__)

ENV_EMAIL = "COROS_EMAIL"
ENV_PASSWORD = "COROS_PASSWORD"
ENV_REGION = "COROS_REGION"


@dataclass(frozen=True)
class AuthToken:
    """COROS access token plus the user it belongs to."""
    access_token: str
    user_id: str

    @property
    def is_valid(self) -> bool:
        return bool(self.access_token) and bool(self.user_id)

    def to_dict(self) -> dict:
        return {"accessToken": self.access_token, "userId": self.user_id}

    @classmethod
    def from_dict(cls, data) -> Optional["AuthToken"]:
        """Build a token from its wire/storage form, or None if malformed."""
        if not isinstance(data, dict):
            return None
        access_token = data.get("accessToken")
        user_id = data.get("userId")
        if not isinstance(access_token, str) or user_id is None:
            return None
        token = cls(access_token=access_token, user_id=str(user_id))
        return token if token.is_valid else None


@dataclass(frozen=True)
class AuthConfig:
    """Credentials and region for a COROS account. Never persisted."""
    email: str
    password: str
    region: Region = DEFAULT_REGION

    def __post_init__(self):
        object.__setattr__(self, "region", resolve_region(self.region))

    def __repr__(self) -> str:
        return f"AuthConfig(email={self.email!r}, password='***', region={self.region.value!r})"


def resolve_region(value) -> Region:
    """Coerce a region code to a Region, falling back to the default.

    Invalid input is logged, never fatal.
    """
    if isinstance(value, Region):
        return value
    if not value:
        return DEFAULT_REGION
    try:
        return Region(str(value).strip().lower())
    except ValueError:
        logger.warning(
            f"Invalid COROS region '{value}', using '{DEFAULT_REGION.value}'. "
            f"Must be one of: {', '.join(r.value for r in Region)}"
        )
        return DEFAULT_REGION


def load_auth_config(environ: Mapping[str, str] = None) -> Optional[AuthConfig]:
    """Read credentials from COROS_EMAIL / COROS_PASSWORD / COROS_REGION.

    Returns:
        AuthConfig, or None when email or password is missing
    """
    if environ is None:
        environ = os.environ
    email = environ.get(ENV_EMAIL)
    password = environ.get(ENV_PASSWORD)
    if not email or not password:
        return None
    return AuthConfig(email=email, password=password, region=environ.get(ENV_REGION))
