"""
Authentication tools for COROS MCP server.

Provides login and logout. Other tools log in lazily from the token file
or COROS_EMAIL/COROS_PASSWORD, so calling coros_login is optional.
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional

from coros_training_mcp.sdk.client import CorosClient
from coros_training_mcp.sdk.config import AuthConfig
from coros_training_mcp.sdk.errors import ApiError, CorosError, HttpError, NetworkError

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


@dataclass
class LoginResult:
    """Result of a login attempt."""
    success: bool
    user_id: Optional[str] = None
    region: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    solution: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary, excluding None values."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def coros_login(client: CorosClient, email: str = None, password: str = None, region: str = None) -> LoginResult:
    """
    Authenticate with COROS Training Hub.

    Uses explicit credentials when both email and password are given,
    otherwise the configured/env credentials.
    """
    config = None
    if email and password:
        config = AuthConfig(email=email, password=password, region=region)

    try:
        token = client.session.login(config)
    except ApiError as e:
        # 1030: wrong password, 1001: unknown account
        return LoginResult(
            success=False,
            error=f"Login failed: {e}",
            error_code="INVALID_CREDENTIALS" if e.code in ("1030", "1001") else e.error_code,
            solution="Verify your COROS account email and password at coros.com.",
        )
    except HttpError as e:
        return LoginResult(
            success=False,
            error=f"Login failed: {e}",
            error_code=e.error_code,
            solution="COROS may be experiencing an outage. Try again in a few moments.",
        )
    except NetworkError as e:
        return LoginResult(
            success=False,
            error=f"Login failed: {e}",
            error_code=e.error_code,
            solution="Check your internet connection and the configured region (us, eu, cn).",
        )
    except CorosError as e:
        return LoginResult(success=False, error=f"Login failed: {e}", error_code=e.error_code)

    return LoginResult(success=True, user_id=token.user_id, region=client.session.region.value)


def register_tools(app, client: CorosClient):
    """Register authentication tools with the MCP app."""

    @app.tool(name="coros_login")
    async def coros_login_tool(email: str = None, password: str = None, region: str = None) -> str:
        """
        Login to COROS Training Hub.

        Uses COROS_EMAIL / COROS_PASSWORD env vars by default, or the
        credentials given here. The token is cached and saved for reuse.

        Args:
            email: COROS account email (defaults to COROS_EMAIL env var)
            password: COROS account password (defaults to COROS_PASSWORD env var)
            region: COROS region: us, eu or cn (defaults to COROS_REGION env var or "us")

        Returns:
            JSON login result with user ID or error details
        """
        result = coros_login(client, email, password, region)
        if not result.success:
            logger.error(f"COROS login failed: {result.error}")
        return json.dumps(result.to_dict(), indent=2)

    @app.tool()
    async def coros_logout() -> str:
        """
        Logout from COROS.

        Forgets the cached token and deletes the saved token file.

        Returns:
            Logout confirmation
        """
        client.session.clear_token()
        return json.dumps({"success": True, "message": "Logged out"}, indent=2)

    return app
