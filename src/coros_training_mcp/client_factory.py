"""
Client factory for COROS MCP server.

Builds the one CorosClient a server instance uses and renders SDK failures
for tool responses.

Session persistence:
- The AuthSession caches the token in memory for the process lifetime
- The token is also written to $COROS_CONFIG_DIR/auth.json (0600) so a
  restarted server does not need to log in again
"""

import json
import logging
import os

from coros_training_mcp.sdk.client import CorosClient
from coros_training_mcp.sdk.config import ENV_REGION, AuthConfig
from coros_training_mcp.sdk.errors import CorosError
from coros_training_mcp.sdk.session import AuthSession
from coros_training_mcp.sdk.store import TokenStore

logger = logging.getLogger(__name__)


def create_client(config: AuthConfig = None, store: TokenStore = None) -> CorosClient:
    """
    Create a COROS client backed by a fresh AuthSession.

    Args:
        config: Explicit credentials. When omitted, COROS_EMAIL /
            COROS_PASSWORD / COROS_REGION are read on first use.
        store: Token store (defaults to the per-user token file)

    Returns:
        CorosClient that logs in lazily on its first request
    """
    session = AuthSession(
        config=config,
        store=store,
        region=os.environ.get(ENV_REGION),
    )
    return CorosClient(session)


def error_response(error: CorosError) -> str:
    """
    Render an SDK failure as the JSON a tool returns.

    Args:
        error: The CorosError raised by the SDK

    Returns:
        JSON string with error message and error_code
    """
    logger.warning(f"COROS request failed: {error}")
    payload = error.to_dict()
    status = getattr(error, "status", None)
    if status == 401:
        payload["note"] = (
            "COROS rejected the session and re-authentication failed. "
            "Log in again with coros_login."
        )
    return json.dumps(payload, indent=2)
