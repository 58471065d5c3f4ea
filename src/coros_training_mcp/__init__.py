"""
MCP Server for the COROS Training Hub workout library and calendar.

Provides tools to authenticate with COROS, manage saved workouts, and
schedule them on the training calendar via the Model Context Protocol (MCP).

This server uses a non-public API from COROS Training Hub.
The API could change without notice.
"""

from fastmcp import FastMCP

from coros_training_mcp import auth_tool
from coros_training_mcp import schedule
from coros_training_mcp import workouts
from coros_training_mcp.client_factory import create_client
from coros_training_mcp.sdk.client import CorosClient


def create_app(client: CorosClient = None) -> FastMCP:
    """Create and configure the MCP app with all tools registered.

    All tools share one client, and so one AuthSession and token cache.
    """
    if client is None:
        client = create_client()

    app = FastMCP("COROS Training Hub Workouts v0.1")

    # Register auth tools (login, logout)
    app = auth_tool.register_tools(app, client)

    # Register workout library tools
    app = workouts.register_tools(app, client)

    # Register calendar tools
    app = schedule.register_tools(app, client)

    return app
