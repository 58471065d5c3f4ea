"""
Shared pytest fixtures for COROS MCP testing.
"""
import json
import pytest
from unittest.mock import Mock

from coros_training_mcp.sdk.client import CorosClient
from coros_training_mcp.sdk.config import AuthConfig, AuthToken
from coros_training_mcp.sdk.session import AuthSession
from coros_training_mcp.sdk.store import TokenStore


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict).
    This helper extracts the text from the first TextContent item.
    """
    # Handle tuple return: (content_list, metadata)
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


def make_response(payload=None, status_code=200, reason="OK", text=None):
    """Build a fake requests.Response.

    payload is what .json() returns; pass an Exception instance to make
    .json() raise it instead.
    """
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = reason
    response.text = text if text is not None else json.dumps(payload)

    def _json():
        if isinstance(payload, Exception):
            raise payload
        return payload

    response.json = Mock(side_effect=_json)
    return response


def ok_envelope(data=None):
    return {"result": "0000", "apiCode": "0000", "message": "OK", "data": data}


@pytest.fixture
def token_store(tmp_path):
    """TokenStore writing under a per-test temp directory."""
    return TokenStore(tmp_path / "coros-mcp" / "auth.json")


@pytest.fixture
def auth_config():
    return AuthConfig(email="runner@example.com", password="password", region="eu")


@pytest.fixture
def auth_token():
    return AuthToken(access_token="test_access_token", user_id="123456")


@pytest.fixture
def mock_http():
    """Stand-in for requests.Session; set .get/.post return values per test."""
    return Mock()


@pytest.fixture
def session(auth_config, token_store, mock_http):
    """AuthSession that never touches the network or the real environment."""
    return AuthSession(
        config=auth_config,
        store=token_store,
        http=mock_http,
        config_loader=lambda: None,
    )


@pytest.fixture
def logged_in_session(session, auth_token):
    session._token = auth_token
    return session


@pytest.fixture
def coros_client(logged_in_session):
    """Real CorosClient over a logged-in session with mocked HTTP."""
    return CorosClient(logged_in_session)


@pytest.fixture
def mock_sdk_client():
    """Mock client for api/ and tool tests that patch the SDK layer."""
    client = Mock(spec=CorosClient)
    client.session = Mock(spec=AuthSession)
    return client
