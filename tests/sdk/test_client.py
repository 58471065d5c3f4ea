"""Tests for SDK client (HTTP transport, auth headers, 401 retry)."""

import json

import pytest
import requests
from unittest.mock import Mock

from coros_training_mcp.sdk.client import CorosClient, auth_headers
from coros_training_mcp.sdk.config import AuthToken
from coros_training_mcp.sdk.errors import (
    ApiError,
    HttpError,
    NetworkError,
    NotAuthenticatedError,
    ValidationError,
)
from coros_training_mcp.sdk.session import AuthSession
from tests.conftest import make_response, ok_envelope


def _unauthorized():
    return make_response(status_code=401, reason="Unauthorized", text="token expired")


def _login_ok(access_token="renewed"):
    return make_response(ok_envelope({"accessToken": access_token, "userId": "123456"}))


class TestAuthHeaders:
    def test_headers(self):
        headers = auth_headers(AuthToken(access_token="my_token", user_id="123"))
        assert headers["Content-Type"] == "application/json"
        assert headers["accessToken"] == "my_token"
        assert json.loads(headers["yfheader"]) == {"userId": "123"}


class TestMakeRequest:
    def test_get_returns_data(self, coros_client, mock_http):
        mock_http.get.return_value = make_response(ok_envelope({"ok": True}))

        result = coros_client.get("/training/program/detail", {"id": "1"})

        assert result == {"ok": True}
        args, kwargs = mock_http.get.call_args
        assert args[0] == "https://teameuapi.coros.com/training/program/detail"
        assert kwargs["params"] == {"id": "1"}
        assert kwargs["headers"]["accessToken"] == "test_access_token"
        assert json.loads(kwargs["headers"]["yfheader"]) == {"userId": "123456"}

    def test_post_serializes_json(self, coros_client, mock_http):
        mock_http.post.return_value = make_response(ok_envelope([]))

        coros_client.post("/training/program/query", {"name": "", "startNo": 0})

        data = mock_http.post.call_args.kwargs["data"]
        assert json.loads(data) == {"name": "", "startNo": 0}

    def test_raw_body_sent_byte_for_byte(self, coros_client, mock_http):
        mock_http.post.return_value = make_response(ok_envelope(None))

        coros_client.post_raw("/training/program/delete", "[123456789012345678]")

        assert mock_http.post.call_args.kwargs["data"] == b"[123456789012345678]"

    def test_rejects_both_bodies(self, coros_client, mock_http):
        with pytest.raises(ValidationError):
            coros_client.make_request("POST", "/x", json_data={}, raw_body="[]")
        mock_http.post.assert_not_called()

    @pytest.mark.parametrize("method", ["PUT", "DELETE", "PATCH"])
    def test_rejects_unsupported_method(self, coros_client, mock_http, method):
        with pytest.raises(ValidationError, match=method):
            coros_client.make_request(method, "/training/program/delete", raw_body="[1]")
        mock_http.post.assert_not_called()
        mock_http.get.assert_not_called()

    def test_method_is_case_insensitive(self, coros_client, mock_http):
        mock_http.get.return_value = make_response(ok_envelope({"ok": True}))
        assert coros_client.make_request("get", "/x") == {"ok": True}

    def test_success_if_either_code_is_0000(self, coros_client, mock_http):
        mock_http.get.return_value = make_response(
            {"result": "1001", "apiCode": "0000", "message": "", "data": 7}
        )
        assert coros_client.get("/x") == 7

        mock_http.get.return_value = make_response(
            {"result": "0000", "apiCode": "1001", "message": "", "data": 8}
        )
        assert coros_client.get("/x") == 8

    def test_api_error_with_http_200(self, coros_client, mock_http):
        mock_http.get.return_value = make_response(
            {"result": "1001", "apiCode": "1001", "message": "Bad request"}
        )
        with pytest.raises(ApiError) as exc_info:
            coros_client.get("/training/schedule/query")
        assert exc_info.value.code == "1001"
        assert "Bad request" in str(exc_info.value)
        assert "1001" in str(exc_info.value)
        assert "/training/schedule/query" in str(exc_info.value)

    def test_http_error_keeps_body(self, coros_client, mock_http):
        mock_http.post.return_value = make_response(
            status_code=500, reason="Internal Server Error", text="upstream exploded",
        )
        with pytest.raises(HttpError) as exc_info:
            coros_client.post("/training/program/add", {})
        assert exc_info.value.status == 500
        assert "upstream exploded" in str(exc_info.value)

    def test_non_json_body_is_network_error(self, coros_client, mock_http):
        mock_http.get.return_value = make_response(ValueError("Expecting value"), text="<html>")
        with pytest.raises(NetworkError):
            coros_client.get("/x")

    def test_non_object_body_is_network_error(self, coros_client, mock_http):
        mock_http.get.return_value = make_response(["not", "an", "object"])
        with pytest.raises(NetworkError, match="Malformed"):
            coros_client.get("/x")

    def test_connection_error(self, coros_client, mock_http):
        mock_http.get.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(NetworkError, match="connection refused"):
            coros_client.get("/x")

    def test_not_authenticated_before_any_request(self, token_store, mock_http):
        session = AuthSession(store=token_store, http=mock_http, config_loader=lambda: None)
        client = CorosClient(session)
        with pytest.raises(NotAuthenticatedError):
            client.get("/x")
        mock_http.get.assert_not_called()


class TestUnauthorizedRetry:
    def test_retries_once_after_reauth(self, coros_client, mock_http):
        mock_http.get.side_effect = [_unauthorized(), make_response(ok_envelope({"n": 1}))]
        mock_http.post.return_value = _login_ok("renewed")

        result = coros_client.get("/x")

        assert result == {"n": 1}
        assert mock_http.get.call_count == 2
        assert mock_http.post.call_count == 1  # the login
        retry_headers = mock_http.get.call_args_list[1].kwargs["headers"]
        assert retry_headers["accessToken"] == "renewed"

    def test_second_401_is_not_retried(self, coros_client, mock_http):
        mock_http.get.side_effect = [_unauthorized(), _unauthorized()]
        mock_http.post.return_value = _login_ok()

        with pytest.raises(HttpError) as exc_info:
            coros_client.get("/x")

        assert exc_info.value.status == 401
        assert mock_http.get.call_count == 2

    def test_refresh_failure_propagates(self, coros_client, mock_http):
        mock_http.get.return_value = _unauthorized()
        mock_http.post.return_value = make_response(
            {"result": "1030", "apiCode": "1030", "message": "Incorrect password"}
        )

        with pytest.raises(ApiError, match="Incorrect password"):
            coros_client.get("/x")

        assert mock_http.get.call_count == 1

    def test_retry_resends_same_body(self, coros_client, mock_http):
        mock_http.post.side_effect = [
            _unauthorized(),
            _login_ok(),
            make_response(ok_envelope(None)),
        ]

        coros_client.post_raw("/training/program/delete", "[1,2]")

        first = mock_http.post.call_args_list[0].kwargs["data"]
        retried = mock_http.post.call_args_list[2].kwargs["data"]
        assert first == retried == b"[1,2]"

    def test_other_errors_are_not_retried(self, coros_client, mock_http):
        mock_http.get.return_value = make_response(status_code=403, reason="Forbidden", text="")
        with pytest.raises(HttpError):
            coros_client.get("/x")
        assert mock_http.get.call_count == 1
        mock_http.post.assert_not_called()


class TestClientDefaults:
    def test_session_property(self, logged_in_session):
        client = CorosClient(logged_in_session)
        assert client.session is logged_in_session

    def test_region_routing(self, token_store, auth_token):
        http = Mock()
        http.get.return_value = make_response(ok_envelope({}))
        session = AuthSession(store=token_store, http=http, region="us", config_loader=lambda: None)
        session._token = auth_token

        CorosClient(session).get("/x")

        assert http.get.call_args.args[0] == "https://teamapi.coros.com/x"
