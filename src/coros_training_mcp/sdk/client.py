"""
COROS Training Hub HTTP Client.

Handles HTTP transport, auth headers, region routing, and error handling.
Tokens come from an AuthSession; all domain-specific endpoint calls live in
the sibling modules (programs, schedule).
"""

import json
import logging
from typing import Any, Dict

import requests

from coros_training_mcp.sdk.config import AuthToken
from coros_training_mcp.sdk.envelope import ApiEnvelope
from coros_training_mcp.sdk.errors import HttpError, NetworkError, ValidationError
from coros_training_mcp.sdk.session import AuthSession

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST")


def auth_headers(token: AuthToken) -> Dict[str, str]:
    """Headers required on every authenticated COROS call."""
    return {
        "Content-Type": "application/json",
        "accessToken": token.access_token,
        "yfheader": json.dumps({"userId": token.user_id}),
    }


class CorosClient:
    """
    COROS Training Hub HTTP transport.

    On a 401 the session re-authenticates and the request is retried exactly
    once. Every other failure is raised unchanged.
    """

    def __init__(self, session: AuthSession = None):
        self._auth = session if session is not None else AuthSession()

    @property
    def session(self) -> AuthSession:
        return self._auth

    def make_request(
        self,
        method: str,
        path: str,
        json_data: Any = None,
        raw_body: str = None,
        params: Dict[str, str] = None,
    ) -> Any:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method (GET/POST)
            path: API path starting with "/" (e.g. "/training/program/query")
            json_data: Body to serialize as JSON
            raw_body: Pre-serialized JSON sent byte-for-byte
            params: Query parameters (string values)

        Returns:
            The envelope's data field

        Raises:
            ValidationError: If the method is not GET/POST, or both bodies are given
            NotAuthenticatedError: If no token can be obtained
            HttpError: On a non-2xx response
            ApiError: If the envelope signals failure
            NetworkError: On transport failure or a malformed response
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValidationError(f"Unsupported HTTP method '{method}', use GET or POST")
        if json_data is not None and raw_body is not None:
            raise ValidationError("Pass either json_data or raw_body, not both")

        if raw_body is not None:
            body = raw_body
        elif json_data is not None:
            body = json.dumps(json_data)
        else:
            body = None

        token = self._auth.get_token()
        try:
            return self._send(method, path, body, params, token)
        except HttpError as e:
            if e.status != 401:
                raise
            logger.info(f"COROS returned 401 at {path}, re-authenticating")
            token = self._auth.refresh_token(stale=token)
            return self._send(method, path, body, params, token)

    def get(self, path: str, params: Dict[str, str] = None) -> Any:
        return self.make_request("GET", path, params=params)

    def post(self, path: str, json_data: Any = None, params: Dict[str, str] = None) -> Any:
        return self.make_request("POST", path, json_data=json_data, params=params)

    def post_raw(self, path: str, raw_body: str) -> Any:
        return self.make_request("POST", path, raw_body=raw_body)

    def _send(
        self,
        method: str,
        path: str,
        body: str,
        params: Dict[str, str],
        token: AuthToken,
    ) -> Any:
        url = f"{self._auth.base_url}{path}"
        headers = auth_headers(token)
        http = self._auth.http

        try:
            if method == "GET":
                response = http.get(url, headers=headers, params=params)
            else:
                data = body.encode("utf-8") if body is not None else None
                response = http.post(url, headers=headers, params=params, data=data)

            if not response.ok:
                raise HttpError.from_response(response, path=path)
            envelope = ApiEnvelope.from_json(response.json(), path=path)
        except (requests.RequestException, ValueError) as e:
            raise NetworkError(e, path=path) from e

        return envelope.unwrap(path=path)
