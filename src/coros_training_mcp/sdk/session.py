"""
COROS authentication session.

Owns credential resolution, login, the in-memory token cache, the durable
token store, and re-authentication after a 401.

Token lookup order: memory cache -> token file -> login with config.
"""

import hashlib
import json
import logging
import threading
from typing import Callable, Optional

import requests

from coros_training_mcp.sdk.config import AuthConfig, AuthToken, load_auth_config, resolve_region
from coros_training_mcp.sdk.envelope import ApiEnvelope
from coros_training_mcp.sdk.errors import HttpError, NetworkError, NotAuthenticatedError
from coros_training_mcp.sdk.store import TokenStore
from coros_training_mcp.sdk.types import ACCOUNT_TYPE_EMAIL, DEFAULT_REGION, REGION_URLS, Region

logger = logging.getLogger(__name__)

LOGIN_PATH = "/account/login"

NOT_AUTHENTICATED_MESSAGE = (
    "Not authenticated. Use the coros_login tool or set "
    "COROS_EMAIL/COROS_PASSWORD env vars."
)


def md5_hash(value: str) -> str:
    """MD5 hex digest, the password scheme the COROS login endpoint expects.

    Legacy API compatibility only, not credential protection.
    """
    return hashlib.md5(value.encode()).hexdigest()


class AuthSession:
    """
    Authentication state for one COROS account.

    Logins are serialized: callers that find no token while another login
    is in flight wait for it and reuse its token.
    """

    def __init__(
        self,
        config: AuthConfig = None,
        store: TokenStore = None,
        http: requests.Session = None,
        region=None,
        config_loader: Callable[[], Optional[AuthConfig]] = load_auth_config,
    ):
        self._config = config
        self._region = resolve_region(region) if region else None
        self._store = store if store is not None else TokenStore()
        self._http = http if http is not None else requests.Session()
        self._config_loader = config_loader
        self._token: Optional[AuthToken] = None
        self._lock = threading.RLock()

    @property
    def http(self) -> requests.Session:
        return self._http

    @property
    def token(self) -> Optional[AuthToken]:
        return self._token

    @property
    def is_logged_in(self) -> bool:
        return self._token is not None

    @property
    def region(self) -> Region:
        if self._config is not None:
            return self._config.region
        if self._region is not None:
            return self._region
        config = self._config_loader()
        return config.region if config else DEFAULT_REGION

    @property
    def base_url(self) -> str:
        return REGION_URLS[self.region]

    def get_token(self) -> AuthToken:
        """
        Return a usable token, logging in if nothing is cached or stored.

        Raises:
            NotAuthenticatedError: If no token exists and no credentials are configured
            HttpError, ApiError, NetworkError: If the login itself fails
        """
        token = self._token
        if token is not None:
            return token

        with self._lock:
            if self._token is not None:
                return self._token

            stored = self._store.load()
            if stored is not None:
                self._token = stored
                return stored

            config = self._resolve_config()
            if config is None:
                raise NotAuthenticatedError(NOT_AUTHENTICATED_MESSAGE)
            return self._login(config)

    def login(self, config: AuthConfig = None) -> AuthToken:
        """
        Authenticate with COROS and cache the resulting token.

        An explicit config is remembered and reused for later re-authentication.

        POST account/login

        Raises:
            NotAuthenticatedError: If no config is given and none is configured
            HttpError: On a non-2xx response
            ApiError: If the envelope signals failure (e.g. bad credentials)
            NetworkError: On transport failure or a malformed response
        """
        with self._lock:
            if config is not None:
                self._config = config
            else:
                config = self._resolve_config()
                if config is None:
                    raise NotAuthenticatedError(NOT_AUTHENTICATED_MESSAGE)
            return self._login(config)

    def refresh_token(self, stale: AuthToken = None) -> AuthToken:
        """
        Drop the current token and re-authenticate from config.

        Args:
            stale: The token that was rejected. If another caller already
                replaced it, the replacement is returned without a new login.
        """
        with self._lock:
            if stale is not None and self._token is not None and self._token != stale:
                return self._token
            self.clear_token()
            return self.get_token()

    def clear_token(self) -> None:
        """Forget the token in memory and on disk. Never raises."""
        with self._lock:
            self._token = None
            try:
                self._store.clear()
            except OSError as e:
                logger.warning(f"Failed to clear stored COROS token: {e}")

    # ── Internal helpers ────────────────────────────────────────────────

    def _resolve_config(self) -> Optional[AuthConfig]:
        if self._config is not None:
            return self._config
        return self._config_loader()

    def _login(self, config: AuthConfig) -> AuthToken:
        url = f"{REGION_URLS[config.region]}{LOGIN_PATH}"
        body = {
            "account": config.email,
            "accountType": ACCOUNT_TYPE_EMAIL,
            "pwd": md5_hash(config.password),
        }

        try:
            response = self._http.post(
                url,
                headers={"Content-Type": "application/json"},
                data=json.dumps(body),
            )
            if not response.ok:
                raise HttpError.from_response(response, path=LOGIN_PATH)
            envelope = ApiEnvelope.from_json(response.json(), path=LOGIN_PATH)
        except (requests.RequestException, ValueError) as e:
            raise NetworkError(e, path=LOGIN_PATH) from e

        data = envelope.unwrap(path=LOGIN_PATH)
        token = AuthToken.from_dict(data)
        if token is None:
            raise NetworkError("Login response is missing accessToken/userId", path=LOGIN_PATH)

        self._token = token
        logger.info(f"Logged in to COROS ({config.region.value}) as user {token.user_id}")

        try:
            self._store.save(token)
        except OSError as e:
            # Token still works for this process, just not persisted
            logger.warning(f"Failed to persist COROS token: {e}")

        return token
