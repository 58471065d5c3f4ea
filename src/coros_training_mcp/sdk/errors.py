"""
COROS SDK error types.

Every failure raised by the SDK is a CorosError. Tools catch CorosError at
the MCP boundary and render it via to_dict().
"""

from typing import Optional


class CorosError(Exception):
    """Base class for all COROS SDK failures."""

    error_code = "COROS_ERROR"

    def to_dict(self) -> dict:
        return {"error": str(self), "error_code": self.error_code}


class NotAuthenticatedError(CorosError):
    """No token is cached or stored and no credentials are configured."""

    error_code = "NOT_AUTHENTICATED"


class HttpError(CorosError):
    """Transport succeeded but the HTTP status signals failure."""

    error_code = "HTTP_ERROR"

    def __init__(
        self,
        status: int,
        status_text: str = "",
        body: str = "",
        path: Optional[str] = None,
    ):
        self.status = status
        self.status_text = status_text
        self.body = body
        self.path = path
        location = f" at {path}" if path else ""
        message = f"HTTP {status} {status_text}{location}".rstrip()
        if body:
            message = f"{message}: {body}"
        super().__init__(message)

    @classmethod
    def from_response(cls, response, path: Optional[str] = None) -> "HttpError":
        """Capture status and (best-effort) body text of a failed response."""
        try:
            body = response.text or ""
        except Exception:
            body = ""
        return cls(response.status_code, response.reason or "", body, path=path)


class ApiError(CorosError):
    """HTTP 2xx but the response envelope signals an application error."""

    error_code = "API_ERROR"

    def __init__(self, code: str, message: str, path: Optional[str] = None):
        self.code = code
        self.message = message
        self.path = path
        location = f" at {path}" if path else ""
        super().__init__(f"API error{location}: {message} (code: {code})")


class NetworkError(CorosError):
    """DNS, connection, timeout, or malformed response body."""

    error_code = "NETWORK_ERROR"

    def __init__(self, cause, path: Optional[str] = None):
        self.cause = cause
        self.path = path
        location = f" at {path}" if path else ""
        super().__init__(f"Request failed{location}: {cause}")


class ValidationError(CorosError, ValueError):
    """Caller input rejected before any network call."""

    error_code = "VALIDATION_ERROR"


class UnknownTemplateError(ValidationError):
    """No exercise template exists for the (sport, kind) pair."""

    def __init__(self, sport_type: int, kind: str):
        self.sport_type = sport_type
        self.kind = kind
        sport = int(sport_type) if isinstance(sport_type, int) else sport_type
        super().__init__(f"No template for sport {sport}, type {kind}")
