"""
COROS response envelope.

Every COROS response is wrapped as {result, apiCode, message, data}.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from coros_training_mcp.sdk.errors import ApiError, NetworkError

SUCCESS_CODE = "0000"


def is_api_success(envelope: Mapping[str, Any]) -> bool:
    """True if either result or apiCode is "0000", whatever the other says."""
    return envelope.get("result") == SUCCESS_CODE or envelope.get("apiCode") == SUCCESS_CODE


@dataclass
class ApiEnvelope:
    result: str = ""
    api_code: str = ""
    message: str = ""
    data: Any = None

    @classmethod
    def from_json(cls, payload: Any, path: str = None) -> "ApiEnvelope":
        """Wrap a decoded JSON body.

        Raises:
            NetworkError: If the body is not a JSON object
        """
        if not isinstance(payload, dict):
            raise NetworkError(
                f"Malformed response body: expected JSON object, got {type(payload).__name__}",
                path=path,
            )
        return cls(
            result=str(payload.get("result") or ""),
            api_code=str(payload.get("apiCode") or ""),
            message=str(payload.get("message") or ""),
            data=payload.get("data"),
        )

    @property
    def ok(self) -> bool:
        return is_api_success({"result": self.result, "apiCode": self.api_code})

    @property
    def code(self) -> str:
        """Whichever of result/apiCode is non-empty, result first."""
        return self.result or self.api_code

    def unwrap(self, path: str = None) -> Any:
        """Return data on success.

        Raises:
            ApiError: If the envelope signals failure
        """
        if not self.ok:
            raise ApiError(self.code, self.message or "Unknown API error", path=path)
        return self.data
