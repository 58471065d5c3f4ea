"""
COROS Training Hub Low-Level SDK.

Thin typed wrapper over the COROS HTTP API: authentication session,
authenticated transport, and 1:1 endpoint functions.
"""

from coros_training_mcp.sdk.client import CorosClient
from coros_training_mcp.sdk.config import AuthConfig, AuthToken, load_auth_config
from coros_training_mcp.sdk.envelope import ApiEnvelope, is_api_success
from coros_training_mcp.sdk.errors import (
    CorosError,
    NotAuthenticatedError,
    HttpError,
    ApiError,
    NetworkError,
    ValidationError,
    UnknownTemplateError,
)
from coros_training_mcp.sdk.session import AuthSession
from coros_training_mcp.sdk.store import TokenStore
from coros_training_mcp.sdk.types import (
    Region,
    SportType,
    ExerciseType,
    TargetType,
    IntensityType,
    EXERCISE_TEMPLATES,
    SORT_NO_BASE,
    SORT_NO_CHILD,
)

__all__ = [
    "CorosClient",
    "AuthSession",
    "AuthConfig",
    "AuthToken",
    "TokenStore",
    "load_auth_config",
    "ApiEnvelope",
    "is_api_success",
    "CorosError",
    "NotAuthenticatedError",
    "HttpError",
    "ApiError",
    "NetworkError",
    "ValidationError",
    "UnknownTemplateError",
    "Region",
    "SportType",
    "ExerciseType",
    "TargetType",
    "IntensityType",
    "EXERCISE_TEMPLATES",
    "SORT_NO_BASE",
    "SORT_NO_CHILD",
]
