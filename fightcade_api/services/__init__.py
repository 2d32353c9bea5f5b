"""Service layer: transport, request building, validation and the API client."""

from .client import FightcadeClient
from .config import ConfigurationService, ValidationResult
from .errors import (
    ConfigurationError,
    ErrorCategory,
    FightcadeError,
    InvalidArgumentError,
    NotFoundError,
    RemoteError,
    SchemaValidationError,
    TransportError,
)
from .http_client import HttpClientService
from .logging import LoggingService, setup_logging
from .requests import ApiRequest, Operation, RequestBuilder, challenge_id
from .urls import replay_url, video_url

__all__ = [
    "ApiRequest",
    "ConfigurationError",
    "ConfigurationService",
    "ErrorCategory",
    "FightcadeClient",
    "FightcadeError",
    "HttpClientService",
    "InvalidArgumentError",
    "LoggingService",
    "NotFoundError",
    "Operation",
    "RemoteError",
    "RequestBuilder",
    "SchemaValidationError",
    "TransportError",
    "ValidationResult",
    "challenge_id",
    "replay_url",
    "setup_logging",
    "video_url",
]
