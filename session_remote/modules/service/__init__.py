"""
Service Module - Black Box Interface

Purpose: The begin/finish session exchange
Interface: RemoteService.call(method, path, body) -> ServiceResponse
Hidden: Routing, body decoding, schema validation, error boundary

Transport-agnostic: the API layer only forwards method, path and body.
"""

from .base import JsonService
from .codec import JsonCodec
from .errors import (
    Detach,
    ResponseEncodingError,
    ResponseValidationError,
    ServiceConfigurationError,
    ServiceResponse,
    internal_server_error,
    not_found,
    text_response,
)
from .service import RemoteService

__all__ = [
    "RemoteService",
    "JsonService",
    "JsonCodec",
    "ServiceResponse",
    "Detach",
    "ServiceConfigurationError",
    "ResponseValidationError",
    "ResponseEncodingError",
    "text_response",
    "not_found",
    "internal_server_error",
]
