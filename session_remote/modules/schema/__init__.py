"""
Schema Module - Black Box Interface

Purpose: Shape contracts for the begin/finish request and response bodies
Interface: Schema.explain(), Schema.parse(), ServiceSchemas
Hidden: Validation library, error formatting

Schemas are values, so a service can be handed a different set for testing.
"""

from .models import (
    BEGIN_REQUEST,
    BEGIN_RESPONSE,
    FINISH_REQUEST,
    FINISH_RESPONSE,
    BeginRequest,
    BeginResponse,
    FinishRequest,
    FinishResponse,
    Schema,
    ServiceSchemas,
)

__all__ = [
    "Schema",
    "ServiceSchemas",
    "BeginRequest",
    "BeginResponse",
    "FinishRequest",
    "FinishResponse",
    "BEGIN_REQUEST",
    "BEGIN_RESPONSE",
    "FINISH_REQUEST",
    "FINISH_RESPONSE",
]
