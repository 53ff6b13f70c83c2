"""
Session Remote wire models.

These models define the exact shape of the JSON bodies exchanged on the
/begin and /finish endpoints. All objects are closed: unknown keys are
rejected, and types are strict (a number is never accepted as a string).
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


def _require_even(values: List[str]) -> List[str]:
    """Header lists alternate name, value so they must be of even length."""
    if len(values) % 2 != 0:
        raise ValueError("The array must contain an even number of values")
    return values


class HeaderListPayload(BaseModel):
    """Object carrying a flat name/value header list."""

    model_config = ConfigDict(extra="forbid", strict=True)

    headers: List[str] = Field(
        ..., description="Alternating header names and values, e.g. ['Cookie', 'session=abc']"
    )

    @field_validator("headers")
    @classmethod
    def validate_headers(cls, v):
        return _require_even(v)


class SessionPayload(BaseModel):
    """Object carrying a session id and its data."""

    model_config = ConfigDict(extra="forbid", strict=True)

    id: str = Field(..., min_length=1, description="Session identifier")
    data: Dict[str, Any] = Field(..., description="Session data")


# Request Models (API Input)


class BeginRequest(HeaderListPayload):
    """Headers the calling application received from its own client."""


class FinishRequest(SessionPayload):
    """Session id and the (possibly modified) data to save."""


# Response Models (API Output)


class BeginResponse(SessionPayload):
    """Session id and data for the caller to work with."""


class FinishResponse(HeaderListPayload):
    """Headers the caller must add to its own response."""


def _format_error(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location or 'content'}: {error['msg']}"


@dataclass(frozen=True)
class Schema:
    """
    A named shape contract backed by a pydantic model.

    Schemas are plain values so that a service can be handed a different
    set without subclassing anything.
    """

    name: str
    model: Type[BaseModel]

    def explain(self, value: Any) -> Optional[List[str]]:
        """
        Validate a decoded JSON value.

        Returns:
            None if valid, otherwise one line per mismatch
        """
        try:
            self.model.model_validate(value)
        except ValidationError as e:
            return [_format_error(error) for error in e.errors()]
        return None

    def parse(self, value: Any) -> BaseModel:
        """Validate and return the model instance (raises ValidationError)."""
        return self.model.model_validate(value)


BEGIN_REQUEST = Schema("begin-request", BeginRequest)
BEGIN_RESPONSE = Schema("begin-response", BeginResponse)
FINISH_REQUEST = Schema("finish-request", FinishRequest)
FINISH_RESPONSE = Schema("finish-response", FinishResponse)


@dataclass(frozen=True)
class ServiceSchemas:
    """The four contracts a RemoteService validates against."""

    begin_request: Schema = BEGIN_REQUEST
    begin_response: Schema = BEGIN_RESPONSE
    finish_request: Schema = FINISH_REQUEST
    finish_response: Schema = FINISH_RESPONSE
