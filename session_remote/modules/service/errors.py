from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class ServiceResponse:
    """An HTTP response triple produced by a service."""
    status: int
    headers: List[Tuple[str, str]] = field(default_factory=list)
    body: str = ""


def text_response(status: int, body: str) -> ServiceResponse:
    return ServiceResponse(status, [("Content-Type", "text/plain")], body)


def not_found() -> ServiceResponse:
    return text_response(404, "Not Found")


def internal_server_error() -> ServiceResponse:
    return text_response(500, "Internal Server Error")


class Detach(Exception):
    """
    Deliberate short-circuit carrying a complete response.

    Raised by handlers to stop processing; the service boundary returns
    the carried response as-is instead of treating it as a failure.
    """

    def __init__(self, response: ServiceResponse):
        super().__init__(f"Detached with {response.status}")
        self.response = response


class ServiceConfigurationError(ValueError):
    """The service cannot be constructed with the given session manager."""


class ResponseValidationError(RuntimeError):
    """A response did not match its own schema."""

    def __init__(self, schema_name: str, errors: List[str]):
        super().__init__(
            f"Failure validating response content against {schema_name}: " + "; ".join(errors)
        )
        self.schema_name = schema_name
        self.errors = errors


class ResponseEncodingError(RuntimeError):
    """A response could not be serialized to JSON."""
