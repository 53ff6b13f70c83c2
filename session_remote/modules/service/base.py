"""
Shared request/response plumbing for JSON services.

Subclasses implement _dispatch(); call() is the outer boundary that turns
detaches into their responses, unhandled requests into 404s, and any other
failure into an opaque 500.
"""

import logging
from typing import Any, Optional, Union

from .codec import JsonCodec
from .errors import (
    Detach,
    ResponseEncodingError,
    ResponseValidationError,
    ServiceResponse,
    internal_server_error,
    not_found,
    text_response,
)
from ..schema import Schema

logger = logging.getLogger(__name__)


class JsonService:
    def __init__(self, validate_res: bool = False, codec: Optional[JsonCodec] = None):
        """
        Args:
            validate_res: Validate response content against its schema
                before sending. Off by default; useful for debugging and
                unit testing. Failures produce a 500 and an error log.
            codec: JSON codec, a default JsonCodec if omitted
        """
        self.validate_res = validate_res
        self.codec = codec or JsonCodec()

    async def call(self, method: str, path: str, body: Union[bytes, str] = b"") -> ServiceResponse:
        """
        Handle one request.

        Returns:
            The handler's response, the detached response, a 404 when no
            handler matched, or a 500 when handling failed unexpectedly
        """
        try:
            response = await self._dispatch(method.upper(), path, body)
        except Detach as detach:
            return detach.response
        except Exception as e:
            logger.error(f"Failed to handle {method} {path}: {e}", exc_info=True)
            return internal_server_error()

        if response is None:
            return not_found()
        return response

    async def _dispatch(
        self, method: str, path: str, body: Union[bytes, str]
    ) -> Optional[ServiceResponse]:
        """Route a request; return None when nothing handles it."""
        raise NotImplementedError

    def _decode_request(self, body: Union[bytes, str], schema: Schema) -> Any:
        """Decode and validate request content, detaching with a 400 on failure."""
        try:
            content = self.codec.decode(body)
        except ValueError as e:
            raise Detach(
                text_response(400, f"The request content contained invalid JSON: {e}")
            ) from e

        errors = schema.explain(content)
        if errors:
            raise Detach(
                text_response(
                    400,
                    "The request content contained incorrectly structured JSON:\n"
                    + "".join(f"{line}\n" for line in errors),
                )
            )

        return content

    def _encode_response(self, content: Any, schema: Schema) -> ServiceResponse:
        """Optionally validate, then serialize response content."""
        if self.validate_res:
            errors = schema.explain(content)
            if errors:
                raise ResponseValidationError(schema.name, errors)

        try:
            body = self.codec.encode(content)
        except (TypeError, ValueError) as e:
            raise ResponseEncodingError(f"Failure encoding response content: {e}") from e

        return ServiceResponse(200, [("Content-Type", "application/json")], body)
