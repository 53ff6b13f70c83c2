import logging
from typing import Any, Dict, Optional, Union

from .base import JsonService
from .codec import JsonCodec
from .errors import ServiceConfigurationError, ServiceResponse
from ..identity import bake_cookie, resolve_session_id
from ..schema import ServiceSchemas
from ..session import CookieSessionManager, ManagerFactory
from ...config.provider import ManagerConfig

logger = logging.getLogger(__name__)


class RemoteService(JsonService):
    """
    The begin/finish session exchange.

    POST /begin   headers in  -> session id and data out
    POST /finish  id and data in -> Set-Cookie header out

    Everything else is a 404.
    """

    def __init__(
        self,
        manager: Any,
        validate_res: bool = False,
        schemas: Optional[ServiceSchemas] = None,
        codec: Optional[JsonCodec] = None,
        redis_client: Optional[Any] = None,
    ):
        """
        Initialize remote service.

        Args:
            manager: A session manager, or a ManagerConfig / dict of
                ManagerConfig arguments to build one from
            validate_res: Validate responses before sending them
            schemas: Request/response contracts, the defaults if omitted
            codec: JSON codec
            redis_client: Async Redis client for building a redis-backed manager

        Raises:
            ServiceConfigurationError: If the manager cannot issue cookies
        """
        super().__init__(validate_res=validate_res, codec=codec)

        if manager is None:
            raise ServiceConfigurationError("The manager argument is required")
        if isinstance(manager, dict):
            manager = ManagerConfig(**manager)
        if isinstance(manager, ManagerConfig):
            manager = ManagerFactory.build(manager, redis_client)

        if not hasattr(manager, "cookie_name"):
            raise ServiceConfigurationError(
                "The session manager does not support the cookie_name attribute"
            )

        session_class = getattr(manager, "session_class", None)
        if not callable(getattr(session_class, "cookie_attributes", None)):
            raise ServiceConfigurationError(
                "The session manager's sessions do not support the cookie_attributes method"
            )

        self.manager: CookieSessionManager = manager
        self.schemas = schemas or ServiceSchemas()

    async def _dispatch(
        self, method: str, path: str, body: Union[bytes, str]
    ) -> Optional[ServiceResponse]:
        if path == "/begin":
            if method == "POST":
                return await self._post_begin(body)
        elif path == "/finish":
            if method == "POST":
                return await self._post_finish(body)

        return None

    async def _post_begin(self, body: Union[bytes, str]) -> ServiceResponse:
        """
        POST /begin

        Expects {"headers": [...]} holding every header the caller received.
        Returns {"id": ..., "data": {...}} for the session named by the
        session cookie, or for a new session if there was none.
        """
        content = self._decode_request(body, self.schemas.begin_request)

        session_id = resolve_session_id(content["headers"], self.manager.cookie_name)
        session = await self.manager.lookup_or_create(session_id)

        output: Dict[str, Any] = {
            "id": session.id,
            "data": session.data,
        }

        return self._encode_response(output, self.schemas.begin_response)

    async def _post_finish(self, body: Union[bytes, str]) -> ServiceResponse:
        """
        POST /finish

        Expects {"id": ..., "data": {...}}; the data replaces the session's
        data and is saved. Returns {"headers": ["Set-Cookie", ...]} for the
        caller to include in its own response.
        """
        content = self._decode_request(body, self.schemas.finish_request)

        session = await self.manager.load(content["id"])
        session.data.clear()
        session.data.update(content["data"])
        await session.save()
        logger.debug(f"Saved session data with {len(session.data)} keys")

        output: Dict[str, Any] = {
            "headers": [
                "Set-Cookie",
                bake_cookie(self.manager.cookie_name, session.cookie_attributes()),
            ],
        }

        return self._encode_response(output, self.schemas.finish_response)
