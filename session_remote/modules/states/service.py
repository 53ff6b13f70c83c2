"""
REST access to individual session states.

Lets other services (in any language) read, replace or delete a session
by id:

    GET    /states/{id}  -> 200 with the state's data as JSON
    PUT    /states/{id}  -> replaces the state's data, 204
    DELETE /states/{id}  -> deletes the state, 204
"""

import logging
import re
from typing import Any, Dict, Optional, Union

from pydantic import ConfigDict, RootModel

from ..schema import Schema
from ..service import JsonService, ServiceResponse
from ..service.codec import JsonCodec

logger = logging.getLogger(__name__)

STATE_PATH = re.compile(r"^/states/([^/]+)$")


class StateData(RootModel[Dict[str, Any]]):
    """A session's data: any JSON object."""

    model_config = ConfigDict(strict=True)


STATE_DATA = Schema("state-data", StateData)


class StatesService(JsonService):
    def __init__(self, manager: Any, validate_res: bool = False, codec: Optional[JsonCodec] = None):
        """
        Args:
            manager: Session manager providing load()
            validate_res: Validate state data before sending it
            codec: JSON codec
        """
        super().__init__(validate_res=validate_res, codec=codec)
        self.manager = manager

    async def _dispatch(
        self, method: str, path: str, body: Union[bytes, str]
    ) -> Optional[ServiceResponse]:
        match = STATE_PATH.match(path)
        if not match:
            return None

        session_id = match.group(1)

        if method == "GET":
            session = await self.manager.load(session_id)
            return self._encode_response(session.data, STATE_DATA)

        if method == "PUT":
            data = self._decode_request(body, STATE_DATA)
            session = await self.manager.load(session_id)
            session.data.clear()
            session.data.update(data)
            await session.save()
            return ServiceResponse(204)

        if method == "DELETE":
            session = await self.manager.load(session_id)
            await session.delete()
            logger.info("Deleted session state via REST API")
            return ServiceResponse(204)

        return None
