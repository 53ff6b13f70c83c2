"""
Client for the begin/finish session exchange.

Typical use inside a web application's request handler:

    remote = RemoteClient("http://session-remote:8080")
    state = await remote.begin(request_headers)
    ... read and modify state.data ...
    for name, value in await remote.finish(state.id, state.data):
        response.headers.append(name, value)
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import httpx

from ..identity import flatten_headers, header_pairs
from ..schema import BEGIN_RESPONSE, FINISH_RESPONSE, BeginResponse, FinishResponse

logger = logging.getLogger(__name__)

HeaderInput = Union[Sequence[str], Sequence[Tuple[str, str]]]


class RemoteServiceError(Exception):
    """The remote service answered with something other than a 200."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Session remote returned {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class RemoteClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize client.

        Args:
            base_url: Base URL of the session remote service
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. ASGITransport for tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def begin(self, headers: HeaderInput) -> BeginResponse:
        """
        Fetch the session for the headers a request arrived with.

        Args:
            headers: Flat [name, value, ...] list or list of (name, value) pairs

        Returns:
            BeginResponse with id and data
        """
        payload = {"headers": self._flatten(headers)}
        content = await self._post("/begin", payload)
        return BEGIN_RESPONSE.parse(content)

    async def finish(self, session_id: str, data: Dict[str, Any]) -> List[Tuple[str, str]]:
        """
        Save session data.

        Returns:
            (name, value) header pairs to add to the outgoing response
        """
        content = await self._post("/finish", {"id": session_id, "data": data})
        result: FinishResponse = FINISH_RESPONSE.parse(content)
        return header_pairs(result.headers)

    @staticmethod
    def _flatten(headers: HeaderInput) -> List[str]:
        items = list(headers)
        if items and not isinstance(items[0], str):
            return flatten_headers(items)
        return items

    async def _post(self, path: str, payload: Dict[str, Any]) -> Any:
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        ) as client:
            response = await client.post(path, json=payload)

        if response.status_code != 200:
            logger.warning(f"Session remote {path} failed with {response.status_code}")
            raise RemoteServiceError(response.status_code, response.text)

        return response.json()
