"""
HTTP transport

aiohttp implementation of `IMemberTransport.req`. Requests are sent once;
failures surface as `TransportException` subclasses without retry.
"""

import asyncio
import json
from typing import Any, Optional

import aiohttp

from ...domain.exceptions import TransportAPIException, TransportConnectionException
from ...domain.repositories.transport_repository import IMemberTransport
from ...shared.constants import BOT_TOKEN_HEADER, SESSION_TOKEN_HEADER
from ...utils.logger import logger, request_trace
from ..config.config_manager import ConfigManager


class HttpTransport(IMemberTransport):
    """
    aiohttp transport

    Attributes:
        config (ConfigManager): API URL, token and timeout source
    """

    def __init__(
        self,
        config: ConfigManager,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.config = config
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> aiohttp.ClientSession:
        """Create the client session on first use"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    def _headers(self) -> dict[str, str]:
        token = self.config.get_token()
        if not token:
            return {}
        header = BOT_TOKEN_HEADER if self.config.is_bot() else SESSION_TOKEN_HEADER
        return {header: token}

    async def req(
        self,
        method: str,
        path: str,
        data: Optional[dict] = None,
    ) -> Any:
        url = f"{self.config.get_api_url()}{path}"
        timeout = aiohttp.ClientTimeout(total=self.config.get_timeout_seconds())

        with request_trace("req"):
            logger.debug(f"{method} {path}")
            try:
                async with self._get_session().request(
                    method,
                    url,
                    json=data,
                    headers=self._headers(),
                    timeout=timeout,
                ) as resp:
                    raw = await resp.read()
                    status = resp.status
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.warning(f"{method} {path} failed: {e}")
                raise TransportConnectionException(str(e) or type(e).__name__, method, path) from e

            body = self._decode(raw)
            if not 200 <= status < 300:
                logger.warning(f"{method} {path} returned HTTP {status}")
                raise TransportAPIException(status, body, method, path)
            return body

    @staticmethod
    def _decode(raw: bytes) -> Any:
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            return raw.decode("utf-8", errors="replace")

    async def close(self) -> None:
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None
