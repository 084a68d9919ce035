# Licensed under GPL 3: https://www.gnu.org/licenses/gpl-3.0.html
"""HTTP transport used to deliver signed ACME requests."""

import json
from dataclasses import dataclass
from typing import Any, Optional

import aiohttp
from multidict import CIMultiDict

from acme_client.config import AcmeClientConfig, acme_client_logger


@dataclass
class AcmeResponse:
    """Buffered HTTP response returned by the transport."""

    status: int
    headers: CIMultiDict
    body: bytes = b""
    url: str = ""

    def json(self) -> Any:
        """Decode the response body as JSON."""
        if not self.body:
            return None
        return json.loads(self.body.decode("utf-8"))


class HttpTransport:
    """Thin aiohttp wrapper performing the POST and HEAD requests."""

    def __init__(self, timeout_seconds: int = 10, user_agent: str = "vism-acme-client"):
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self._session: Optional[aiohttp.ClientSession] = None

    @classmethod
    def from_config(cls, config: AcmeClientConfig) -> 'HttpTransport':
        return cls(
            timeout_seconds=config.timeout_seconds,
            user_agent=config.user_agent,
        )

    async def get_session(self) -> aiohttp.ClientSession:
        """Create the aiohttp session on first use."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout_seconds),
                headers={"User-Agent": self.user_agent},
                raise_for_status=False,
            )
        return self._session

    async def post(self, url: str, data: bytes, content_type: str) -> AcmeResponse:
        session = await self.get_session()
        acme_client_logger.debug("POST %s", url)
        async with session.post(
                url,
                data=data,
                headers={"Content-Type": content_type}
        ) as response:
            body = await response.read()
            return AcmeResponse(
                status=response.status,
                headers=CIMultiDict(response.headers),
                body=body,
                url=str(response.url),
            )

    async def head(self, url: str) -> AcmeResponse:
        session = await self.get_session()
        acme_client_logger.debug("HEAD %s", url)
        async with session.head(url) as response:
            return AcmeResponse(
                status=response.status,
                headers=CIMultiDict(response.headers),
                url=str(response.url),
            )

    async def close(self):
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
