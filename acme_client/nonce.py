# Licensed under GPL 3: https://www.gnu.org/licenses/gpl-3.0.html
"""Replay-Nonce cache and nonce source for signed ACME requests."""

import asyncio
from typing import Protocol

import aiohttp

from acme_client.config import REPLAY_NONCE_HEADER, acme_client_logger
from acme_client.errors import NonceFetchFailure, NonceHeaderMissing
from lib.util import mask_token


class NonceProvider(Protocol):  # pylint: disable=too-few-public-methods
    """Anything able to hand out a fresh, unused nonce."""

    async def next_nonce(self) -> str:
        ...


class NonceCache:
    """LIFO store of nonces received from the server but not yet used."""

    def __init__(self):
        self.lock = asyncio.Lock()
        self.nonces: list[str] = []

    def __len__(self):
        return len(self.nonces)

    async def push(self, nonce: str):
        """Store a nonce for later use."""
        async with self.lock:
            self.nonces.append(nonce)

        acme_client_logger.debug("Cached nonce: %s", mask_token(nonce))

    async def pop(self) -> tuple[str, bool]:
        """Take the most recently received nonce, or ("", False) if empty."""
        async with self.lock:
            if not self.nonces:
                return "", False
            nonce = self.nonces.pop()

        acme_client_logger.debug("Took cached nonce: %s", mask_token(nonce))
        return nonce, True


def get_nonce_from_response(response) -> str:
    """Read the Replay-Nonce header from a response."""
    nonce = response.headers.get(REPLAY_NONCE_HEADER)
    if not nonce:
        raise NonceHeaderMissing(
            "Server did not respond with a proper nonce header."
        )

    return nonce


async def fetch_nonce(transport, url: str) -> str:
    """Fetch a new nonce with a HEAD request to the given URL."""
    acme_client_logger.debug("Fetching new nonce from %s", url)
    try:
        response = await transport.head(url)
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        raise NonceFetchFailure(
            f"Failed to fetch nonce from {url}: {exc.__class__.__name__}: {exc}"
        ) from exc

    try:
        return get_nonce_from_response(response)
    except NonceHeaderMissing as exc:
        raise NonceFetchFailure(f"Failed to fetch nonce from {url}: {exc}") from exc


class NonceSource:
    """Serves nonces from the cache, falling back to the server on a miss."""

    def __init__(self, cache: NonceCache, transport, directory_url: str):
        self.cache = cache
        self.transport = transport
        self.directory_url = directory_url

    async def next_nonce(self) -> str:
        nonce, found = await self.cache.pop()
        if found:
            return nonce

        return await fetch_nonce(self.transport, self.directory_url)
