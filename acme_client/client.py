# Licensed under GPL 3: https://www.gnu.org/licenses/gpl-3.0.html
"""Client that signs ACME requests and keeps the nonce supply topped up."""

import asyncio
from typing import Any, Optional

import aiohttp

from acme_client.config import (
    JOSE_CONTENT_TYPE,
    AcmeClientConfig,
    acme_client_logger,
)
from acme_client.errors import (
    NonceHeaderMissing,
    TransportFailure,
    UnsupportedAlgorithm,
)
from acme_client.jws import JWSSigner, SignedMessage
from acme_client.keys import KeyKind, resolve_algorithm
from acme_client.nonce import NonceCache, NonceSource, get_nonce_from_response
from acme_client.transport import AcmeResponse, HttpTransport
from lib.logs import setup_logger
from lib.util import mask_token


class SigningClient:
    """
    Signs and posts ACME requests for a single account key.

    Every request carries a nonce taken from the shared NonceCache, or
    fetched from the directory URL when the cache is empty. Nonces returned
    by the server on POST responses are put back into the cache.
    """

    def __init__(
            self,
            private_key: Any,
            directory_url: str,
            transport: Optional[HttpTransport] = None,
            nonce_cache: Optional[NonceCache] = None,
            key_id: Optional[str] = None,
    ):
        self.private_key = private_key
        self.directory_url = directory_url
        self.transport = transport if transport is not None else HttpTransport()
        self.nonces = nonce_cache if nonce_cache is not None else NonceCache()
        self.key_id = key_id
        self.nonce_source = NonceSource(
            self.nonces, self.transport, self.directory_url
        )

    @classmethod
    def from_config(
            cls,
            config: AcmeClientConfig,
            private_key: Any,
            key_id: Optional[str] = None
    ) -> 'SigningClient':
        """Build a client and its transport from configuration and install its logging."""
        acme_client_logger.info("Setting up logging")
        setup_logger(config.logging)
        return cls(
            private_key=private_key,
            directory_url=config.directory_url,
            transport=HttpTransport.from_config(config),
            key_id=key_id,
        )

    async def next_nonce(self) -> str:
        return await self.nonce_source.next_nonce()

    async def sign_content(self, content: bytes, url: Optional[str] = None) -> SignedMessage:
        """Sign content with the account key and a fresh nonce."""
        algorithm = resolve_algorithm(self.private_key)
        if algorithm is None:
            raise UnsupportedAlgorithm(
                f"Unsupported account key: {KeyKind.from_key(self.private_key).value} "
                f"({type(self.private_key).__name__})"
            )

        signer = JWSSigner(self.private_key, algorithm, key_id=self.key_id)
        return await signer.sign(content, self.nonce_source, url=url)

    async def post(self, url: str, content: bytes) -> AcmeResponse:
        """Sign content and POST it to url as application/jose+json."""
        signed_content = await self.sign_content(content, url=url)

        try:
            response = await self.transport.post(
                url,
                signed_content.serialize().encode("utf-8"),
                JOSE_CONTENT_TYPE,
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportFailure(
                f"POST to {url} failed: {exc.__class__.__name__}: {exc}"
            ) from exc

        acme_client_logger.info("POST %s returned %s", url, response.status)

        try:
            nonce = get_nonce_from_response(response)
        except NonceHeaderMissing:
            acme_client_logger.warning(
                "Response from %s did not include a Replay-Nonce header", url
            )
            return response

        await self.nonces.push(nonce)
        acme_client_logger.debug("Stored nonce %s from %s", mask_token(nonce), url)
        return response

    async def close(self):
        await self.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
