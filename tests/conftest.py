"""Shared fixtures for ACME client tests."""

import logging

import aiohttp
import pytest
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa
from multidict import CIMultiDict

from acme_client import AcmeResponse, NonceCache, SigningClient

DIRECTORY_URL = "https://acme.test/acme/new-nonce"


class FakeTransport:
    """Records requests and replays canned responses."""

    def __init__(self, head_nonces=None, post_headers=None, post_error=None, head_error=None):
        self.head_nonces = list(head_nonces or [])
        self.post_headers = post_headers if post_headers is not None else {}
        self.post_error = post_error
        self.head_error = head_error
        self.head_calls = []
        self.post_calls = []
        self.closed = False

    async def head(self, url):
        self.head_calls.append(url)
        if self.head_error is not None:
            raise self.head_error

        headers = CIMultiDict()
        if self.head_nonces:
            headers["Replay-Nonce"] = self.head_nonces.pop(0)
        return AcmeResponse(status=200, headers=headers, url=url)

    async def post(self, url, data, content_type):
        self.post_calls.append((url, data, content_type))
        if self.post_error is not None:
            raise self.post_error

        return AcmeResponse(
            status=201,
            headers=CIMultiDict(self.post_headers),
            body=b'{"status": "valid"}',
            url=url,
        )

    async def close(self):
        self.closed = True


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def p256_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def p384_key():
    return ec.generate_private_key(ec.SECP384R1())


@pytest.fixture(scope="session")
def p521_key():
    return ec.generate_private_key(ec.SECP521R1())


@pytest.fixture(scope="session")
def ed25519_key():
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture
def transport():
    return FakeTransport(head_nonces=["head-nonce-1", "head-nonce-2"])


@pytest.fixture
def client_factory():
    def _make(key, transport, **kwargs):
        return SigningClient(key, DIRECTORY_URL, transport=transport, nonce_cache=NonceCache(), **kwargs)
    return _make


@pytest.fixture
def connection_error():
    return aiohttp.ClientConnectionError("connection refused")


@pytest.fixture(autouse=True)
def restore_loggers():
    """Undo setup_logger changes to the client loggers after each test."""
    loggers = [logging.getLogger(name) for name in ("vism_acme_client", "vism_shared")]
    saved = [(logger, list(logger.handlers), logger.level, logger.propagate) for logger in loggers]

    yield

    for logger, handlers, level, propagate in saved:
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate
