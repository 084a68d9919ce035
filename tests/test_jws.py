"""JWSSigner construction and signing failure tests."""

import pytest

from acme_client import (
    JWSSigner,
    NonceCache,
    NonceSource,
    SignerConstructionFailure,
    SigningFailure,
    UnsupportedAlgorithm,
)
from tests.conftest import DIRECTORY_URL, FakeTransport


class StaticNonceProvider:
    def __init__(self, nonce):
        self.nonce = nonce
        self.calls = 0

    async def next_nonce(self):
        self.calls += 1
        return self.nonce


def test_signer_rejects_missing_algorithm(rsa_key):
    with pytest.raises(UnsupportedAlgorithm):
        JWSSigner(rsa_key, None)


def test_signer_construction_failure():
    with pytest.raises(SignerConstructionFailure) as exc_info:
        JWSSigner(object(), "RS256")

    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_signer_takes_nonce_from_provider(p384_key):
    provider = StaticNonceProvider("static-nonce")
    signer = JWSSigner(p384_key, "ES384")

    signed = await signer.sign(b'{"a": 1}', provider, url="https://acme.test/x")

    assert provider.calls == 1
    assert signed.protected_header["nonce"] == "static-nonce"
    assert signed.protected_header["alg"] == "ES384"
    assert signed.protected_header["jwk"]["kty"] == "EC"
    assert signed.payload == b'{"a": 1}'


@pytest.mark.asyncio
async def test_signer_refuses_empty_nonce(rsa_key):
    signer = JWSSigner(rsa_key, "RS256")

    with pytest.raises(SigningFailure):
        await signer.sign(b"{}", StaticNonceProvider(""))


@pytest.mark.asyncio
async def test_signing_failure_loses_popped_nonce(p256_key):
    cache = NonceCache()
    await cache.push("used-once")
    transport = FakeTransport()
    signer = JWSSigner(p256_key, "RS256")

    with pytest.raises(SigningFailure) as exc_info:
        await signer.sign(b"{}", NonceSource(cache, transport, DIRECTORY_URL))

    assert exc_info.value.__cause__ is not None
    assert len(cache) == 0
    assert transport.head_calls == []
