# Licensed under GPL 3: https://www.gnu.org/licenses/gpl-3.0.html
"""JWS signing of ACME request bodies."""

import json
from typing import Any, Optional

from jwcrypto import jws as _jws
from jwcrypto.jwk import JWK

from acme_client.config import acme_client_logger
from acme_client.errors import (
    SignerConstructionFailure,
    SigningFailure,
    UnsupportedAlgorithm,
)
from acme_client.keys import key_as_jwk
from acme_client.nonce import NonceProvider
from lib.util import b64u_decode, mask_token


class SignedMessage:
    """A signed JWS envelope ready to be sent to the server."""

    def __init__(self, signature: _jws.JWS):
        self.signature = signature

    def serialize(self) -> str:
        """Flattened JSON serialization (protected, payload, signature)."""
        return self.signature.serialize(compact=False)

    def to_dict(self) -> dict[str, Any]:
        return json.loads(self.serialize())

    @property
    def protected_header(self) -> dict[str, Any]:
        """Decoded protected header."""
        return json.loads(
            b64u_decode(self.to_dict()["protected"]).decode("utf-8")
        )

    @property
    def payload(self) -> bytes:
        return b64u_decode(self.to_dict().get("payload", ""))


class JWSSigner:
    """
    Signs request content with the account key.

    The nonce is always taken from the NonceProvider passed to sign(); a
    signature is never produced without one.
    """

    def __init__(self, private_key: Any, algorithm: Optional[str], key_id: Optional[str] = None):
        if algorithm is None:
            raise UnsupportedAlgorithm(
                f"No signature algorithm for key type {type(private_key).__name__}"
            )

        self.algorithm = algorithm
        self.key_id = key_id

        try:
            self.jwk = JWK.from_pyca(private_key)
            public_key = key_as_jwk(private_key.public_key())
            if public_key is None:
                raise TypeError(f"Unsupported public key type for {type(private_key).__name__}")
            self.public_jwk = public_key.to_jwk().export_public(as_dict=True)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            raise SignerConstructionFailure(
                f"Failed to create {algorithm} signer: {exc}"
            ) from exc

    def protected_header(self, nonce: str, url: Optional[str] = None) -> dict[str, Any]:
        """Build the protected header, using kid once an account exists."""
        header = {"alg": self.algorithm, "nonce": nonce}
        if url is not None:
            header["url"] = url

        if self.key_id:
            header["kid"] = self.key_id
        else:
            header["jwk"] = self.public_jwk

        return header

    async def sign(
            self,
            content: bytes,
            nonce_provider: NonceProvider,
            url: Optional[str] = None
    ) -> SignedMessage:
        """Sign content with a nonce taken from the nonce provider."""
        nonce = await nonce_provider.next_nonce()
        if not nonce:
            raise SigningFailure("Nonce provider returned an empty nonce")

        try:
            signature = _jws.JWS(content)
            signature.add_signature(
                self.jwk,
                alg=self.algorithm,
                protected=json.dumps(self.protected_header(nonce, url)),
            )
        except Exception as exc:  # pylint: disable=broad-exception-caught
            raise SigningFailure(
                f"Failed to sign content with {self.algorithm}: {exc}"
            ) from exc

        acme_client_logger.debug(
            "Signed %d bytes with %s, nonce %s",
            len(content), self.algorithm, mask_token(nonce)
        )
        return SignedMessage(signature)
