# Licensed under GPL 3: https://www.gnu.org/licenses/gpl-3.0.html
"""Signature algorithm selection for ACME account keys."""

import enum
from dataclasses import dataclass
from typing import Any, Optional

from cryptography.hazmat.primitives.asymmetric import ec, rsa
from jwcrypto.jwk import JWK


class KeyKind(enum.Enum):
    """Supported account key types."""

    RSA = "RSA"
    ECDSA_P256 = "ECDSA_P256"
    ECDSA_P384 = "ECDSA_P384"
    UNSUPPORTED = "UNSUPPORTED"

    @classmethod
    def from_key(cls, key: Any) -> 'KeyKind':
        """Classify a private key handle."""
        if isinstance(key, rsa.RSAPrivateKey):
            return cls.RSA

        if isinstance(key, ec.EllipticCurvePrivateKey):
            return _CURVES.get(key.curve.name, cls.UNSUPPORTED)

        return cls.UNSUPPORTED


_CURVES = {
    ec.SECP256R1.name: KeyKind.ECDSA_P256,
    ec.SECP384R1.name: KeyKind.ECDSA_P384,
}

_ALGORITHMS: dict[KeyKind, Optional[str]] = {
    KeyKind.RSA: "RS256",
    KeyKind.ECDSA_P256: "ES256",
    KeyKind.ECDSA_P384: "ES384",
    KeyKind.UNSUPPORTED: None,
}


def resolve_algorithm(key: Any) -> Optional[str]:
    """Return the JWS algorithm for a private key, or None if unsupported."""
    return _ALGORITHMS[KeyKind.from_key(key)]


@dataclass(frozen=True)
class PublicKeyRepresentation:
    """Public key together with its JWK key type."""

    key: Any
    algorithm: str

    def to_jwk(self) -> JWK:
        """Convert to a public jwcrypto JWK."""
        return JWK.from_pyca(self.key)


def key_as_jwk(key: Any) -> Optional[PublicKeyRepresentation]:
    """Wrap a public key for use as a JWK, or None for unknown key types."""
    if isinstance(key, ec.EllipticCurvePublicKey):
        return PublicKeyRepresentation(key=key, algorithm="EC")
    if isinstance(key, rsa.RSAPublicKey):
        return PublicKeyRepresentation(key=key, algorithm="RSA")

    return None
