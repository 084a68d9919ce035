# Licensed under GPL 3: https://www.gnu.org/licenses/gpl-3.0.html
# pylint: disable=missing-module-docstring

from .config import AcmeClientConfig, acme_client_logger
from .errors import (
    AcmeClientException,
    UnsupportedAlgorithm,
    SignerConstructionFailure,
    SigningFailure,
    NonceHeaderMissing,
    NonceFetchFailure,
    TransportFailure,
)
from .keys import KeyKind, PublicKeyRepresentation, resolve_algorithm, key_as_jwk
from .nonce import NonceCache, NonceProvider, NonceSource, get_nonce_from_response, fetch_nonce
from .jws import JWSSigner, SignedMessage
from .transport import AcmeResponse, HttpTransport
from .client import SigningClient

__all__ = [
    'AcmeClientConfig',
    'acme_client_logger',
    'AcmeClientException',
    'UnsupportedAlgorithm',
    'SignerConstructionFailure',
    'SigningFailure',
    'NonceHeaderMissing',
    'NonceFetchFailure',
    'TransportFailure',
    'KeyKind',
    'PublicKeyRepresentation',
    'resolve_algorithm',
    'key_as_jwk',
    'NonceCache',
    'NonceProvider',
    'NonceSource',
    'get_nonce_from_response',
    'fetch_nonce',
    'JWSSigner',
    'SignedMessage',
    'AcmeResponse',
    'HttpTransport',
    'SigningClient',
]
