# Licensed under GPL 3: https://www.gnu.org/licenses/gpl-3.0.html
"""VISM ACME client error and exception classes."""

import logging

from lib.errors import VismException


class AcmeClientException(VismException):
    """Base exception for the ACME request signing client."""


class UnsupportedAlgorithm(AcmeClientException):
    """Raised when no signature algorithm exists for the account key."""


class SignerConstructionFailure(AcmeClientException):
    """Raised when the JWS signer can not be built for the account key."""


class SigningFailure(AcmeClientException):
    """Raised when signing the request content fails."""


class NonceHeaderMissing(AcmeClientException):
    """Raised when a response carries no usable Replay-Nonce header."""

    log_level = logging.DEBUG


class NonceFetchFailure(AcmeClientException):
    """Raised when a fresh nonce could not be fetched from the server."""


class TransportFailure(AcmeClientException):
    """Raised when the signed request could not be delivered."""
