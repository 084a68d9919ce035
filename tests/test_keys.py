"""Algorithm selection and public key representation tests."""

from jwcrypto.jwk import JWK

from acme_client import KeyKind, key_as_jwk, resolve_algorithm


def test_rsa_key_selects_rs256(rsa_key):
    assert KeyKind.from_key(rsa_key) is KeyKind.RSA
    assert resolve_algorithm(rsa_key) == "RS256"


def test_p256_key_selects_es256(p256_key):
    assert KeyKind.from_key(p256_key) is KeyKind.ECDSA_P256
    assert resolve_algorithm(p256_key) == "ES256"


def test_p384_key_selects_es384(p384_key):
    assert KeyKind.from_key(p384_key) is KeyKind.ECDSA_P384
    assert resolve_algorithm(p384_key) == "ES384"


def test_other_curves_and_key_types_are_unsupported(p521_key, ed25519_key):
    for key in (p521_key, ed25519_key, "not a key", None):
        assert KeyKind.from_key(key) is KeyKind.UNSUPPORTED
        assert resolve_algorithm(key) is None


def test_every_key_kind_has_an_algorithm_entry():
    from acme_client.keys import _ALGORITHMS

    assert set(_ALGORITHMS) == set(KeyKind)


def test_key_as_jwk(rsa_key, p256_key, ed25519_key):
    rsa_repr = key_as_jwk(rsa_key.public_key())
    assert rsa_repr.algorithm == "RSA"
    assert rsa_repr.key is not None

    ec_repr = key_as_jwk(p256_key.public_key())
    assert ec_repr.algorithm == "EC"
    jwk = ec_repr.to_jwk()
    assert isinstance(jwk, JWK)
    assert jwk.export_public(as_dict=True)["crv"] == "P-256"

    assert key_as_jwk(ed25519_key.public_key()) is None
    assert key_as_jwk(rsa_key) is None
