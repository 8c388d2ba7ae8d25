import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

import jwt_signing as m

RSA_ALGS = [
    (m.RS256, hashes.SHA256),
    (m.RS384, hashes.SHA384),
    (m.RS512, hashes.SHA512),
]


@pytest.mark.parametrize(("alg", "expected"), [(m.RS256, "RS256"), (m.RS384, "RS384"), (m.RS512, "RS512")])
def test_rsa_names(alg: m.Alg, expected: str):
    assert alg.name == expected


@pytest.mark.parametrize(("alg", "hash_cls"), RSA_ALGS)
def test_rsa_sign_is_pkcs1v15(alg: m.Alg, hash_cls, signing_input: bytes, rsa_private_key: rsa.RSAPrivateKey):
    signature = alg.sign(signing_input, rsa_private_key)

    assert len(signature) == 256
    # PKCS#1 v1.5 is deterministic, so the primitive gives the same bytes.
    assert signature == rsa_private_key.sign(signing_input, padding.PKCS1v15(), hash_cls())


@pytest.mark.parametrize(("alg", "hash_cls"), RSA_ALGS)
@pytest.mark.parametrize("message", [b"", b"x", bytes(range(256)) * 8])
def test_rsa_round_trip(alg: m.Alg, hash_cls, message: bytes, rsa_private_key: rsa.RSAPrivateKey):
    signature = alg.sign(message, rsa_private_key)
    assert alg.verify(message, signature, rsa_private_key.public_key()) is None


def test_rs256_unrelated_public_key_rejected(
    signing_input: bytes,
    rsa_private_key: rsa.RSAPrivateKey,
    other_rsa_private_key: rsa.RSAPrivateKey,
):
    signature = m.RS256.sign(signing_input, rsa_private_key)

    with pytest.raises(m.InvalidTokenSignature):
        m.RS256.verify(signing_input, signature, other_rsa_private_key.public_key())


def test_rsa_message_bit_flip_rejected(signing_input: bytes, rsa_private_key: rsa.RSAPrivateKey, flip_bit):
    signature = m.RS256.sign(signing_input, rsa_private_key)
    public_key = rsa_private_key.public_key()

    for i in range(len(signing_input)):
        with pytest.raises(m.InvalidTokenSignature):
            m.RS256.verify(flip_bit(signing_input, i), signature, public_key)


def test_rsa_signature_bit_flip_rejected(signing_input: bytes, rsa_private_key: rsa.RSAPrivateKey, flip_bit):
    signature = m.RS256.sign(signing_input, rsa_private_key)
    public_key = rsa_private_key.public_key()

    for i in range(len(signature)):
        with pytest.raises(m.InvalidTokenSignature):
            m.RS256.verify(signing_input, flip_bit(signature, i), public_key)


def test_rsa_truncated_signature_rejected(signing_input: bytes, rsa_private_key: rsa.RSAPrivateKey):
    signature = m.RS256.sign(signing_input, rsa_private_key)

    with pytest.raises(m.InvalidTokenSignature):
        m.RS256.verify(signing_input, signature[:-1], rsa_private_key.public_key())
    with pytest.raises(m.InvalidTokenSignature):
        m.RS256.verify(signing_input, b"", rsa_private_key.public_key())


def test_rsa_cross_hash_rejected(signing_input: bytes, rsa_private_key: rsa.RSAPrivateKey):
    signature = m.RS512.sign(signing_input, rsa_private_key)

    with pytest.raises(m.InvalidTokenSignature):
        m.RS256.verify(signing_input, signature, rsa_private_key.public_key())


def test_rsa_sign_requires_private_key(signing_input: bytes, rsa_private_key: rsa.RSAPrivateKey):
    with pytest.raises(m.InvalidKey):
        m.RS256.sign(signing_input, rsa_private_key.public_key())


def test_rsa_verify_requires_public_key(signing_input: bytes, rsa_private_key: rsa.RSAPrivateKey):
    signature = m.RS256.sign(signing_input, rsa_private_key)

    with pytest.raises(m.InvalidKey):
        m.RS256.verify(signing_input, signature, rsa_private_key)


@pytest.mark.parametrize("key", [b"secret", "-----BEGIN PUBLIC KEY-----", None, 65537])
def test_rsa_invalid_key_type(key, signing_input: bytes):
    with pytest.raises(m.InvalidKey):
        m.RS256.sign(signing_input, key)
    with pytest.raises(m.InvalidKey):
        m.RS256.verify(signing_input, b"\x00" * 256, key)


def test_rsa_non_bytes_signature_rejected(signing_input: bytes, rsa_private_key: rsa.RSAPrivateKey):
    with pytest.raises(m.InvalidTokenSignature):
        m.RS256.verify(signing_input, "sig", rsa_private_key.public_key())  # type: ignore[arg-type]


class _UndersizedKey:
    """Stands in for a private key whose modulus cannot hold the digest."""

    def sign(self, data, pad, algorithm):
        raise ValueError("Digest too big for RSA key")


def test_rsa_undersized_key_is_invalid(signing_input: bytes):
    rsa.RSAPrivateKey.register(_UndersizedKey)

    with pytest.raises(m.InvalidKey) as exc_info:
        m.RS512.sign(signing_input, _UndersizedKey())

    assert isinstance(exc_info.value.__cause__, ValueError)
