import pytest
from cryptography.hazmat.primitives.asymmetric import rsa


@pytest.fixture
def signing_input() -> bytes:
    return b"eyJhbGciOiJIUzI1NiJ9.eyJzdWIiOiIxMjM0NTY3ODkwIn0"


@pytest.fixture
def flip_bit():
    """
    Factory fixture that returns a function.

    Usage in tests:
        tampered = flip_bit(data, index=3)
    """

    def _flip(data: bytes, index: int, bit: int = 0) -> bytes:
        out = bytearray(data)
        out[index] ^= 1 << bit
        return bytes(out)

    return _flip


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_rsa_private_key() -> rsa.RSAPrivateKey:
    """An unrelated key pair, for wrong-key checks."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)
