from typing import Any

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from jwt.algorithms import ECAlgorithm, RSAAlgorithm

from apple_services import FixedDuration


@pytest.fixture
def fixed_now() -> FixedDuration:
    return FixedDuration(secs=1_600_000_000, millis=123)


@pytest.fixture(scope="session")
def ec_private_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def make_pkcs8():
    """
    Factory fixture that serializes a private key as PKCS#8.

    Usage in tests:
        pem = make_pkcs8(ec_private_key)
        der = make_pkcs8(ec_private_key, encoding="der")
    """

    def _make(private_key: Any, *, encoding: str = "pem") -> bytes:
        enc = serialization.Encoding.PEM if encoding == "pem" else serialization.Encoding.DER
        return private_key.private_bytes(
            encoding=enc,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

    return _make


@pytest.fixture
def ec_public_jwk(ec_private_key: ec.EllipticCurvePrivateKey) -> dict[str, Any]:
    jwk: dict[str, Any] = ECAlgorithm.to_jwk(ec_private_key.public_key(), as_dict=True)
    jwk.update({"kid": "ec-1", "alg": "ES256", "use": "sig"})
    return jwk


@pytest.fixture
def rsa_public_jwk(rsa_private_key: rsa.RSAPrivateKey) -> dict[str, Any]:
    jwk: dict[str, Any] = RSAAlgorithm.to_jwk(rsa_private_key.public_key(), as_dict=True)
    jwk.update({"kid": "rsa-1", "alg": "RS256", "use": "sig"})
    return jwk
