"""JSON Web Keys (RFC 7517) as published by Apple's key endpoints.

These are data-only shapes: parsing never checks that the key material is
mathematically valid. A verifier that needs real key objects can convert
them with ``to_pyjwk()`` / ``to_pyjwk_set()``.
"""

from __future__ import annotations

from typing import Final

import jwt
from jwt import PyJWK, PyJWKSet

from .errors import InvalidDocument
from .models import WireModel

APPLE_KEYS_URL: Final[str] = "https://appleid.apple.com/auth/keys"
"""Public keys used to verify Sign in with Apple identity tokens."""


class Jwk(WireModel):
    """A single JSON Web Key.

    Only ``kty`` is required. An EC key carries ``crv``/``x``/``y`` and an RSA
    key carries ``e``/``n``; neither shape is enforced here.
    """

    kty: str
    use: str | None = None
    alg: str | None = None
    kid: str | None = None

    # EC
    crv: str | None = None
    x: str | None = None
    y: str | None = None

    # RSA
    e: str | None = None
    n: str | None = None

    @property
    def family(self) -> str:
        """Key family of this JWK: "EC", "RSA", or the raw ``kty``."""
        return self.kty

    def to_pyjwk(self) -> PyJWK:
        """Convert to a PyJWT key object for signature verification.

        Raises:
            InvalidDocument: If PyJWT cannot build a key from these fields.
        """
        try:
            return PyJWK.from_dict(self.to_dict())
        except jwt.PyJWTError as e:
            raise InvalidDocument(f"Unusable JWK (kid={self.kid!r}): {e}") from e


class JwkSet(WireModel):
    """A JSON Web Key Set document: ``{"keys": [...]}``."""

    keys: tuple[Jwk, ...]

    def find(self, kid: str) -> Jwk | None:
        """Return the key whose ``kid`` equals ``kid``, or None."""
        for key in self.keys:
            if key.kid == kid:
                return key
        return None

    def to_pyjwk_set(self) -> PyJWKSet:
        """Convert to a PyJWT key set.

        Raises:
            InvalidDocument: If PyJWT finds no usable key in the set.
        """
        try:
            return PyJWKSet.from_dict(self.to_dict())
        except jwt.PyJWTError as e:
            raise InvalidDocument(f"Unusable JWK set: {e}") from e
