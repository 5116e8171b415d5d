"""
Typed token and request models for Apple web services.

Covers JWT authentication (header and claims for the team's signing key),
CloudKit Web Services, DeviceCheck and Sign in with Apple. The package builds
values only: signing, compact JWT encoding and HTTP are left to the caller.

High-level flow
---------------
1. Take a time snapshot (`SystemDuration.now()`, or `FixedDuration` in tests).
2. Describe the signing key with `Key`.
3. `Header.new(key)` and `Claims.new(team_id, now, exp)` derive the JWT parts.
4. Hand `header.to_dict()`, `claims.to_dict()` and the key bytes to a signer.

Example usage
-------------

.. code-block:: python

    import jwt

    from apple_services import (
        Algorithm,
        Claims,
        Header,
        Key,
        KeyId,
        Pkcs8Key,
        SystemDuration,
        TeamId,
    )

    key = Key(KeyId("ABC123DEFG"), Algorithm.ES256, Pkcs8Key.from_file("AuthKey.p8"))
    now = SystemDuration.now()
    header = Header.new(key)
    claims = Claims.new(TeamId("TEAM0123XY"), now, exp=now.as_secs() + 1200)

    token = jwt.encode(
        claims.to_dict(),
        key.data.data,
        algorithm=header.alg,
        headers=header.to_dict(),
    )
"""

# Time sources
from .clock import FixedDuration, SystemDuration

# Configuration
from .config import AppleKeyConfig

# Errors
from .errors import (
    AppleServicesError,
    ConfigurationError,
    InvalidDocument,
    InvalidKeyMaterial,
    KeyAlgorithmMismatch,
    UnknownAlgorithm,
)

# JSON Web Keys
from .jwk import APPLE_KEYS_URL, Jwk, JwkSet

# Protocols
from .protocols import DurationSinceEpoch, JsonObject, Request

# Tokens
from .tokens import Algorithm, Claims, Header, Key, KeyData, KeyId, Pkcs8Key, TeamId

__all__ = [
    # Errors
    "AppleServicesError",
    "ConfigurationError",
    "InvalidDocument",
    "InvalidKeyMaterial",
    "KeyAlgorithmMismatch",
    "UnknownAlgorithm",
    # Protocols
    "DurationSinceEpoch",
    "JsonObject",
    "Request",
    # Time sources
    "FixedDuration",
    "SystemDuration",
    # Tokens
    "Algorithm",
    "Claims",
    "Header",
    "Key",
    "KeyData",
    "KeyId",
    "Pkcs8Key",
    "TeamId",
    # JSON Web Keys
    "APPLE_KEYS_URL",
    "Jwk",
    "JwkSet",
    # Configuration
    "AppleKeyConfig",
]
