"""Errors raised while building Apple service tokens and request models.

All errors inherit from AppleServicesError so application code can catch a
single exception type. Parse failures are chained (``raise ... from``) to the
underlying JSON or pydantic error so the original cause stays visible.
"""

from __future__ import annotations


class AppleServicesError(Exception):
    """Base exception for every failure surfaced by this package."""


class UnknownAlgorithm(AppleServicesError, ValueError):  # noqa: N818
    """Raised when an algorithm name matches none of the registered tags.

    Matching is exact: ``"es256"`` or ``" ES256"`` are rejected just like
    ``"HS256"``. Callers typically treat this as an unsupported key and reject
    it.

    Attributes:
        algorithm: The text that failed to parse, unmodified.
    """

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"Unknown signing algorithm: {algorithm!r}")
        self.algorithm = algorithm


class KeyAlgorithmMismatch(AppleServicesError):  # noqa: N818
    """Raised by Key.checked() when key material and algorithm disagree.

    For example an RSA key paired with ES256.

    Attributes:
        algorithm: Name of the requested algorithm.
        family: Key family detected from the material ("EC", "RSA", ...).
    """

    def __init__(self, algorithm: str, family: str) -> None:
        super().__init__(f"{family} key material cannot be used with {algorithm}")
        self.algorithm = algorithm
        self.family = family


class InvalidKeyMaterial(AppleServicesError):  # noqa: N818
    """Raised when PKCS#8 bytes cannot be loaded to determine their family."""


class InvalidDocument(AppleServicesError):  # noqa: N818
    """Raised when a JSON document does not match the expected shape.

    This occurs when:
    - The input is not valid JSON
    - A required field (such as a JWK's ``kty``) is missing
    - A field has the wrong type
    """


class ConfigurationError(AppleServicesError):
    """Raised when a required configuration value is missing or malformed."""
