"""Signing key configuration loaded from environment variables.

Reads a ``.env`` file when one is found, then the process environment::

    APPLE_TEAM_ID=TEAM0123XY
    APPLE_KEY_ID=ABC123DEFG
    APPLE_PRIVATE_KEY_PATH=/secrets/AuthKey_ABC123DEFG.p8
    APPLE_ALGORITHM=ES256        # optional
    APPLE_TOKEN_TTL=1200         # optional, seconds

Usage::

    config = AppleKeyConfig.from_env()
    key = config.load_key()
    header = config.header(key)
    claims = config.claims(SystemDuration.now())
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

from .errors import ConfigurationError, UnknownAlgorithm
from .protocols import DurationSinceEpoch
from .tokens import Algorithm, Claims, Header, Key, KeyId, Pkcs8Key, TeamId

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL: Final[int] = 1200
"""Default token lifetime in seconds (20 minutes)."""


@dataclass(frozen=True, slots=True)
class AppleKeyConfig:
    """Where the signing key lives and how tokens made with it look.

    Attributes:
        team_id: Issuer of the tokens.
        key_id: Identifier of the key in the developer portal.
        key_path: Path to the ``.p8`` private key file.
        algorithm: Signing algorithm. Apple's ``.p8`` keys use ES256.
        token_ttl: Seconds from ``iat`` to ``exp``.
    """

    team_id: TeamId
    key_id: KeyId
    key_path: Path
    algorithm: Algorithm = Algorithm.ES256
    token_ttl: int = DEFAULT_TOKEN_TTL

    def __post_init__(self) -> None:
        if self.token_ttl <= 0:
            raise ConfigurationError(f"token_ttl must be positive, got {self.token_ttl}")

    @classmethod
    def from_env(
        cls,
        prefix: str = "APPLE_",
        dotenv_path: str | Path | None = None,
    ) -> AppleKeyConfig:
        """Build the configuration from ``<prefix>*`` environment variables.

        Raises:
            ConfigurationError: If a required variable is missing or the TTL
                is not a positive integer.
            UnknownAlgorithm: If ``<prefix>ALGORITHM`` is not registered.
        """
        load_dotenv(dotenv_path)

        def required(name: str) -> str:
            value = os.environ.get(prefix + name, "").strip()
            if not value:
                raise ConfigurationError(f"Missing environment variable {prefix}{name}")
            return value

        alg_name = os.environ.get(prefix + "ALGORITHM", "").strip()
        if alg_name:
            try:
                algorithm = Algorithm.from_str(alg_name)
            except UnknownAlgorithm:
                logger.warning("Unsupported %sALGORITHM %r", prefix, alg_name)
                raise
        else:
            algorithm = Algorithm.ES256

        ttl_raw = os.environ.get(prefix + "TOKEN_TTL", "").strip()
        try:
            token_ttl = int(ttl_raw) if ttl_raw else DEFAULT_TOKEN_TTL
        except ValueError as e:
            raise ConfigurationError(
                f"{prefix}TOKEN_TTL must be an integer, got {ttl_raw!r}"
            ) from e

        config = cls(
            team_id=TeamId(required("TEAM_ID")),
            key_id=KeyId(required("KEY_ID")),
            key_path=Path(required("PRIVATE_KEY_PATH")),
            algorithm=algorithm,
            token_ttl=token_ttl,
        )
        logger.debug(
            "Resolved Apple key config: team=%s kid=%s alg=%s ttl=%d",
            config.team_id,
            config.key_id,
            config.algorithm.as_str(),
            config.token_ttl,
        )
        return config

    def load_key(self, *, checked: bool = False) -> Key:
        """Read the private key file into a Key.

        Args:
            checked: Reject key material whose family does not match the
                configured algorithm.

        Raises:
            OSError: If the key file cannot be read.
            KeyAlgorithmMismatch: With ``checked=True``, on a family mismatch.
        """
        data = Pkcs8Key.from_file(self.key_path)
        if checked:
            return Key.checked(self.key_id, self.algorithm, data)
        return Key.new(self.key_id, self.algorithm, data)

    def header(self, key: Key) -> Header:
        return Header.new(key)

    def claims(
        self,
        now: DurationSinceEpoch,
        *,
        aud: str | None = None,
        sub: str | None = None,
    ) -> Claims:
        return Claims.expiring(self.team_id, now, self.token_ttl, aud=aud, sub=sub)
