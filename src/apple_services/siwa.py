"""Sign in with Apple models.

Covers the authorization redirect, the identity token claims, and the token
endpoint exchange. Apple's public keys for verifying identity tokens are a
standard JWK Set; see ``apple_services.jwk.JwkSet`` and ``APPLE_KEYS_URL``.

See https://developer.apple.com/documentation/sign_in_with_apple
"""

from __future__ import annotations

from typing import Final, Self

from pydantic import Field, field_validator

from .models import WireModel
from .protocols import DurationSinceEpoch
from .tokens import Claims, TeamId

APPLE_ISSUER: Final[str] = "https://appleid.apple.com"
"""Issuer of identity tokens, and audience of client secrets."""

TOKEN_URL: Final[str] = f"{APPLE_ISSUER}/auth/token"

MAX_CLIENT_SECRET_TTL: Final[int] = 15_777_000
"""Apple rejects client secrets that expire more than six months after iat."""


class Name(WireModel):
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")


class User(WireModel):
    """User details Apple posts on the first authorization only."""

    email: str | None = None
    name: Name | None = None


class AuthResponse(WireModel):
    """Parameters of the authorization redirect (form_post or query)."""

    code: str | None = None
    id_token: str | None = None
    state: str | None = None
    user: str | None = None
    error: str | None = None

    def parsed_user(self) -> User | None:
        """Decode the JSON-encoded ``user`` parameter, if present.

        Raises:
            InvalidDocument: If ``user`` is not a valid user JSON object.
        """
        if not self.user:
            return None
        return User.parse(self.user)


class IdTokenClaims(WireModel):
    """Claims of a verified identity token.

    Apple has sent the boolean flags both as JSON booleans and as the strings
    "true"/"false"; either form is stored as the string.
    """

    iss: str | None = None
    aud: str | None = None
    exp: int | None = None
    iat: int | None = None
    sub: str | None = None
    c_hash: str | None = None
    email: str | None = None
    email_verified: str | None = None
    is_private_email: str | None = None
    auth_time: int | None = None

    @field_validator("email_verified", "is_private_email", mode="before")
    @classmethod
    def _bool_as_string(cls, v: object) -> object:
        if isinstance(v, bool):
            return "true" if v else "false"
        return v


class ValidateAuthCodeRequest(WireModel):
    """Form body posted to TOKEN_URL to exchange an authorization code."""

    client_id: str
    client_secret: str
    grant_type: str
    code: str
    redirect_uri: str

    @classmethod
    def authorization_code(
        cls, client_id: str, client_secret: str, code: str, redirect_uri: str
    ) -> Self:
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            grant_type="authorization_code",
            code=code,
            redirect_uri=redirect_uri,
        )


class TokenResponse(WireModel):
    access_token: str | None = None
    expires_in: int | None = None
    id_token: str | None = None
    refresh_token: str | None = None
    token_type: str | None = None
    error: str | None = None


def client_secret_claims(
    team_id: TeamId,
    client_id: str,
    now: DurationSinceEpoch,
    ttl_seconds: int,
) -> Claims:
    """Claims for the client secret JWT sent to the token endpoint.

    Raises:
        ValueError: If ``ttl_seconds`` is not positive or exceeds
            MAX_CLIENT_SECRET_TTL.
    """
    if not 0 < ttl_seconds <= MAX_CLIENT_SECRET_TTL:
        raise ValueError(
            f"ttl_seconds must be in (0, {MAX_CLIENT_SECRET_TTL}], got {ttl_seconds}"
        )
    return Claims.expiring(team_id, now, ttl_seconds, aud=APPLE_ISSUER, sub=client_id)
