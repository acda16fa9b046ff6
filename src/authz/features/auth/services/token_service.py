"""JWT issuing and validation service."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from ....config.constants import JWTClaims
from ....config.settings import AuthZSettings
from ....core.exceptions import InvalidTokenError, TokenExpiredError

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


@dataclass(frozen=True)
class IssuedToken:
    """Signed token and its lifetime in seconds."""

    token: str
    expires_in: int


class TokenService:
    """Issues and validates the tokens that identify a user between requests."""

    def __init__(self, settings: AuthZSettings):
        self.settings = settings

    @property
    def _secret(self) -> str:
        return self.settings.secret.get_secret_value()

    def issue(self, user_id: Any) -> IssuedToken:
        """Sign a token carrying ``user_id``."""
        expires_in = self.settings.expiration_time_span
        now = datetime.now(timezone.utc)

        payload = {
            JWTClaims.USER_ID: user_id,
            "iat": now,
            "exp": now + timedelta(seconds=expires_in),
            "iss": JWTClaims.ISSUER,
            "aud": JWTClaims.AUDIENCE,
            "sub": JWTClaims.SUBJECT,
        }

        token = jwt.encode(payload, self._secret, algorithm=self.settings.jwt_algorithm)
        logger.debug(f"Issued token for user {user_id!r}, expires in {expires_in}s")
        return IssuedToken(token=token, expires_in=expires_in)

    def validate(self, authorization: Optional[str]) -> Any:
        """Validate an ``Authorization`` header value and return the user identifier.

        Raises:
            InvalidTokenError: header missing, not a bearer token, or the token
                fails signature, issuer or audience verification.
            TokenExpiredError: the token has expired.
        """
        if not authorization:
            raise InvalidTokenError("Missing authorization header")

        scheme, _, token = authorization.partition(" ")
        if scheme != BEARER_SCHEME or not token:
            raise InvalidTokenError("Invalid authorization type")

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.settings.jwt_algorithm],
                audience=JWTClaims.AUDIENCE,
                issuer=JWTClaims.ISSUER,
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        if JWTClaims.USER_ID not in claims:
            raise InvalidTokenError(f"Token missing '{JWTClaims.USER_ID}' claim")

        return claims[JWTClaims.USER_ID]
