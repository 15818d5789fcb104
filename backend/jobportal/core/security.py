# jobportal/core/security.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from functools import lru_cache

from jose import JWTError, jwt
from passlib.context import CryptContext

from jobportal.auth.claims import Claims
from jobportal.core.config import settings

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class InvalidTokenError(Exception):
    pass


# -------------------------
# Password hashing
# -------------------------
def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        # Unrecognised or malformed hash
        return False


# -------------------------
# JWT
# -------------------------
def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


class TokenAuth:
    """
    Issues and verifies signed access tokens.

    The signing secret is passed in at construction; nothing here reads
    global settings, so tests can build an instance with any secret.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
        issuer: str | None = None,
    ) -> None:
        if not secret or not secret.strip():
            raise ValueError("a signing secret is required")
        self._secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes
        self.issuer = issuer

    def generate_token(self, user_id: int | str) -> str:
        """
        Access token used for API auth: Authorization: Bearer <token>
        subject = internal user id
        """
        now = _now_utc()
        exp = now + timedelta(minutes=self.expire_minutes)

        payload = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
        }
        if self.issuer:
            payload["iss"] = self.issuer

        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def validate_token(self, token: str) -> Claims:
        """
        Returns verified claims or raises InvalidTokenError.
        Expired, badly signed and malformed tokens are all rejected the same way.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
            )
        except JWTError as exc:
            raise InvalidTokenError("Invalid or expired token") from exc

        if not payload.get("sub"):
            raise InvalidTokenError("Token missing 'sub'")

        return Claims.from_payload(payload)


@lru_cache
def get_token_auth() -> TokenAuth:
    return TokenAuth(
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        issuer=settings.JWT_ISSUER or None,
    )
