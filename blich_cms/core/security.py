"""Password hashing and JWT helpers.

Both applications verify the same HS256 bearer tokens: the CMS server issues
them on admin login, the gateway only checks them. Secrets are passed in by
the caller so each application can read them from its own settings model.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from .errors import AuthenticationError

_pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a plain-text password for storage."""
    return _pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain-text password against a stored hash."""
    try:
        return _pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        # Malformed or unknown hash format
        return False


def create_access_token(
    subject: str,
    *,
    secret: str,
    algorithm: str = "HS256",
    expires_minutes: int = 60,
    extra_claims: Optional[Dict[str, Any]] = None,
) -> str:
    """Create a signed access token.

    Args:
        subject: Value of the ``sub`` claim (the admin user id).
        secret: Signing secret.
        algorithm: JWS algorithm.
        expires_minutes: Lifetime of the token.
        extra_claims: Additional claims such as ``username``.

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(timezone.utc)
    claims: Dict[str, Any] = dict(extra_claims or {})
    claims.update(
        {
            "sub": subject,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=expires_minutes)).timestamp()),
        }
    )
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_access_token(token: str, *, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """Decode and verify an access token.

    Raises:
        AuthenticationError: If the token is missing, expired, or has a bad signature.
    """
    if not token:
        raise AuthenticationError("Missing bearer token")
    try:
        claims = jwt.decode(token, secret, algorithms=[algorithm])
    except ExpiredSignatureError as e:
        raise AuthenticationError("Token expired") from e
    except JWTError as e:
        raise AuthenticationError("Invalid token") from e
    if not claims.get("sub"):
        raise AuthenticationError("Invalid token")
    return claims
