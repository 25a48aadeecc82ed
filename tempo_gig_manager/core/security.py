"""
Password hashing and admin token helpers.

Passwords for user and admin accounts are hashed with passlib. Admin dashboard
sessions are short-lived HS256 JWTs signed with ``ADMIN_TOKEN_SECRET``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

ALGORITHM = "HS256"
ADMIN_TOKEN_SCOPE = "admin"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a plain-text password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Check a plain-text password against a stored hash.

    Unknown or malformed hashes never verify.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def create_admin_token(
    username: str,
    secret: str,
    expires_minutes: int,
    now: Optional[datetime] = None,
) -> str:
    """Issue a signed admin bearer token.

    Args:
        username: Admin account name, stored as the token subject
        secret: HMAC signing key
        expires_minutes: Token lifetime
        now: Issue time override (tests)

    Returns:
        Encoded JWT string
    """
    issued_at = now or datetime.now(timezone.utc)
    claims: Dict[str, Any] = {
        "sub": username,
        "scope": ADMIN_TOKEN_SCOPE,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + timedelta(minutes=expires_minutes)).timestamp()),
    }
    return jwt.encode(claims, secret, algorithm=ALGORITHM)


def decode_admin_token(token: str, secret: str) -> Optional[str]:
    """Validate an admin bearer token.

    Returns:
        The admin username, or None if the token is invalid, expired or
        not an admin token.
    """
    try:
        claims = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except JWTError:
        return None
    if claims.get("scope") != ADMIN_TOKEN_SCOPE:
        return None
    return claims.get("sub")
