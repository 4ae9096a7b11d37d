"""Credential Primitives — password hashing and access-token encode/decode.

Invariants:
    - Passwords stored only as argon2 hashes (salted, one-way); never compared in plaintext
    - Every token carries sub, username, role, iat, exp
    - decode_access_token raises InvalidTokenError for ANY verification failure
      (bad signature, expired, malformed); callers never see JWTError

Design Decisions:
    - Pure functions, secret/algorithm passed in: no settings import, trivially testable
    - dummy_verify() on unknown users: login timing does not reveal which usernames exist
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from catalog_api.core.domain_types import AdminId, Role
from catalog_api.core.errors import InvalidTokenError

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str | None) -> bool:
    """Check a password against its stored hash. hashed=None burns equal time and fails.

    A stored value passlib cannot identify (e.g. a legacy plaintext row) fails
    verification instead of raising.
    """
    if hashed is None:
        pwd_context.dummy_verify()
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False


def create_access_token(
    admin_id: AdminId,
    username: str,
    secret: str,
    *,
    role: str = Role.ADMIN.value,
    algorithm: str = "HS256",
    expires_delta: timedelta = timedelta(hours=1),
) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        "sub": str(admin_id),
        "username": username,
        "role": role,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_access_token(
    token: str, secret: str, algorithm: str = "HS256",
) -> dict[str, Any]:
    """Verify signature and expiry, return the claims payload."""
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except ExpiredSignatureError:
        raise InvalidTokenError("Token has expired")
    except JWTError:
        raise InvalidTokenError("Invalid token")
