# blog_api/core/security.py
"""
Security module for authentication.
Handles password hashing and JWT token creation/validation.
"""
import datetime as dt
import jwt  # PyJWT
from passlib.context import CryptContext

from blog_api.config import settings
from blog_api.core.errors import InvalidTokenError
from blog_api.core.policy import Identity

# Password hashing context
# Argon2 is a modern, memory-hard algorithm; every hash gets a fresh random salt
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",   # Automatically handle deprecated schemes
)

JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)
REQUIRED_CLAIMS = ["sub", "role", "exp", "iat"]


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a stored hash.

    Never raises: a mismatch, an empty hash or a hash passlib cannot identify
    all yield False.
    """
    if not hashed:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: str,
    email: str,
    role: str,
    *,
    secret: str | None = None,
    expires_delta: dt.timedelta | None = None,
) -> str:
    """
    Create a signed JWT access token carrying the caller's identity claims.

    Args:
        user_id: Unique user identifier (UUID string)
        email: User email
        role: User role ("user" or "admin")
        secret: Signing secret; defaults to the configured JWT_SECRET
        expires_delta: Token lifetime; defaults to ACCESS_TOKEN_EXPIRE_MINUTES (7 days)

    Returns:
        Encoded JWT token string

    Raises:
        MissingSecretError: If no secret is passed and none is configured
    """
    key = secret or settings.require_jwt_secret()
    if expires_delta is None:
        expires_delta = dt.timedelta(minutes=settings.access_token_expire_minutes)
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": str(user_id),  # Subject (user ID)
        "email": email,
        "role": role,    # User role for RBAC
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, key, algorithm=JWT_ALG)


def decode_access_token(token: str, *, secret: str | None = None) -> dict:
    """
    Decode and validate a JWT access token.

    Raises:
        InvalidTokenError: On expiry, signature mismatch, missing claims or malformed input
        MissingSecretError: If no secret is passed and none is configured
    """
    key = secret or settings.require_jwt_secret()
    try:
        return jwt.decode(
            token,
            key,
            algorithms=[JWT_ALG],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise InvalidTokenError("Token has expired")
    except jwt.PyJWTError:
        raise InvalidTokenError()


def claims_to_identity(claims: dict) -> Identity:
    """Build the Identity threaded through authorized calls from decoded claims."""
    return Identity(
        user_id=str(claims["sub"]),
        email=claims.get("email") or "",
        role=claims.get("role") or "user",
    )
