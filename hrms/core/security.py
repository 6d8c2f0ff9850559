"""
Security utilities for salted password hashing and session tokens.

Password hashes are base64(SHA-256(password + salt)) so credentials stored by
the existing HR database keep working.
"""
import base64
import hashlib
import hmac
import secrets
from typing import Optional

from hrms.core.config import settings


def compute_hash(password: str, salt: str) -> str:
    """
    Hash a password with its salt.

    Args:
        password: Plain text password
        salt: Base64 salt stored alongside the user

    Returns:
        Base64-encoded SHA-256 digest of ``password + salt``
    """
    digest = hashlib.sha256((password + salt).encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def generate_salt() -> str:
    """Return a fresh base64-encoded random salt."""
    return base64.b64encode(secrets.token_bytes(settings.salt_bytes)).decode("ascii")


def generate_session_token() -> str:
    """Return a fresh base64-encoded random session token."""
    return base64.b64encode(secrets.token_bytes(settings.session_token_bytes)).decode("ascii")


def hash_password(password: str) -> tuple[str, str]:
    """
    Hash a password with a newly generated salt.

    Returns:
        Tuple of (password_hash, salt)
    """
    salt = generate_salt()
    return compute_hash(password, salt), salt


def verify_password(plain_password: str, password_hash: str, salt: str) -> bool:
    """
    Verify a password against its stored hash and salt.

    Args:
        plain_password: Plain text password
        password_hash: Stored base64 hash
        salt: Stored base64 salt

    Returns:
        True if password matches, False otherwise
    """
    if not password_hash or salt is None:
        return False
    candidate = compute_hash(plain_password, salt)
    return hmac.compare_digest(candidate.encode("ascii"), password_hash.encode("ascii"))


def extract_session_token(
    authorization: Optional[str],
    x_session_token: Optional[str] = None
) -> Optional[str]:
    """
    Pick the session token out of the request headers.

    ``Authorization: Bearer <token>`` takes precedence over ``X-Session-Token``.
    A Bearer header with an empty token yields None without falling back.

    Returns:
        Token string, or None when neither header carries one
    """
    if authorization and authorization.startswith("Bearer "):
        return authorization[len("Bearer "):].strip() or None

    if x_session_token and x_session_token.strip():
        return x_session_token.strip()

    return None
