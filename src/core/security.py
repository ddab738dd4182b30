"""Password hashing and avatar helpers."""

import hashlib
from urllib.parse import urlencode

from passlib.context import CryptContext

from core.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

GRAVATAR_BASE_URL = "//www.gravatar.com/avatar"


def hash_password(raw_password: str) -> str:
    """Hash a plaintext password with a salted bcrypt hash."""
    return pwd_context.hash(raw_password)


def verify_password(raw_password: str, hashed_password: str) -> bool:
    """Check a plaintext password against its stored hash."""
    return pwd_context.verify(raw_password, hashed_password)


def gravatar_url(email: str, size: int = 200, rating: str = "pg", default: str = "mm") -> str:
    """Derive the gravatar URL for an email address.

    The hash is taken over the trimmed, lower-cased address, so the same
    mailbox always maps to the same avatar.
    """
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": str(size), "r": rating, "d": default})
    return f"{GRAVATAR_BASE_URL}/{digest}?{query}"
