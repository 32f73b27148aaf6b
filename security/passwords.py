"""
security/passwords.py
---------------------
One-way password hashing for broker users (passlib, bcrypt).
Plaintext passwords are never stored or logged.
"""

from passlib.context import CryptContext

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain: str) -> str:
    """Return a salted hash suitable for ``User.password_hash``."""
    return _pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Check a plaintext password against a stored hash."""
    if not hashed:
        return False
    return _pwd_context.verify(plain, hashed)
