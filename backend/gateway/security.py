"""
Board Gateway - Password Hashing
=================================

What:  bcrypt hashing and verification for user passwords.
How:   Uses the bcrypt package directly (salted hash, configurable cost).
Who:   UserService (create/update) and AuthService (login).

bcrypt only considers the first 72 bytes of a password; longer inputs are
truncated before hashing so bcrypt 4.x does not reject them.
"""

import bcrypt

from gateway.config import settings

_MAX_PASSWORD_BYTES = 72


def _encode(plain: str) -> bytes:
    return plain.encode("utf-8")[:_MAX_PASSWORD_BYTES]


def hash_password(plain: str) -> str:
    """Return a salted bcrypt hash of the given plaintext password."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(plain), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Return True if the plaintext password matches the stored bcrypt hash."""
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_encode(plain), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash (e.g. legacy plaintext row)
        return False
