import os

from passlib.context import CryptContext

# bcrypt work factor; each +1 doubles hashing time
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password(plain: str) -> str:
    """Return a salted, self-describing bcrypt hash (``$2b$<rounds>$...``)."""
    return _pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Check ``plain`` against ``hashed``. Malformed or empty hashes verify as False."""
    if not hashed:
        return False
    try:
        return _pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False
