"""
Password hashing primitives (bcrypt).
"""

import bcrypt

from config import ApplicationConfig

# Burned on unknown-email logins so both paths cost one bcrypt check
_DUMMY_HASH = bcrypt.hashpw(
    b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
)


def hash_password(password: str) -> str:
    """Hash a plain text password with the configured bcrypt cost factor"""
    password_hash = bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    )
    return password_hash.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison of a plain text password against a bcrypt hash"""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def burn_password_check(password: str) -> None:
    verify_password(password, _DUMMY_HASH.decode("utf-8"))
