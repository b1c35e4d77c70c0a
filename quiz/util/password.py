"""Password hashing utilities (bcrypt)."""

import bcrypt

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def hash_password(plain_password: str, rounds: int) -> str:
    """Hash a plain password using bcrypt.

    A fresh salt is generated per call and embedded in the returned hash.

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt work factor

    Returns:
        Hashed password string

    Raises:
        ValueError: If the password exceeds MAX_PASSWORD_BYTES
    """
    encoded = plain_password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(encoded, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a bcrypt hash.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except (TypeError, ValueError):
        return False
