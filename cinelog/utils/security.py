"""
Password hashing with bcrypt.
"""

import bcrypt

# Fixed work factor for every stored hash
BCRYPT_ROUNDS = 10


def hash_password(password: str) -> str:
    """
    Hash a plaintext password with a fresh salt.

    Args:
        password: Plaintext password (at most 72 bytes once UTF-8 encoded)

    Returns:
        bcrypt hash as text
    """
    return bcrypt.hashpw(
        password.encode('utf-8'),
        bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    ).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        # Malformed stored hash or over-long password
        return False
