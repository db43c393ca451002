# ticket_system/auth/security.py
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import jwt

BCRYPT_ROUNDS = 10
# bcrypt only reads this many bytes of input
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of ``password`` (fixed work factor).

    Raises ``ValueError`` for input longer than bcrypt can hash.
    """
    raw = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        raise ValueError(f"password cannot be longer than {BCRYPT_MAX_BYTES} bytes")
    return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(hashed: str, password: str) -> bool:
    """Check ``password`` against a stored hash. A malformed hash is a mismatch."""
    raw = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(raw, hashed.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    subject: str,
    secret: str,
    algorithm: str = "HS256",
    expires_delta: timedelta = timedelta(minutes=60),
) -> str:
    now = datetime.now(timezone.utc)
    claims = {"sub": subject, "iat": now, "exp": now + expires_delta}
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> dict[str, Any]:
    """Verify signature and expiry and return the claims; raises ``jose.JWTError``."""
    return jwt.decode(token, secret, algorithms=[algorithm])
