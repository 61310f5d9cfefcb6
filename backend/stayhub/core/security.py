# stayhub/core/security.py

from datetime import datetime, timedelta
from typing import Any, Dict

from jose import jwt, JWTError
from passlib.context import CryptContext

from stayhub.core.config import settings

# --------------------------------------
# Password hashing config
# --------------------------------------
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


# --------------------------------------
# Access tokens
# --------------------------------------
# Tokens are issued by the identity service; create_access_token is kept for
# seed data and tests.

def create_access_token(data: Dict[str, Any], expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    now = datetime.utcnow()
    expire = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update(
        {
            "iat": now,
            "exp": now + expire,
            "type": "access",
        }
    )
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate an *access* token.
    Used by get_current_user.
    """
    payload = jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
    )

    if payload.get("type") != "access":
        raise JWTError("Invalid token type")

    if "user_id" not in payload and "sub" not in payload:
        raise JWTError("Missing user_id in token")

    return payload
