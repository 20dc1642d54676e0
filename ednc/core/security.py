# ednc/core/security.py
from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext

from ednc.core.config import settings
from ednc.core.exceptions import InvalidToken

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_instructor_token(instructor) -> str:
    """Token carrying the identity claims the access gate needs."""
    return create_access_token(
        data={
            "sub": str(instructor.id),
            "email": instructor.email,
            "name": instructor.name,
            "is_admin": bool(instructor.is_admin),
        }
    )


def decode_access_token(token: str) -> dict:
    """Checks signature and expiry, returns the payload."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        raise InvalidToken("Token has expired")
    except JWTError:
        raise InvalidToken()
