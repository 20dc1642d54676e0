# ednc/api/deps.py
from typing import Generator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ednc.core.access import Principal
from ednc.core.exceptions import InvalidToken, Unauthorized
from ednc.core.security import decode_access_token
from ednc.db.session import SessionLocal

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    if credentials is None or not credentials.credentials:
        raise Unauthorized()

    payload = decode_access_token(credentials.credentials)
    try:
        return Principal.from_claims(payload)
    except (KeyError, TypeError, ValueError):
        raise InvalidToken()
