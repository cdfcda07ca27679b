import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.services.user_service import get_user_by_username
from app.token_store import TokenStore

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"

MISSING_HEADER_DETAIL = "Authorization header required"
MALFORMED_HEADER_DETAIL = "Invalid authorization header format"
INVALID_TOKEN_DETAIL = "Invalid or expired token"


class BearerStatus(str, Enum):
    OK = "ok"
    MISSING = "missing"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class BearerExtraction:
    status: BearerStatus
    token: Optional[str] = None


def extract_bearer_token(header: Optional[str]) -> BearerExtraction:
    """Parse an ``Authorization`` header of the exact form ``Bearer <token>``.

    The header is split on single spaces and must produce two parts, the first
    being the literal scheme. ``"Bearer a b"`` and ``"bearer a"`` are malformed.
    """
    if not header:
        return BearerExtraction(BearerStatus.MISSING)

    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME:
        return BearerExtraction(BearerStatus.MALFORMED)

    return BearerExtraction(BearerStatus.OK, parts[1])


def unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": BEARER_SCHEME},
    )


def bearer_token_or_401(authorization: Optional[str]) -> str:
    """Return the token from the header or raise the matching 401"""
    extraction = extract_bearer_token(authorization)
    if extraction.status is BearerStatus.MISSING:
        raise unauthorized(MISSING_HEADER_DETAIL)
    if extraction.status is BearerStatus.MALFORMED:
        raise unauthorized(MALFORMED_HEADER_DETAIL)
    return extraction.token


def get_token_store(request: Request) -> TokenStore:
    """Token store owned by the running application"""
    return request.app.state.token_store


def require_auth(
    authorization: Optional[str] = Header(None),
    token_store: TokenStore = Depends(get_token_store),
) -> str:
    """Guard for protected routes; returns the validated token"""
    token = bearer_token_or_401(authorization)
    if not token_store.validate(token):
        raise unauthorized(INVALID_TOKEN_DETAIL)
    return token


def verify_user_credentials(db: Session, username: str, password: str) -> bool:
    """Exact, case-sensitive match against the stored plaintext password"""
    user = get_user_by_username(db, username)
    if user is None:
        return False
    return user.password == password
