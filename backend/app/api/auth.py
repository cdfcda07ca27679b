import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from app.auth import bearer_token_or_401, get_token_store, verify_user_credentials
from app.database import get_db
from app.schemas.auth import LoginRequest, LoginResponse
from app.schemas.common import ErrorResponse, MessageResponse
from app.token_store import TokenStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="User login",
    description="Check username and password and return a bearer token valid for 24 hours.",
)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
    token_store: TokenStore = Depends(get_token_store),
):
    if not request.username or not request.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and password are required",
        )

    if not verify_user_credentials(db, request.username, request.password):
        logger.warning("Failed login for user %r", request.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    token = token_store.generate()
    token_store.add(token)
    logger.info("User %r logged in (token %s...)", request.username, token[:8])

    return {"token": token}


@router.post(
    "/logout",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}},
    summary="User logout",
    description="Revoke the bearer token. Unknown or expired tokens are accepted.",
)
def logout(
    authorization: Optional[str] = Header(None),
    token_store: TokenStore = Depends(get_token_store),
):
    token = bearer_token_or_401(authorization)
    token_store.remove(token)
    logger.info("Token %s... revoked", token[:8])

    return {"message": "Logged out successfully"}
