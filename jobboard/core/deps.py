"""
FastAPI dependencies for authentication and path validation.

get_current_user guards individual endpoints; BearerProtectedRoute guards a
whole router and checks the token before the request body is even read.
"""

import logging
from typing import Callable, Optional
from uuid import UUID

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.routing import APIRoute
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from fastapi.security.utils import get_authorization_scheme_param
from jose import JWTError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from jobboard.core.database import get_db
from jobboard.core.security import decode_token
from jobboard.crud import user as user_crud
from jobboard.models.user import User

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>), scheme is case-insensitive.
# auto_error is off so a missing header yields 401 rather than FastAPI's default.
security = HTTPBearer(auto_error=False)


def authenticate_token(db: Session, token: Optional[str]) -> User:
    """
    Resolve a bearer token to its user.

    Missing, malformed, expired and orphaned tokens all get the same response.

    Raises:
        HTTPException 401: If token is invalid or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not token:
        raise credentials_exception

    try:
        payload = decode_token(token)
        user_id = UUID(str(payload.get("sub")))
    except (JWTError, ValueError) as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise credentials_exception

    user = user_crud.get_by_id(db, user_id)
    if user is None:
        logger.warning(f"Token references unknown user {user_id}")
        raise credentials_exception

    return user


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """Extract and validate the current user from the Authorization header."""
    return authenticate_token(db, credentials.credentials if credentials else None)


def _authenticate_request(request: Request) -> User:
    scheme, token = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() != "bearer":
        token = None

    # Honour dependency overrides so tests share their session
    session_factory = request.app.dependency_overrides.get(get_db, get_db)
    sessions = session_factory()
    db = next(sessions)
    try:
        user = authenticate_token(db, token)
    finally:
        sessions.close()

    request.state.user = user
    return user


class BearerProtectedRoute(APIRoute):
    """
    Route that requires a valid bearer token when the app has auth enabled.

    The check wraps the whole handler, so an unauthenticated request gets
    401 before path parameters or the JSON body are parsed.
    """

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def protected_route_handler(request: Request) -> Response:
            if getattr(request.app.state, "auth_enabled", False):
                await run_in_threadpool(_authenticate_request, request)
            return await original_route_handler(request)

        return protected_route_handler


def get_job_id(job_id: str) -> UUID:
    """
    Parse the job id path parameter.

    A value that is not a UUID is a client error (400), distinct from a
    well-formed id with no matching job (404).
    """
    try:
        return UUID(job_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Malformed job id"
        )
