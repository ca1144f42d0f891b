"""
User endpoints for signup, login and profile lookup.

- POST /signup: Create a user and return a signed token
- POST /login: Authenticate and return a signed token
- GET /me: Get the authenticated user's profile
"""

import logging
from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.deps import get_current_user
from jobboard.core.security import create_access_token, verify_password
from jobboard.crud import user as user_crud
from jobboard.models.user import User
from jobboard.schemas.user import (
    UserSignupRequest,
    UserLoginRequest,
    AuthTokenResponse,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=AuthTokenResponse)
def signup(
    request: UserSignupRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user.

    The password is hashed before it is stored. Returns a token bound to
    the new user's id for immediate use.
    """
    if user_crud.get_by_email(db, request.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    try:
        new_user = user_crud.create(db, request)
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    logger.info(f"New user signed up: {new_user.email} ({new_user.id})")

    token = create_access_token(data={"sub": str(new_user.id)})
    return AuthTokenResponse(email=new_user.email, token=token)


@router.post("/login", response_model=AuthTokenResponse)
def login(
    request: UserLoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate user and return a signed token.

    Updates last_login_at timestamp.
    """
    user = user_crud.get_by_email(db, request.email)
    if not user or not verify_password(request.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_crud.touch_last_login(db, user)
    logger.info(f"User logged in: {user.email}")

    token = create_access_token(data={"sub": str(user.id)})
    return AuthTokenResponse(email=user.email, token=token)


@router.get("/me", response_model=UserResponse)
def get_current_user_profile(
    current_user: User = Depends(get_current_user)
):
    """
    Get current authenticated user's profile.

    Requires valid token in Authorization header.
    """
    return current_user
