"""
Pydantic schemas for user signup and login.
"""

from pydantic import BaseModel, EmailStr, Field, UUID4
from typing import Optional
from datetime import date, datetime


class UserSignupRequest(BaseModel):
    """Request schema for user signup."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(
        ...,
        min_length=8,
        max_length=72,  # bcrypt limit
        description="Password must be 8-72 characters"
    )
    phone_number: str = Field(..., min_length=1)
    gender: str = Field(..., min_length=1)
    date_of_birth: date
    membership_status: str = Field(..., min_length=1)


class UserLoginRequest(BaseModel):
    """Request schema for user login."""
    email: EmailStr
    password: str


class AuthTokenResponse(BaseModel):
    """Signed token issued on signup and login."""
    email: str
    token: str


class UserResponse(BaseModel):
    """User profile response (no sensitive data)."""
    id: UUID4
    name: str
    email: str
    phone_number: str
    gender: str
    date_of_birth: date
    membership_status: str
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None

    class Config:
        from_attributes = True
