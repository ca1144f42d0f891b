"""
CRUD operations for User model.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session
from jobboard.core.security import get_password_hash
from jobboard.models.user import User
from jobboard.schemas.user import UserSignupRequest


def get_by_id(db: Session, user_id: UUID) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create(db: Session, user_data: UserSignupRequest) -> User:
    """
    Create a user, hashing the password before it is persisted.

    Raises:
        sqlalchemy.exc.IntegrityError: If the email is already taken
    """
    db_user = User(
        name=user_data.name,
        email=user_data.email,
        hashed_password=get_password_hash(user_data.password),
        phone_number=user_data.phone_number,
        gender=user_data.gender,
        date_of_birth=user_data.date_of_birth,
        membership_status=user_data.membership_status,
    )

    db.add(db_user)
    db.commit()
    db.refresh(db_user)

    return db_user


def touch_last_login(db: Session, user: User) -> User:
    """Stamp the user's last successful login."""
    user.last_login_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(user)
    return user
