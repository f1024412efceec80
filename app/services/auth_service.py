# app/services/auth_service.py
import logging
from typing import Optional

from app.core.security import hash_password, verify_password
from app.db.session import SessionLocal
from app.models.user import User
from app.schemas.user_schema import UserOut
from app.utils.time_utils import utcnow

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Raised when a login or registration attempt cannot proceed."""


class InvalidCredentialsError(AuthError):
    pass


class AccountDisabledError(AuthError):
    pass


class DuplicateEmailError(AuthError):
    pass


def authenticate(email: str, password: str) -> UserOut:
    """Check credentials and stamp last_login."""
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email.lower()).first()
        if not user or not verify_password(password, user.password_hash):
            logger.info(f"Failed login attempt for {email}")
            raise InvalidCredentialsError("Invalid email or password")

        if user.status != "active":
            raise AccountDisabledError("Account disabled")

        user.last_login = utcnow()
        db.commit()
        db.refresh(user)
        logger.info(f"User {user.id} logged in ({user.role})")
        return UserOut.model_validate(user)
    finally:
        db.close()


def register_user(
    email: str,
    password: str,
    name: str,
    role: str,
    organization: Optional[str] = None,
) -> UserOut:
    db = SessionLocal()
    try:
        if db.query(User).filter(User.email == email.lower()).first():
            raise DuplicateEmailError("Could not create account")

        user = User(
            email=email.lower(),
            name=name,
            role=role,
            organization=organization,
            password_hash=hash_password(password),
            status="active",
            last_login=utcnow(),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info(f"Registered user {user.id} ({user.role})")
        return UserOut.model_validate(user)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
