"""Password hashing, session user record and role enforcement."""
import logging

from fastapi import Depends, HTTPException, Request, status
from passlib.context import CryptContext
from pydantic import ValidationError

from app.db.session import SessionLocal
from app.models.user import User
from app.schemas.user_schema import UserOut

logger = logging.getLogger(__name__)

# Fixed key under which the logged-in user's profile lives in the session
SESSION_USER_KEY = "ka-eco-user"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


# ── Password helpers ──────────────────────────────────────────
def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


# ── Session record ────────────────────────────────────────────
def store_session_user(request: Request, user) -> UserOut:
    record = UserOut.model_validate(user)
    request.session[SESSION_USER_KEY] = record.model_dump(mode="json")
    return record


def clear_session_user(request: Request) -> None:
    request.session.pop(SESSION_USER_KEY, None)


def _unauthenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Authentication required",
    )


async def get_current_user(request: Request) -> UserOut:
    """
    Resolve the session user against the users table, or fail with 401.

    Role and profile come from the database row, so changes made by an admin
    apply on the next request. Deleted or inactive accounts lose their session.
    """
    record = request.session.get(SESSION_USER_KEY)
    if record is None:
        raise _unauthenticated()
    try:
        session_user = UserOut.model_validate(record)
    except ValidationError:
        logger.warning("Discarding unreadable session user record")
        clear_session_user(request)
        raise _unauthenticated()

    db = SessionLocal()
    try:
        user = db.get(User, session_user.id)
        if not user or user.status != "active":
            logger.info(f"Session for user {session_user.id} no longer valid")
            clear_session_user(request)
            raise _unauthenticated()
        current = UserOut.model_validate(user)
    finally:
        db.close()

    if current != session_user:
        request.session[SESSION_USER_KEY] = current.model_dump(mode="json")
    return current


def require_roles(*roles: str):
    """Dependency factory: only the given roles may pass."""

    async def checker(user: UserOut = Depends(get_current_user)) -> UserOut:
        if user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return user

    return checker


require_editor = require_roles("admin", "researcher")
require_admin = require_roles("admin")
