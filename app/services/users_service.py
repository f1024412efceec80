# app/services/users_service.py
import logging
from typing import List, Optional

from app.core.security import hash_password
from app.db.session import SessionLocal
from app.models.user import User
from app.schemas.user_schema import AdminUserCreate, AdminUserOut, AdminUserUpdate
from app.services.auth_service import DuplicateEmailError

logger = logging.getLogger(__name__)


def list_users(search: Optional[str] = None, role: Optional[str] = None) -> List[AdminUserOut]:
    """
    Users matching a case-insensitive search over name, email or organization,
    optionally restricted to one role ("all" disables the role filter).
    """
    db = SessionLocal()
    try:
        users = db.query(User).order_by(User.id).all()

        if search:
            term = search.strip().lower()
            users = [
                u for u in users
                if term in u.name.lower()
                or term in u.email.lower()
                or term in (u.organization or "").lower()
            ]

        if role and role != "all":
            users = [u for u in users if u.role == role]

        return [AdminUserOut.model_validate(u) for u in users]
    finally:
        db.close()


def create_user(data: AdminUserCreate) -> AdminUserOut:
    db = SessionLocal()
    try:
        email = data.email.lower()
        if db.query(User).filter(User.email == email).first():
            raise DuplicateEmailError("Could not create account")

        user = User(
            email=email,
            name=data.name,
            role=data.role,
            organization=data.organization,
            password_hash=hash_password(data.password),
            status="active",
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info(f"Admin created user {user.id} ({user.role})")
        return AdminUserOut.model_validate(user)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def update_user(user_id: int, data: AdminUserUpdate, acting_user_id: Optional[int] = None) -> AdminUserOut:
    if user_id == acting_user_id and (
        data.status == "inactive" or data.role not in (None, "admin")
    ):
        raise PermissionError("You cannot remove your own admin access")

    db = SessionLocal()
    try:
        user = db.get(User, user_id)
        if not user:
            raise ValueError(f"User {user_id} not found")

        updates = data.model_dump(exclude_unset=True)
        if updates.get("email"):
            email = updates["email"].lower()
            clash = db.query(User).filter(User.email == email, User.id != user_id).first()
            if clash:
                raise DuplicateEmailError("Email already in use")
            updates["email"] = email

        for field, value in updates.items():
            if value is None and field != "organization":
                continue
            setattr(user, field, value)

        db.commit()
        db.refresh(user)
        logger.info(f"Admin updated user {user_id}: {sorted(updates)}")
        return AdminUserOut.model_validate(user)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def delete_user(user_id: int, acting_user_id: int) -> None:
    if user_id == acting_user_id:
        raise PermissionError("You cannot delete your own account")

    db = SessionLocal()
    try:
        user = db.get(User, user_id)
        if not user:
            raise ValueError(f"User {user_id} not found")
        db.delete(user)
        db.commit()
        logger.info(f"Admin deleted user {user_id}")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def toggle_user_status(user_id: int, acting_user_id: int) -> AdminUserOut:
    if user_id == acting_user_id:
        raise PermissionError("You cannot deactivate your own account")

    db = SessionLocal()
    try:
        user = db.get(User, user_id)
        if not user:
            raise ValueError(f"User {user_id} not found")
        user.status = "inactive" if user.status == "active" else "active"
        db.commit()
        db.refresh(user)
        logger.info(f"User {user_id} is now {user.status}")
        return AdminUserOut.model_validate(user)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def count_users():
    db = SessionLocal()
    try:
        total = db.query(User).count()
        active = db.query(User).filter(User.status == "active").count()
        return total, active
    finally:
        db.close()
