import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.security import require_admin
from app.schemas.user_schema import AdminUserCreate, AdminUserOut, AdminUserUpdate, UserOut
from app.services.auth_service import DuplicateEmailError
from app.services.stats_service import get_system_stats
from app.services.users_service import (
    create_user,
    delete_user,
    list_users,
    toggle_user_status,
    update_user,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin"], dependencies=[Depends(require_admin)])


@router.get("/stats")
async def system_stats():
    """Totals, alert counts and 7-day reading activity for the admin panel."""
    try:
        return get_system_stats()
    except Exception:
        logger.exception("Error computing system stats")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/users")
async def get_users(
    search: Optional[str] = Query(None, description="Match name, email or organization"),
    role: Optional[str] = Query("all", pattern="^(all|admin|researcher|public)$"),
):
    try:
        users = list_users(search, role)
        return {"success": True, "total": len(users), "users": users}
    except Exception:
        logger.exception("Error listing users")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/users", response_model=AdminUserOut, status_code=201)
async def add_user(data: AdminUserCreate):
    try:
        return create_user(data)
    except DuplicateEmailError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Error creating user")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.put("/users/{user_id}", response_model=AdminUserOut)
async def edit_user(user_id: int, data: AdminUserUpdate, admin: UserOut = Depends(require_admin)):
    try:
        return update_user(user_id, data, acting_user_id=admin.id)
    except (DuplicateEmailError, PermissionError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception(f"Error updating user {user_id}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/users/{user_id}")
async def remove_user(user_id: int, admin: UserOut = Depends(require_admin)):
    """Delete a user account. Admins cannot delete themselves."""
    try:
        delete_user(user_id, acting_user_id=admin.id)
        return {"success": True, "user_id": user_id}
    except PermissionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception(f"Error deleting user {user_id}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/users/{user_id}/toggle-status", response_model=AdminUserOut)
async def toggle_status(user_id: int, admin: UserOut = Depends(require_admin)):
    """Enable or disable an account. Admins cannot disable themselves."""
    try:
        return toggle_user_status(user_id, acting_user_id=admin.id)
    except PermissionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception(f"Error toggling status of user {user_id}")
        raise HTTPException(status_code=500, detail="Internal server error")
