import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.api.routes_auth.schemas import LoginRequest, NavigationItem, RegisterRequest
from app.core.config import settings
from app.core.security import clear_session_user, get_current_user, store_session_user
from app.schemas.user_schema import UserOut
from app.services.auth_service import (
    AccountDisabledError,
    DuplicateEmailError,
    InvalidCredentialsError,
    authenticate,
    register_user,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])

# Navigation entries and the roles allowed to see them
NAVIGATION = [
    {"key": "dashboard", "name": "Dashboard", "roles": ("admin", "researcher", "public")},
    {"key": "wetlands", "name": "Wetlands", "roles": ("admin", "researcher", "public")},
    {"key": "reports", "name": "Reports", "roles": ("admin", "researcher", "public")},
    {"key": "admin", "name": "Admin Panel", "roles": ("admin",)},
]


@router.post("/login", response_model=UserOut)
async def login(request: Request, data: LoginRequest):
    """Check credentials and store the user record in the session."""
    await asyncio.sleep(settings.SIMULATED_LATENCY_SECONDS)
    try:
        user = authenticate(data.email, data.password)
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    except AccountDisabledError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account disabled")

    return store_session_user(request, user)


@router.post("/register", response_model=UserOut, status_code=201)
async def register(request: Request, data: RegisterRequest):
    """Create a researcher or public account and log it in."""
    await asyncio.sleep(settings.SIMULATED_LATENCY_SECONDS)
    try:
        user = register_user(
            email=data.email,
            password=data.password,
            name=data.name.strip(),
            role=data.role,
            organization=data.organization,
        )
    except DuplicateEmailError:
        # Don't reveal if email exists
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Could not create account",
        )
    except Exception:
        logger.exception("Error registering user")
        raise HTTPException(status_code=500, detail="Internal server error")

    return store_session_user(request, user)


@router.post("/logout")
async def logout(request: Request):
    clear_session_user(request)
    return {"success": True}


@router.get("/me", response_model=UserOut)
async def get_me(current_user: UserOut = Depends(get_current_user)):
    """Get current authenticated user."""
    return current_user


@router.get("/navigation", response_model=list[NavigationItem])
async def get_navigation(current_user: UserOut = Depends(get_current_user)):
    """Navigation entries visible to the current role."""
    return [
        NavigationItem(key=item["key"], name=item["name"])
        for item in NAVIGATION
        if current_user.role in item["roles"]
    ]
