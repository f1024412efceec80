from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    # Unknown or malformed addresses fail as bad credentials, not validation errors
    email: str
    password: str


class RegisterRequest(BaseModel):
    """Self-service registration; admin accounts are only created by admins."""
    email: EmailStr
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    role: Literal["researcher", "public"] = "public"
    organization: Optional[str] = None


class NavigationItem(BaseModel):
    key: str
    name: str
