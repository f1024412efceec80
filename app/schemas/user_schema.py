from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

Role = Literal["admin", "researcher", "public"]
UserStatus = Literal["active", "inactive"]


class UserOut(BaseModel):
    """
    Public profile of a user account.

    This is also the record kept in the session cookie, so it must stay
    JSON-serializable and free of credentials.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: EmailStr
    name: str
    role: Role
    organization: Optional[str] = None


class AdminUserOut(UserOut):
    status: UserStatus
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None


class AdminUserCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: Role = "public"
    organization: Optional[str] = None


class AdminUserUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    role: Optional[Role] = None
    organization: Optional[str] = None
    status: Optional[UserStatus] = None
