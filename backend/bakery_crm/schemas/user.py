"""
User and authentication schemas.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from uuid import UUID

from bakery_crm.models.user import UserRole


class LoginRequest(BaseModel):
    """Username/password login."""
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """Staff self-registration."""
    username: str = Field(..., min_length=1, max_length=100)
    password: str
    confirm_password: str


class CurrentUser(BaseModel):
    """The session marker: who is logged in."""
    id: UUID
    username: str
    role: UserRole


class LoginResponse(BaseModel):
    """Login response with session token and user info."""
    token: str
    token_type: str = "bearer"
    user: CurrentUser


class UserResponse(BaseModel):
    """Registered account."""
    id: UUID
    username: str
    role: UserRole
    created_at: datetime
    
    class Config:
        from_attributes = True
