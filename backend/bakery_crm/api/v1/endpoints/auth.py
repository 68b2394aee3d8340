"""
Authentication API endpoints: username/password login and staff registration.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.api.v1.middleware import require_authentication, security
from bakery_crm.db.session import get_db
from bakery_crm.controllers.auth_controller import AuthController
from bakery_crm.schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    CurrentUser,
    UserResponse,
)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    """
    Log in with username and password.
    The default admin account is created on first use.
    """
    controller = AuthController(db)
    return await controller.login(credentials)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    registration: RegisterRequest,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Register a staff account."""
    controller = AuthController(db)
    try:
        return await controller.register(registration)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    current_user: CurrentUser = Depends(require_authentication),
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db),
):
    """End the current session."""
    controller = AuthController(db)
    await controller.logout(credentials.credentials)


@router.get("/me", response_model=CurrentUser)
async def get_current_user_info(
    current_user: CurrentUser = Depends(require_authentication),
) -> CurrentUser:
    """Get the user owning the current session."""
    return current_user
