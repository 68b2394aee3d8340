"""
Authentication service for username/password login.
Issues and revokes session markers; the default admin account is created on demand.
"""

import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.core.config import settings
from bakery_crm.core.exceptions import AuthenticationError
from bakery_crm.core.security import (
    MAX_PASSWORD_BYTES,
    generate_session_token,
    hash_password,
    verify_password,
)
from bakery_crm.db.repositories.user_repository import UserRepository, UserSessionRepository
from bakery_crm.models.user import User, UserRole
from bakery_crm.services.base_service import BaseService
from bakery_crm.schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    CurrentUser,
    UserResponse,
)

logger = logging.getLogger(__name__)


class AuthService(BaseService):
    """Service for authentication operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.session_repo = UserSessionRepository(session)
    
    async def ensure_default_admin(self) -> User:
        """Create the default admin account if it does not exist yet."""
        admin = await self.user_repo.get_by_username(settings.DEFAULT_ADMIN_USERNAME)
        if admin:
            return admin
        admin = await self.user_repo.create(
            username=settings.DEFAULT_ADMIN_USERNAME,
            password_hash=hash_password(settings.DEFAULT_ADMIN_PASSWORD),
            role=UserRole.ADMIN,
        )
        logger.info("Default admin account created", extra={"username": admin.username})
        return admin
    
    async def login(self, credentials: LoginRequest) -> LoginResponse:
        """
        Authenticate with username and password and open a session.
        
        Raises:
            AuthenticationError: If the username is unknown or the password is wrong
        """
        await self.ensure_default_admin()
        user = await self.user_repo.get_by_username(credentials.username)
        if not user or not verify_password(credentials.password, user.password_hash):
            logger.warning("Failed login attempt", extra={"username": credentials.username})
            raise AuthenticationError("Invalid username or password")
        
        user_session = await self.session_repo.create(
            token=generate_session_token(),
            user_id=user.id,
            username=user.username,
            role=user.role,
        )
        await self.session.commit()
        
        logger.info("User logged in", extra={"username": user.username})
        return LoginResponse(
            token=user_session.token,
            user=CurrentUser(id=user.id, username=user.username, role=user.role),
        )
    
    async def register(self, registration: RegisterRequest) -> UserResponse:
        """
        Create a staff account.
        
        Raises:
            ValueError: If passwords differ, the password is too short or the username is taken
        """
        if registration.password != registration.confirm_password:
            raise ValueError("Passwords do not match")
        if len(registration.password) < settings.MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters long")
        if len(registration.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")
        
        await self.ensure_default_admin()
        if await self.user_repo.get_by_username(registration.username):
            raise ValueError("Username already exists")
        
        user = await self.user_repo.create(
            username=registration.username,
            password_hash=hash_password(registration.password),
            role=UserRole.STAFF,
        )
        await self.session.commit()
        
        logger.info("User registered", extra={"username": user.username})
        return UserResponse.model_validate(user)
    
    async def logout(self, token: str) -> bool:
        """Remove the session marker for a token."""
        removed = await self.session_repo.delete_by_token(token)
        await self.session.commit()
        return removed
    
    async def get_current_user(self, token: str) -> Optional[CurrentUser]:
        """Resolve a session token to its user, or None if no such session exists."""
        if not token:
            return None
        user_session = await self.session_repo.get_by_token(token)
        if not user_session:
            return None
        return CurrentUser(
            id=user_session.user_id,
            username=user_session.username,
            role=user_session.role,
        )
