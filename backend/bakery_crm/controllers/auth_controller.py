"""
Authentication controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.controllers.base_controller import BaseController
from bakery_crm.services.auth_service import AuthService
from bakery_crm.schemas.user import LoginRequest, LoginResponse, RegisterRequest, CurrentUser, UserResponse


class AuthController(BaseController):
    """Controller for authentication operations."""
    
    def __init__(self, session: AsyncSession):
        self.auth_service = AuthService(session)
    
    async def login(self, credentials: LoginRequest) -> LoginResponse:
        return await self.auth_service.login(credentials)
    
    async def register(self, registration: RegisterRequest) -> UserResponse:
        return await self.auth_service.register(registration)
    
    async def logout(self, token: str) -> bool:
        return await self.auth_service.logout(token)
    
    async def get_current_user(self, token: str) -> Optional[CurrentUser]:
        return await self.auth_service.get_current_user(token)
