"""
User and session repositories.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete

from bakery_crm.db.repositories.base_repository import BaseRepository
from bakery_crm.models.user import User, UserSession


class UserRepository(BaseRepository[User]):
    """Repository for staff accounts."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(User, session)
    
    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.session.execute(
            select(User).where(User.username == username)
        )
        return result.scalar_one_or_none()


class UserSessionRepository:
    """Repository for session markers, keyed by token."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    async def create(self, **kwargs) -> UserSession:
        user_session = UserSession(**kwargs)
        self.session.add(user_session)
        await self.session.flush()
        return user_session
    
    async def get_by_token(self, token: str) -> Optional[UserSession]:
        result = await self.session.execute(
            select(UserSession).where(UserSession.token == token)
        )
        return result.scalar_one_or_none()
    
    async def delete_by_token(self, token: str) -> bool:
        result = await self.session.execute(
            delete(UserSession).where(UserSession.token == token)
        )
        await self.session.flush()
        return result.rowcount > 0
