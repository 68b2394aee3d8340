"""
Client repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_, func

from bakery_crm.db.repositories.base_repository import LIKE_ESCAPE, BaseRepository, contains_pattern
from bakery_crm.models.client import Client


class ClientRepository(BaseRepository[Client]):
    """Repository for client operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Client, session)
    
    async def get_by_email(self, email: str) -> Optional[Client]:
        """Get client by email, ignoring case."""
        if not email:
            return None
        result = await self.session.execute(
            select(Client)
            .where(func.lower(Client.email) == email.strip().lower())
            .order_by(Client.created_at)
            .limit(1)
        )
        return result.scalar_one_or_none()
    
    async def search(
        self,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Client]:
        """Substring search on name and email (case-insensitive) and phone."""
        query = select(Client)
        
        if search:
            pattern = contains_pattern(search.lower())
            query = query.where(
                or_(
                    func.lower(Client.name).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(func.coalesce(Client.email, "")).like(pattern, escape=LIKE_ESCAPE),
                    func.coalesce(Client.phone, "").like(contains_pattern(search), escape=LIKE_ESCAPE),
                )
            )
        
        query = query.order_by(Client.created_at.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
    
    async def top_by_spend(self, limit: int = 5) -> List[Client]:
        """Clients with the highest total spend."""
        result = await self.session.execute(
            select(Client)
            .order_by(Client.total_spent.desc(), Client.name)
            .limit(limit)
        )
        return list(result.scalars().all())
    
    async def total_spent(self) -> float:
        result = await self.session.execute(
            select(func.coalesce(func.sum(Client.total_spent), 0))
        )
        return result.scalar_one()
