"""
Sale repository for database operations.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from bakery_crm.db.repositories.base_repository import BaseRepository
from bakery_crm.models.sale import Sale


class SaleRepository(BaseRepository[Sale]):
    """Repository for sales log operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Sale, session)
    
    async def list_recent(self, skip: int = 0, limit: int = 100) -> List[Sale]:
        """Sales newest first."""
        result = await self.session.execute(
            select(Sale)
            .order_by(Sale.date.desc(), Sale.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())
