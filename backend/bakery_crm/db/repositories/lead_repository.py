"""
Lead repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_, func, case

from bakery_crm.db.repositories.base_repository import LIKE_ESCAPE, BaseRepository, contains_pattern
from bakery_crm.models.lead import Lead, LeadStatus

# Board column order used when listing across stages
_STAGE_ORDER = case(
    {status: index for index, status in enumerate(LeadStatus)},
    value=Lead.status,
)


class LeadRepository(BaseRepository[Lead]):
    """Repository for lead operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Lead, session)
    
    async def search(
        self,
        search: Optional[str] = None,
        status: Optional[LeadStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Lead]:
        """Case-insensitive substring search on name, email and product type."""
        query = select(Lead)
        
        if search:
            pattern = contains_pattern(search.lower())
            query = query.where(
                or_(
                    func.lower(Lead.name).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(Lead.email).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(func.coalesce(Lead.product_type, "")).like(pattern, escape=LIKE_ESCAPE),
                )
            )
        if status:
            query = query.where(Lead.status == status)
        
        query = query.order_by(_STAGE_ORDER, Lead.position, Lead.created_at)
        query = query.offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
    
    async def list_by_status(self, status: LeadStatus) -> List[Lead]:
        """All leads in one board column, in board order."""
        result = await self.session.execute(
            select(Lead)
            .where(Lead.status == status)
            .order_by(Lead.position, Lead.created_at)
        )
        return list(result.scalars().all())
    
    async def list_ordered(self) -> List[Lead]:
        """Every lead, grouped by stage then board position."""
        result = await self.session.execute(
            select(Lead).order_by(_STAGE_ORDER, Lead.position, Lead.created_at)
        )
        return list(result.scalars().all())
    
    async def next_position(self, status: LeadStatus) -> int:
        """Position just past the end of a board column."""
        result = await self.session.execute(
            select(func.max(Lead.position)).where(Lead.status == status)
        )
        max_position = result.scalar_one_or_none()
        return 0 if max_position is None else max_position + 1
