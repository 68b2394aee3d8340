"""
Sales order repository for database operations.
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_, func

from bakery_crm.db.repositories.base_repository import LIKE_ESCAPE, BaseRepository, contains_pattern
from bakery_crm.models.sales_order import SalesOrder, SalesOrderStatus


class SalesOrderRepository(BaseRepository[SalesOrder]):
    """Repository for sales order operations. Items load eagerly with the order."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(SalesOrder, session)
    
    async def get(self, id: UUID) -> Optional[SalesOrder]:
        """Get order by ID with items refreshed from the database."""
        result = await self.session.execute(
            select(SalesOrder)
            .where(SalesOrder.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
    
    async def search(
        self,
        search: Optional[str] = None,
        status: Optional[SalesOrderStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[SalesOrder]:
        """Search by order number or client name; newest first."""
        query = select(SalesOrder)
        
        if search:
            pattern = contains_pattern(search.lower())
            query = query.where(
                or_(
                    func.lower(SalesOrder.order_number).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(SalesOrder.client_name).like(pattern, escape=LIKE_ESCAPE),
                )
            )
        if status:
            query = query.where(SalesOrder.status == status)
        
        query = query.order_by(SalesOrder.created_at.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
