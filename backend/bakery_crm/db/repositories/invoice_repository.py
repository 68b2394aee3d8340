"""
Invoice repository for database operations.
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_, func

from bakery_crm.db.repositories.base_repository import LIKE_ESCAPE, BaseRepository, contains_pattern
from bakery_crm.models.invoice import Invoice, InvoiceStatus


class InvoiceRepository(BaseRepository[Invoice]):
    """Repository for invoice operations. Items load eagerly with the invoice."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Invoice, session)
    
    async def get_by_sales_order(self, sales_order_id: UUID) -> Optional[Invoice]:
        """Invoice already issued for an order, if any."""
        result = await self.session.execute(
            select(Invoice).where(Invoice.sales_order_id == sales_order_id)
        )
        return result.scalar_one_or_none()
    
    async def search(
        self,
        search: Optional[str] = None,
        status: Optional[InvoiceStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Invoice]:
        """Search by invoice number, order number or client name; newest first."""
        query = select(Invoice)
        
        if search:
            pattern = contains_pattern(search.lower())
            query = query.where(
                or_(
                    func.lower(Invoice.invoice_number).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(Invoice.sales_order_number).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(Invoice.client_name).like(pattern, escape=LIKE_ESCAPE),
                )
            )
        if status:
            query = query.where(Invoice.status == status)
        
        query = query.order_by(Invoice.created_at.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
