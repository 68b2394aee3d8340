"""
Sales log controller.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.controllers.base_controller import BaseController
from bakery_crm.services.sale_service import SaleService
from bakery_crm.schemas.sale import SaleCreate, SaleResponse, SaleListResponse, SaleStatsResponse


class SaleController(BaseController):
    """Controller for sales log operations."""
    
    def __init__(self, session: AsyncSession):
        self.sale_service = SaleService(session)
    
    async def record_sale(self, sale_data: SaleCreate) -> SaleResponse:
        return await self.sale_service.record_sale(sale_data)
    
    async def list_sales(self, skip: int = 0, limit: int = 100) -> SaleListResponse:
        sales, total = await self.sale_service.list_sales(skip=skip, limit=limit)
        return SaleListResponse(items=sales, total=total)
    
    async def get_stats(self) -> SaleStatsResponse:
        return await self.sale_service.get_stats()
