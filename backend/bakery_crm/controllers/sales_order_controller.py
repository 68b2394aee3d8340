"""
Sales order controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.controllers.base_controller import BaseController
from bakery_crm.models.sales_order import SalesOrderStatus
from bakery_crm.services.sales_order_service import SalesOrderService
from bakery_crm.schemas.sales_order import (
    SalesOrderCreate,
    SalesOrderUpdate,
    SalesOrderResponse,
    SalesOrderListResponse,
    SalesOrderItemCreate,
    SalesOrderItemUpdate,
    SalesOrderStatsResponse,
)


class SalesOrderController(BaseController):
    """Controller for sales order operations."""
    
    def __init__(self, session: AsyncSession):
        self.order_service = SalesOrderService(session)
    
    async def create_order(self, order_data: SalesOrderCreate) -> SalesOrderResponse:
        return await self.order_service.create_order(order_data)
    
    async def get_order(self, order_id: UUID) -> Optional[SalesOrderResponse]:
        return await self.order_service.get_order(order_id)
    
    async def list_orders(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> SalesOrderListResponse:
        """List orders with optional search and status filter."""
        orders, total = await self.order_service.list_orders(search=search, status=status, skip=skip, limit=limit)
        return SalesOrderListResponse(items=orders, total=total)
    
    async def get_stats(self) -> SalesOrderStatsResponse:
        return await self.order_service.get_stats()
    
    async def update_order(self, order_id: UUID, order_data: SalesOrderUpdate) -> Optional[SalesOrderResponse]:
        return await self.order_service.update_order(order_id, order_data)
    
    async def update_status(self, order_id: UUID, status: SalesOrderStatus) -> Optional[SalesOrderResponse]:
        return await self.order_service.update_status(order_id, status)
    
    async def delete_order(self, order_id: UUID) -> bool:
        return await self.order_service.delete_order(order_id)
    
    async def add_item(self, order_id: UUID, item_data: SalesOrderItemCreate) -> Optional[SalesOrderResponse]:
        return await self.order_service.add_item(order_id, item_data)
    
    async def update_item(
        self,
        order_id: UUID,
        item_id: UUID,
        item_data: SalesOrderItemUpdate,
    ) -> Optional[SalesOrderResponse]:
        return await self.order_service.update_item(order_id, item_id, item_data)
    
    async def remove_item(self, order_id: UUID, item_id: UUID) -> Optional[SalesOrderResponse]:
        return await self.order_service.remove_item(order_id, item_id)
