"""
Sales order service with business logic.
Owns line items and keeps subtotal, tax and total consistent with them.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.db.base import utcnow
from bakery_crm.db.repositories.client_repository import ClientRepository
from bakery_crm.db.repositories.sales_order_repository import SalesOrderRepository
from bakery_crm.models.lead import Lead
from bakery_crm.models.sales_order import SalesOrder, SalesOrderItem, SalesOrderStatus, PENDING_ORDER_STATUSES
from bakery_crm.schemas.sales_order import (
    SalesOrderCreate,
    SalesOrderUpdate,
    SalesOrderResponse,
    SalesOrderItemCreate,
    SalesOrderItemUpdate,
    SalesOrderStatsResponse,
)
from bakery_crm.services.base_service import BaseService
from bakery_crm.utils.money import compute_totals, line_total, to_money
from bakery_crm.utils.numbering import ORDER_SERIES, next_document_number

logger = logging.getLogger(__name__)

_CLIENT_FIELDS = ("client_name", "client_email", "client_phone")


class SalesOrderService(BaseService):
    """Service for sales order operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.order_repo = SalesOrderRepository(session)
        self.client_repo = ClientRepository(session)
    
    async def create_order(self, order_data: SalesOrderCreate) -> SalesOrderResponse:
        """
        Create a draft order.
        
        When client_id names a known client, missing contact fields are copied from it.
        An unknown client_id is dropped and the order is created without a client link.
        """
        fields = order_data.model_dump(exclude={"items"})
        await self._apply_client(fields)
        order = await self._create(fields, order_data.items)
        return SalesOrderResponse.model_validate(order)
    
    async def create_from_lead(self, lead: Lead) -> SalesOrderResponse:
        """Draft order pre-filled from a lead; one item seeded from its product type."""
        items = []
        if lead.product_type:
            items.append(
                SalesOrderItemCreate(
                    product_name=lead.product_type,
                    category=lead.category or lead.product_type,
                    quantity=Decimal("1"),
                    unit="piece",
                    unit_price=to_money(lead.estimated_value or 0),
                )
            )
        fields = {
            "client_id": lead.client_id,
            "client_name": lead.name,
            "client_email": lead.email,
            "client_phone": lead.phone,
            "lead_id": lead.id,
            "notes": lead.note,
        }
        order = await self._create(fields, items)
        logger.info(
            "Sales order created from lead",
            extra={"lead_id": str(lead.id), "order_number": order.order_number},
        )
        return SalesOrderResponse.model_validate(order)
    
    async def get_order(self, order_id: UUID) -> Optional[SalesOrderResponse]:
        """Get order by ID."""
        order = await self.order_repo.get(order_id)
        if not order:
            return None
        return SalesOrderResponse.model_validate(order)
    
    async def list_orders(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[List[SalesOrderResponse], int]:
        """List orders filtered by order number / client name and status."""
        status_enum = None
        if status and status != "all":
            try:
                status_enum = SalesOrderStatus(status)
            except ValueError:
                return [], 0
        
        orders = await self.order_repo.search(search=search, status=status_enum, skip=skip, limit=limit)
        return [SalesOrderResponse.model_validate(order) for order in orders], len(orders)
    
    async def update_order(self, order_id: UUID, order_data: SalesOrderUpdate) -> Optional[SalesOrderResponse]:
        """Update client details, delivery date or notes."""
        order = await self.order_repo.get(order_id)
        if not order:
            return None
        
        update_dict = order_data.model_dump(exclude_unset=True)
        if "client_id" in update_dict:
            await self._apply_client(update_dict)
        for key, value in update_dict.items():
            if value is None and (key in _CLIENT_FIELDS or key == "notes"):
                value = ""
            setattr(order, key, value)
        order.updated_at = utcnow()
        await self.session.commit()
        return SalesOrderResponse.model_validate(order)
    
    async def update_status(self, order_id: UUID, status: SalesOrderStatus) -> Optional[SalesOrderResponse]:
        """Set order status. Any transition is allowed."""
        order = await self.order_repo.get(order_id)
        if not order:
            return None
        
        previous = order.status
        order.status = status
        order.updated_at = utcnow()
        await self.session.commit()
        
        logger.info(
            "Sales order status changed",
            extra={"order_number": order.order_number, "from": previous.value, "to": status.value},
        )
        return SalesOrderResponse.model_validate(order)
    
    async def delete_order(self, order_id: UUID) -> bool:
        """Delete an order and its items."""
        deleted = await self.order_repo.delete(order_id)
        await self.session.commit()
        return deleted
    
    async def add_item(self, order_id: UUID, item_data: SalesOrderItemCreate) -> Optional[SalesOrderResponse]:
        """Append a line item and recompute totals."""
        order = await self.order_repo.get(order_id)
        if not order:
            return None
        
        position = max((item.position for item in order.items), default=-1) + 1
        order.items.append(self._build_item(item_data, position))
        self._recalculate(order)
        await self.session.commit()
        return SalesOrderResponse.model_validate(order)
    
    async def update_item(
        self,
        order_id: UUID,
        item_id: UUID,
        item_data: SalesOrderItemUpdate,
    ) -> Optional[SalesOrderResponse]:
        """Edit a line item and recompute totals."""
        order = await self.order_repo.get(order_id)
        if not order:
            return None
        item = self._find_item(order, item_id)
        if not item:
            return None
        
        for key, value in item_data.model_dump(exclude_unset=True).items():
            if value is None and key != "notes":
                continue
            setattr(item, key, value)
        self._recalculate(order)
        await self.session.commit()
        return SalesOrderResponse.model_validate(order)
    
    async def remove_item(self, order_id: UUID, item_id: UUID) -> Optional[SalesOrderResponse]:
        """Remove a line item and recompute totals."""
        order = await self.order_repo.get(order_id)
        if not order:
            return None
        item = self._find_item(order, item_id)
        if not item:
            return None
        
        order.items.remove(item)
        self._recalculate(order)
        await self.session.commit()
        return SalesOrderResponse.model_validate(order)
    
    async def get_stats(self) -> SalesOrderStatsResponse:
        """Order count, total value and number of pending orders."""
        orders = await self.order_repo.list_all()
        total_value = sum((to_money(order.total) for order in orders), Decimal("0"))
        return SalesOrderStatsResponse(
            total_orders=len(orders),
            total_value=to_money(total_value),
            pending_orders=sum(1 for order in orders if order.status in PENDING_ORDER_STATUSES),
        )
    
    async def _create(self, fields: dict, items: List[SalesOrderItemCreate]) -> SalesOrder:
        order = SalesOrder(
            order_number=await next_document_number(self.session, ORDER_SERIES),
            client_id=fields.get("client_id"),
            client_name=fields.get("client_name") or "",
            client_email=fields.get("client_email") or "",
            client_phone=fields.get("client_phone") or "",
            lead_id=fields.get("lead_id"),
            status=SalesOrderStatus.DRAFT,
            order_date=date.today(),
            delivery_date=fields.get("delivery_date"),
            notes=fields.get("notes") or "",
            items=[self._build_item(item, position) for position, item in enumerate(items)],
        )
        self._recalculate(order)
        await self.order_repo.add(order)
        await self.session.commit()
        
        logger.info("Sales order created", extra={"order_number": order.order_number, "total": str(order.total)})
        return order
    
    async def _apply_client(self, fields: dict) -> None:
        """Fill contact fields from the referenced client, or drop an unknown reference."""
        client_id = fields.get("client_id")
        if client_id is None:
            return
        client = await self.client_repo.get(client_id)
        if client is None:
            logger.debug("Ignoring unknown client on sales order", extra={"client_id": str(client_id)})
            fields["client_id"] = None
            return
        defaults = {"client_name": client.name, "client_email": client.email, "client_phone": client.phone}
        for key, value in defaults.items():
            if not fields.get(key):
                fields[key] = value or ""
    
    @staticmethod
    def _build_item(item_data: SalesOrderItemCreate, position: int) -> SalesOrderItem:
        return SalesOrderItem(
            **item_data.model_dump(),
            total_price=line_total(item_data.quantity, item_data.unit_price),
            position=position,
        )
    
    @staticmethod
    def _find_item(order: SalesOrder, item_id: UUID) -> Optional[SalesOrderItem]:
        for item in order.items:
            if item.id == item_id:
                return item
        return None
    
    @staticmethod
    def _recalculate(order: SalesOrder) -> None:
        """Recompute each line total, then subtotal, tax and total."""
        for item in order.items:
            item.total_price = line_total(item.quantity, item.unit_price)
        order.subtotal, order.tax, order.total = compute_totals(item.total_price for item in order.items)
        order.updated_at = utcnow()
