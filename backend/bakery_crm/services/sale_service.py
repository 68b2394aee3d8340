"""
Sales log service.
Recording a sale prices it from the catalog and rolls it into the client's totals.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.services.base_service import BaseService
from bakery_crm.db.repositories.client_repository import ClientRepository
from bakery_crm.db.repositories.product_repository import ProductRepository
from bakery_crm.db.repositories.sale_repository import SaleRepository
from bakery_crm.schemas.sale import SaleCreate, SaleResponse, SaleStatsResponse
from bakery_crm.utils.money import line_total, to_money

logger = logging.getLogger(__name__)


class SaleService(BaseService):
    """Service for sales log operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.sale_repo = SaleRepository(session)
        self.client_repo = ClientRepository(session)
        self.product_repo = ProductRepository(session)
    
    async def record_sale(self, sale_data: SaleCreate) -> SaleResponse:
        """
        Record a sale and update the client's order count, spend and last order date.
        
        Raises:
            ValueError: If the client is unknown, the category has no price,
                or the quantity is below the catalog minimum
        """
        client = await self.client_repo.get(sale_data.client_id)
        if not client:
            raise ValueError("Please select a client")
        
        product = await self.product_repo.find_for_category(sale_data.category)
        price = sale_data.price_per_unit
        if price is None:
            if product is None:
                raise ValueError(f"No catalog price for category '{sale_data.category}'")
            price = product.base_price
        unit = sale_data.unit or (product.unit.value if product else "piece")
        if product and sale_data.quantity < product.min_quantity:
            raise ValueError(f"Minimum quantity for {sale_data.category} is {product.min_quantity}")
        
        total_price = line_total(sale_data.quantity, price)
        sale_date = sale_data.date or date.today()
        sale = await self.sale_repo.create(
            date=sale_date,
            client_id=client.id,
            client_name=client.name,
            category=sale_data.category,
            product_type=sale_data.product_type,
            quantity=sale_data.quantity,
            unit=unit,
            price_per_unit=to_money(price),
            total_price=total_price,
            notes=sale_data.notes,
        )
        
        client.total_orders = (client.total_orders or 0) + 1
        client.total_spent = to_money(client.total_spent or 0) + total_price
        client.last_order = date.today()
        await self.session.commit()
        
        logger.info(
            "Sale recorded",
            extra={"client_id": str(client.id), "category": sale.category, "total": str(total_price)},
        )
        return SaleResponse.model_validate(sale)
    
    async def list_sales(self, skip: int = 0, limit: int = 100) -> Tuple[List[SaleResponse], int]:
        """Sales newest first."""
        sales = await self.sale_repo.list_recent(skip=skip, limit=limit)
        return [SaleResponse.model_validate(sale) for sale in sales], len(sales)
    
    async def get_stats(self, today: Optional[date] = None) -> SaleStatsResponse:
        """Total revenue, items sold, today's revenue and number of sales."""
        today = today or date.today()
        sales = await self.sale_repo.list_all()
        revenue = Decimal("0")
        items = Decimal("0")
        today_revenue = Decimal("0")
        for sale in sales:
            amount = to_money(sale.total_price)
            revenue += amount
            items += Decimal(str(sale.quantity))
            if sale.date == today:
                today_revenue += amount
        return SaleStatsResponse(
            total_revenue=to_money(revenue),
            total_items=items,
            today_revenue=to_money(today_revenue),
            sales_count=len(sales),
        )
