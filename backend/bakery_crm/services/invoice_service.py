"""
Invoice service with business logic.
"""

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.core.config import settings
from bakery_crm.db.base import utcnow
from bakery_crm.db.repositories.invoice_repository import InvoiceRepository
from bakery_crm.db.repositories.sales_order_repository import SalesOrderRepository
from bakery_crm.models.invoice import Invoice, InvoiceItem, InvoiceStatus
from bakery_crm.models.sales_order import SalesOrderStatus
from bakery_crm.schemas.invoice import InvoiceCreate, InvoiceResponse, InvoiceStatsResponse
from bakery_crm.services.base_service import BaseService
from bakery_crm.utils.money import to_money
from bakery_crm.utils.numbering import INVOICE_SERIES, next_document_number

logger = logging.getLogger(__name__)


class InvoiceService(BaseService):
    """Service for invoice operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.invoice_repo = InvoiceRepository(session)
        self.order_repo = SalesOrderRepository(session)
    
    async def create_from_order(self, invoice_data: InvoiceCreate) -> Optional[InvoiceResponse]:
        """
        Issue an invoice for a completed sales order.
        
        Items and totals are copied verbatim; the order itself is not modified.
        
        Returns:
            The new invoice, or None if the order does not exist
            
        Raises:
            ValueError: If the order is not completed or already has an invoice
        """
        order = await self.order_repo.get(invoice_data.sales_order_id)
        if not order:
            return None
        if order.status != SalesOrderStatus.COMPLETED:
            raise ValueError(
                f"Sales order {order.order_number} must be completed before it can be invoiced "
                f"(current status: {order.status.value})"
            )
        existing = await self.invoice_repo.get_by_sales_order(order.id)
        if existing:
            raise ValueError(f"Sales order {order.order_number} is already invoiced as {existing.invoice_number}")
        
        invoice_date = date.today()
        invoice = Invoice(
            invoice_number=await next_document_number(self.session, INVOICE_SERIES, invoice_date),
            sales_order_id=order.id,
            sales_order_number=order.order_number,
            client_id=order.client_id,
            client_name=order.client_name,
            client_email=order.client_email,
            client_phone=order.client_phone,
            invoice_date=invoice_date,
            due_date=invoice_date + timedelta(days=settings.INVOICE_DUE_DAYS),
            status=InvoiceStatus.DRAFT,
            subtotal=order.subtotal,
            tax=order.tax,
            total=order.total,
            notes=invoice_data.notes if invoice_data.notes is not None else order.notes,
            items=[
                InvoiceItem(
                    product_name=item.product_name,
                    category=item.category,
                    quantity=item.quantity,
                    unit=item.unit,
                    unit_price=item.unit_price,
                    total_price=item.total_price,
                    notes=item.notes,
                    position=item.position,
                )
                for item in order.items
            ],
        )
        await self.invoice_repo.add(invoice)
        await self.session.commit()
        
        logger.info(
            "Invoice created",
            extra={"invoice_number": invoice.invoice_number, "order_number": order.order_number},
        )
        return InvoiceResponse.model_validate(invoice)
    
    async def get_invoice(self, invoice_id: UUID) -> Optional[InvoiceResponse]:
        """Get invoice by ID."""
        invoice = await self.invoice_repo.get(invoice_id)
        if not invoice:
            return None
        return InvoiceResponse.model_validate(invoice)
    
    async def list_invoices(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[List[InvoiceResponse], int]:
        """List invoices with optional search and status filter."""
        status_enum = None
        if status and status != "all":
            try:
                status_enum = InvoiceStatus(status)
            except ValueError:
                return [], 0
        
        invoices = await self.invoice_repo.search(search=search, status=status_enum, skip=skip, limit=limit)
        return [InvoiceResponse.model_validate(invoice) for invoice in invoices], len(invoices)
    
    async def update_status(self, invoice_id: UUID, status: InvoiceStatus) -> Optional[InvoiceResponse]:
        """Set invoice status to any of its labels."""
        invoice = await self.invoice_repo.get(invoice_id)
        if not invoice:
            return None
        invoice.status = status
        invoice.updated_at = utcnow()
        await self.session.commit()
        return InvoiceResponse.model_validate(invoice)
    
    async def get_stats(self) -> InvoiceStatsResponse:
        """Invoice count, invoiced amount, paid and outstanding amounts."""
        invoices = await self.invoice_repo.list_all()
        total = Decimal("0")
        paid = Decimal("0")
        for invoice in invoices:
            amount = to_money(invoice.total)
            total += amount
            if invoice.status == InvoiceStatus.PAID:
                paid += amount
        return InvoiceStatsResponse(
            total_invoices=len(invoices),
            total_invoiced=to_money(total),
            paid_amount=to_money(paid),
            outstanding_amount=to_money(total - paid),
        )
