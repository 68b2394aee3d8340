"""
Invoice controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.controllers.base_controller import BaseController
from bakery_crm.models.invoice import InvoiceStatus
from bakery_crm.services.invoice_service import InvoiceService
from bakery_crm.schemas.invoice import (
    InvoiceCreate,
    InvoiceResponse,
    InvoiceListResponse,
    InvoiceStatsResponse,
)


class InvoiceController(BaseController):
    """Controller for invoice operations."""
    
    def __init__(self, session: AsyncSession):
        self.invoice_service = InvoiceService(session)
    
    async def create_invoice(self, invoice_data: InvoiceCreate) -> Optional[InvoiceResponse]:
        return await self.invoice_service.create_from_order(invoice_data)
    
    async def get_invoice(self, invoice_id: UUID) -> Optional[InvoiceResponse]:
        return await self.invoice_service.get_invoice(invoice_id)
    
    async def list_invoices(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> InvoiceListResponse:
        """List invoices with optional search and status filter."""
        invoices, total = await self.invoice_service.list_invoices(
            search=search,
            status=status,
            skip=skip,
            limit=limit,
        )
        return InvoiceListResponse(items=invoices, total=total)
    
    async def get_stats(self) -> InvoiceStatsResponse:
        return await self.invoice_service.get_stats()
    
    async def update_status(self, invoice_id: UUID, status: InvoiceStatus) -> Optional[InvoiceResponse]:
        return await self.invoice_service.update_status(invoice_id, status)
