"""
Invoice API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from bakery_crm.db.session import get_db
from bakery_crm.controllers.invoice_controller import InvoiceController
from bakery_crm.schemas.invoice import (
    InvoiceCreate,
    InvoiceStatusUpdate,
    InvoiceResponse,
    InvoiceListResponse,
    InvoiceStatsResponse,
)

router = APIRouter()


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    invoice_data: InvoiceCreate,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Issue an invoice for a completed sales order."""
    controller = InvoiceController(db)
    try:
        invoice = await controller.create_invoice(invoice_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not invoice:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Sales order not found",
        )
    return invoice


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    search: str = Query(None),
    status: str = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> InvoiceListResponse:
    """List invoices with optional search and status filter."""
    controller = InvoiceController(db)
    return await controller.list_invoices(search=search, status=status, skip=skip, limit=limit)


@router.get("/stats", response_model=InvoiceStatsResponse)
async def get_invoice_stats(
    db: AsyncSession = Depends(get_db),
) -> InvoiceStatsResponse:
    """Invoice totals by payment state."""
    controller = InvoiceController(db)
    return await controller.get_stats()


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Get invoice by ID."""
    controller = InvoiceController(db)
    invoice = await controller.get_invoice(invoice_id)
    if not invoice:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invoice not found",
        )
    return invoice


@router.patch("/{invoice_id}/status", response_model=InvoiceResponse)
async def update_invoice_status(
    invoice_id: UUID,
    status_data: InvoiceStatusUpdate,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Change invoice status."""
    controller = InvoiceController(db)
    invoice = await controller.update_status(invoice_id, status_data.status)
    if not invoice:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invoice not found",
        )
    return invoice
