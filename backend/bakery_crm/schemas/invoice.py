"""
Invoice Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from bakery_crm.models.invoice import InvoiceStatus


class InvoiceCreate(BaseModel):
    """Issue an invoice for a completed sales order."""
    sales_order_id: UUID
    notes: Optional[str] = Field(None, max_length=2000)


class InvoiceStatusUpdate(BaseModel):
    """Schema for changing invoice status."""
    status: InvoiceStatus


class InvoiceItemResponse(BaseModel):
    """Line copied from the sales order."""
    id: UUID
    product_name: str
    category: str
    quantity: Decimal
    unit: str
    unit_price: Decimal
    total_price: Decimal
    notes: Optional[str] = None
    position: int = 0
    
    class Config:
        from_attributes = True


class InvoiceResponse(BaseModel):
    """Schema for invoice response."""
    id: UUID
    invoice_number: str
    sales_order_id: UUID
    sales_order_number: str
    client_id: Optional[UUID] = None
    client_name: str = ""
    client_email: str = ""
    client_phone: str = ""
    invoice_date: date
    due_date: date
    status: InvoiceStatus
    items: List[InvoiceItemResponse] = []
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    notes: str = ""
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class InvoiceListResponse(BaseModel):
    """Schema for invoice list response."""
    items: List[InvoiceResponse]
    total: int


class InvoiceStatsResponse(BaseModel):
    """Invoice counts and amounts."""
    total_invoices: int
    total_invoiced: Decimal
    paid_amount: Decimal
    outstanding_amount: Decimal
