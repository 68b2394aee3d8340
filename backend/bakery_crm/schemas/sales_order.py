"""
Sales order Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from bakery_crm.models.sales_order import SalesOrderStatus


class SalesOrderItemBase(BaseModel):
    """Base schema for an order line."""
    product_name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=255)
    quantity: Decimal = Field(Decimal("1"), gt=0)
    unit: str = Field("kg", min_length=1, max_length=20)
    unit_price: Decimal = Field(Decimal("0"), ge=0)
    notes: Optional[str] = Field(None, max_length=1000)


class SalesOrderItemCreate(SalesOrderItemBase):
    """Create schema for an order line."""
    pass


class SalesOrderItemUpdate(BaseModel):
    """Update schema for an order line (all fields optional)."""
    product_name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=255)
    quantity: Optional[Decimal] = Field(None, gt=0)
    unit: Optional[str] = Field(None, min_length=1, max_length=20)
    unit_price: Optional[Decimal] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=1000)


class SalesOrderItemResponse(SalesOrderItemBase):
    """Response schema for an order line."""
    id: UUID
    total_price: Decimal
    position: int = 0
    
    class Config:
        from_attributes = True


class SalesOrderCreate(BaseModel):
    """Schema for creating an order, empty or with items."""
    client_id: Optional[UUID] = None
    client_name: Optional[str] = Field(None, max_length=255)
    client_email: Optional[str] = Field(None, max_length=255)
    client_phone: Optional[str] = Field(None, max_length=50)
    delivery_date: Optional[date] = None
    notes: Optional[str] = Field(None, max_length=2000)
    items: List[SalesOrderItemCreate] = []


class SalesOrderUpdate(BaseModel):
    """Schema for updating order details (all fields optional)."""
    client_id: Optional[UUID] = None
    client_name: Optional[str] = Field(None, max_length=255)
    client_email: Optional[str] = Field(None, max_length=255)
    client_phone: Optional[str] = Field(None, max_length=50)
    delivery_date: Optional[date] = None
    notes: Optional[str] = Field(None, max_length=2000)


class SalesOrderStatusUpdate(BaseModel):
    """Schema for changing order status."""
    status: SalesOrderStatus


class SalesOrderResponse(BaseModel):
    """Schema for sales order response."""
    id: UUID
    order_number: str
    client_id: Optional[UUID] = None
    client_name: str = ""
    client_email: str = ""
    client_phone: str = ""
    lead_id: Optional[UUID] = None
    status: SalesOrderStatus
    order_date: date
    delivery_date: Optional[date] = None
    items: List[SalesOrderItemResponse] = []
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    notes: str = ""
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class SalesOrderListResponse(BaseModel):
    """Schema for sales order list response."""
    items: List[SalesOrderResponse]
    total: int


class SalesOrderStatsResponse(BaseModel):
    """Order counts and value."""
    total_orders: int
    total_value: Decimal
    pending_orders: int
