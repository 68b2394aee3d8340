"""
Sales log Pydantic schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
import datetime as dt
from decimal import Decimal
from uuid import UUID


class SaleCreate(BaseModel):
    """
    Record a sale against a client.
    unit and price_per_unit default to the catalog entry for the category.
    """
    client_id: UUID
    category: str = Field(..., min_length=1, max_length=255)
    product_type: str = Field("", max_length=255)
    quantity: Decimal = Field(Decimal("1"), gt=0)
    unit: Optional[str] = Field(None, max_length=20)
    price_per_unit: Optional[Decimal] = Field(None, gt=0)
    date: Optional[dt.date] = None
    notes: str = Field("", max_length=1000)


class SaleResponse(BaseModel):
    """Schema for sale response."""
    id: UUID
    date: dt.date
    client_id: UUID
    client_name: str
    category: str
    product_type: str
    quantity: Decimal
    unit: str
    price_per_unit: Decimal
    total_price: Decimal
    notes: str = ""
    created_at: dt.datetime
    
    class Config:
        from_attributes = True


class SaleListResponse(BaseModel):
    """Schema for sale list response."""
    items: List[SaleResponse]
    total: int


class SaleStatsResponse(BaseModel):
    """Sales log aggregates."""
    total_revenue: Decimal
    total_items: Decimal
    today_revenue: Decimal
    sales_count: int
