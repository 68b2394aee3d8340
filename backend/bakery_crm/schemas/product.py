"""
Product Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from bakery_crm.models.product import ProductUnit, ProductStatus


class PricingTier(BaseModel):
    """A size, variant or pack with its own price."""
    label: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(..., ge=0)


class ProductBase(BaseModel):
    """Base product schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    category: Optional[str] = Field(None, max_length=255)
    base_price: Decimal = Field(..., ge=0)
    unit: ProductUnit = ProductUnit.PIECE
    description: Optional[str] = Field(None, max_length=2000)
    options: List[str] = []
    pricing_tiers: List[PricingTier] = []
    min_quantity: int = Field(1, ge=1)
    status: ProductStatus = ProductStatus.ACTIVE


class ProductCreate(ProductBase):
    """Schema for creating a product."""
    pass


class ProductUpdate(BaseModel):
    """Schema for updating a product (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, max_length=255)
    base_price: Optional[Decimal] = Field(None, ge=0)
    unit: Optional[ProductUnit] = None
    description: Optional[str] = Field(None, max_length=2000)
    options: Optional[List[str]] = None
    pricing_tiers: Optional[List[PricingTier]] = None
    min_quantity: Optional[int] = Field(None, ge=1)
    status: Optional[ProductStatus] = None


class ProductResponse(ProductBase):
    """Schema for product response."""
    id: UUID
    created_at: datetime
    
    class Config:
        from_attributes = True


class ProductListResponse(BaseModel):
    """Schema for product list response."""
    items: List[ProductResponse]
    total: int
