"""
Lead Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field, EmailStr, field_validator
from typing import Optional, List, Dict
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from bakery_crm.models.lead import LeadStatus
from bakery_crm.schemas.client import ClientResponse


class LeadInquiryCreate(BaseModel):
    """Public order-inquiry form submission."""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    product_type: Optional[str] = Field(None, max_length=255)
    category: Optional[str] = Field(None, max_length=255)
    message: str = Field(..., min_length=1, max_length=2000)
    
    @field_validator("name", "message")
    @classmethod
    def not_blank(cls, value: str) -> str:
        """Required text fields must contain more than whitespace."""
        value = value.strip()
        if not value:
            raise ValueError("Field is required")
        return value


class InquiryReceipt(BaseModel):
    """Acknowledgement returned to the public form."""
    id: UUID
    name: str
    status: LeadStatus
    created_at: datetime
    message: str = "Thank you for your inquiry! We'll get back to you within 24 hours."


class LeadUpdate(BaseModel):
    """Inline edit of a lead (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    product_type: Optional[str] = Field(None, max_length=255)
    category: Optional[str] = Field(None, max_length=255)
    message: Optional[str] = Field(None, max_length=2000)
    status: Optional[LeadStatus] = None
    note: Optional[str] = Field(None, max_length=2000)
    estimated_value: Optional[Decimal] = Field(None, ge=0)


class LeadMove(BaseModel):
    """Drag-and-drop onto a board column, optionally at a given slot."""
    status: LeadStatus
    position: Optional[int] = Field(None, ge=0)


class LeadResponse(BaseModel):
    """Schema for lead response."""
    id: UUID
    name: str
    email: str
    phone: Optional[str] = None
    product_type: Optional[str] = None
    category: Optional[str] = None
    message: str
    status: LeadStatus
    position: int = 0
    estimated_value: Decimal = Decimal("0")
    note: Optional[str] = None
    created_at: datetime
    last_updated: datetime
    client_id: Optional[UUID] = None
    is_existing_client: bool = False
    
    class Config:
        from_attributes = True


class LeadListResponse(BaseModel):
    """Schema for lead list response."""
    items: List[LeadResponse]
    total: int


class LeadBoardColumn(BaseModel):
    """One pipeline stage on the board."""
    status: LeadStatus
    count: int
    total_value: Decimal
    leads: List[LeadResponse]


class LeadBoardResponse(BaseModel):
    """All five stages in board order."""
    columns: List[LeadBoardColumn]


class LeadStatsResponse(BaseModel):
    """Pipeline counts and value."""
    total: int
    by_status: Dict[str, int]
    active: int
    converted: int
    lost: int
    conversion_rate: float
    pipeline_value: Decimal


class LeadConversionResponse(BaseModel):
    """Outcome of promoting a lead to a client."""
    lead: LeadResponse
    client: Optional[ClientResponse] = None
    created: bool = False
