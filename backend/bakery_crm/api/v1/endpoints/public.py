"""
Public order-inquiry endpoint. No session required; rate-limited per client address.
"""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.core.rate_limit import limiter, PUBLIC_FORM_LIMIT
from bakery_crm.db.session import get_db
from bakery_crm.controllers.lead_controller import LeadController
from bakery_crm.schemas.lead import LeadInquiryCreate, InquiryReceipt

router = APIRouter()


@router.post("/inquiries", response_model=InquiryReceipt, status_code=status.HTTP_201_CREATED)
@limiter.limit(PUBLIC_FORM_LIMIT)
async def submit_inquiry(
    request: Request,
    inquiry: LeadInquiryCreate,
    db: AsyncSession = Depends(get_db),
) -> InquiryReceipt:
    """Submit an order inquiry; it lands in the 'new' column of the lead board."""
    controller = LeadController(db)
    return await controller.submit_inquiry(inquiry)
