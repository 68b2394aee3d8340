"""
Lead controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.controllers.base_controller import BaseController
from bakery_crm.services.lead_service import LeadService
from bakery_crm.schemas.lead import (
    LeadInquiryCreate,
    InquiryReceipt,
    LeadUpdate,
    LeadMove,
    LeadResponse,
    LeadListResponse,
    LeadBoardResponse,
    LeadStatsResponse,
    LeadConversionResponse,
)
from bakery_crm.schemas.sales_order import SalesOrderResponse


class LeadController(BaseController):
    """Controller for lead pipeline operations."""
    
    def __init__(self, session: AsyncSession):
        self.lead_service = LeadService(session)
    
    async def submit_inquiry(self, inquiry: LeadInquiryCreate) -> InquiryReceipt:
        """Create a lead from the public form and acknowledge it."""
        lead = await self.lead_service.submit_inquiry(inquiry)
        return InquiryReceipt(id=lead.id, name=lead.name, status=lead.status, created_at=lead.created_at)
    
    async def get_lead(self, lead_id: UUID) -> Optional[LeadResponse]:
        return await self.lead_service.get_lead(lead_id)
    
    async def list_leads(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> LeadListResponse:
        """List leads with optional search and stage filter."""
        leads, total = await self.lead_service.list_leads(search=search, status=status, skip=skip, limit=limit)
        return LeadListResponse(items=leads, total=total)
    
    async def get_board(self) -> LeadBoardResponse:
        return await self.lead_service.get_board()
    
    async def get_stats(self) -> LeadStatsResponse:
        return await self.lead_service.get_stats()
    
    async def move_lead(self, lead_id: UUID, move: LeadMove) -> Optional[LeadResponse]:
        return await self.lead_service.move_lead(lead_id, move)
    
    async def update_lead(self, lead_id: UUID, lead_data: LeadUpdate) -> Optional[LeadResponse]:
        return await self.lead_service.update_lead(lead_id, lead_data)
    
    async def delete_lead(self, lead_id: UUID) -> bool:
        return await self.lead_service.delete_lead(lead_id)
    
    async def convert_to_client(self, lead_id: UUID) -> Optional[LeadConversionResponse]:
        return await self.lead_service.convert_to_client(lead_id)
    
    async def create_sales_order(self, lead_id: UUID) -> Optional[SalesOrderResponse]:
        return await self.lead_service.create_sales_order(lead_id)
