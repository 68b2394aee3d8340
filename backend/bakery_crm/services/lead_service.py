"""
Lead pipeline service: public intake, board moves, conversion to client.
"""

import logging
from decimal import Decimal
from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.core.events import LeadEvent, LeadEventBus, LeadEventType
from bakery_crm.db.base import utcnow
from bakery_crm.db.repositories.client_repository import ClientRepository
from bakery_crm.db.repositories.lead_repository import LeadRepository
from bakery_crm.deps.di_container import get_container
from bakery_crm.models.lead import Lead, LeadStatus, ACTIVE_LEAD_STATUSES
from bakery_crm.schemas.client import ClientResponse
from bakery_crm.schemas.lead import (
    LeadInquiryCreate,
    LeadUpdate,
    LeadMove,
    LeadResponse,
    LeadBoardColumn,
    LeadBoardResponse,
    LeadStatsResponse,
    LeadConversionResponse,
)
from bakery_crm.schemas.sales_order import SalesOrderResponse
from bakery_crm.services.base_service import BaseService
from bakery_crm.services.sales_order_service import SalesOrderService
from bakery_crm.utils.money import to_money

logger = logging.getLogger(__name__)

# Columns that cannot be cleared by an inline edit
_REQUIRED_FIELDS = ("name", "email", "message", "estimated_value")


class LeadService(BaseService):
    """Service for lead operations."""
    
    def __init__(self, session: AsyncSession, event_bus: LeadEventBus = None):
        self.session = session
        self.lead_repo = LeadRepository(session)
        self.client_repo = ClientRepository(session)
        self.event_bus = event_bus or get_container().lead_event_bus()
    
    async def submit_inquiry(self, inquiry: LeadInquiryCreate) -> LeadResponse:
        """Create a lead from the public inquiry form at the end of the 'new' column."""
        position = await self.lead_repo.next_position(LeadStatus.NEW)
        now = utcnow()
        lead = await self.lead_repo.create(
            **inquiry.model_dump(),
            status=LeadStatus.NEW,
            position=position,
            estimated_value=Decimal("0"),
            created_at=now,
            last_updated=now,
        )
        await self.session.commit()
        
        logger.info("Lead created from inquiry", extra={"lead_id": str(lead.id)})
        await self._publish(LeadEventType.CREATED, lead)
        return LeadResponse.model_validate(lead)
    
    async def get_lead(self, lead_id: UUID) -> Optional[LeadResponse]:
        """Get lead by ID."""
        lead = await self.lead_repo.get(lead_id)
        if not lead:
            return None
        return LeadResponse.model_validate(lead)
    
    async def list_leads(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[List[LeadResponse], int]:
        """List leads filtered by free text and stage ('all' means no stage filter)."""
        status_enum = None
        if status and status != "all":
            try:
                status_enum = LeadStatus(status)
            except ValueError:
                return [], 0
        
        leads = await self.lead_repo.search(search=search, status=status_enum, skip=skip, limit=limit)
        return [LeadResponse.model_validate(lead) for lead in leads], len(leads)
    
    async def get_board(self) -> LeadBoardResponse:
        """Leads grouped into the five stage columns."""
        leads = await self.lead_repo.list_ordered()
        columns = []
        for status in LeadStatus:
            column = [lead for lead in leads if lead.status == status]
            columns.append(
                LeadBoardColumn(
                    status=status,
                    count=len(column),
                    total_value=to_money(sum((to_money(lead.estimated_value) for lead in column), Decimal("0"))),
                    leads=[LeadResponse.model_validate(lead) for lead in column],
                )
            )
        return LeadBoardResponse(columns=columns)
    
    async def move_lead(self, lead_id: UUID, move: LeadMove) -> Optional[LeadResponse]:
        """Move a lead to any stage, optionally to a specific slot in that column."""
        lead = await self.lead_repo.get(lead_id)
        if not lead:
            return None
        
        previous = lead.status
        await self._place_in_column(lead, move.status, move.position)
        lead.last_updated = utcnow()
        await self.session.commit()
        
        logger.info(
            "Lead moved",
            extra={"lead_id": str(lead.id), "from": previous.value, "to": lead.status.value},
        )
        await self._publish(LeadEventType.MOVED, lead)
        return LeadResponse.model_validate(lead)
    
    async def update_lead(self, lead_id: UUID, lead_data: LeadUpdate) -> Optional[LeadResponse]:
        """Inline edit of status, note, estimated value or contact details."""
        lead = await self.lead_repo.get(lead_id)
        if not lead:
            return None
        
        update_dict = lead_data.model_dump(exclude_unset=True)
        status = update_dict.pop("status", None)
        for key, value in update_dict.items():
            if value is None and key in _REQUIRED_FIELDS:
                continue
            setattr(lead, key, value)
        
        if status is not None and status != lead.status:
            await self._place_in_column(lead, status)
        lead.last_updated = utcnow()
        await self.session.commit()
        
        await self._publish(LeadEventType.UPDATED, lead)
        return LeadResponse.model_validate(lead)
    
    async def delete_lead(self, lead_id: UUID) -> bool:
        """Delete a lead and close the gap in its column. Linked clients and orders are left alone."""
        lead = await self.lead_repo.get(lead_id)
        if not lead:
            return False
        
        status = lead.status
        await self.lead_repo.delete(lead_id)
        for index, other in enumerate(await self.lead_repo.list_by_status(status)):
            other.position = index
        await self.session.commit()
        
        logger.info("Lead deleted", extra={"lead_id": str(lead_id)})
        await self.event_bus.publish(LeadEvent(type=LeadEventType.DELETED, lead_id=lead_id, status=status.value))
        return True
    
    async def convert_to_client(self, lead_id: UUID) -> Optional[LeadConversionResponse]:
        """
        Promote a lead to a client.
        
        An existing client with the same email (ignoring case) is linked instead
        of creating a duplicate. Converting an already-linked lead changes nothing.
        """
        lead = await self.lead_repo.get(lead_id)
        if not lead:
            return None
        
        if lead.is_existing_client:
            client = await self.client_repo.get(lead.client_id) if lead.client_id else None
            return LeadConversionResponse(
                lead=LeadResponse.model_validate(lead),
                client=ClientResponse.model_validate(client) if client else None,
                created=False,
            )
        
        client = await self.client_repo.get_by_email(lead.email)
        created = client is None
        if created:
            client = await self.client_repo.create(
                name=lead.name,
                email=lead.email,
                phone=lead.phone,
                total_orders=0,
                total_spent=Decimal("0"),
            )
        
        lead.client_id = client.id
        lead.is_existing_client = True
        if lead.status != LeadStatus.CONVERTED:
            await self._place_in_column(lead, LeadStatus.CONVERTED)
        lead.last_updated = utcnow()
        await self.session.commit()
        
        logger.info(
            "Lead converted to client",
            extra={"lead_id": str(lead.id), "client_id": str(client.id), "client_created": created},
        )
        await self._publish(LeadEventType.CONVERTED, lead)
        return LeadConversionResponse(
            lead=LeadResponse.model_validate(lead),
            client=ClientResponse.model_validate(client),
            created=created,
        )
    
    async def create_sales_order(self, lead_id: UUID) -> Optional[SalesOrderResponse]:
        """Open a sales order pre-filled from a converted lead."""
        lead = await self.lead_repo.get(lead_id)
        if not lead:
            return None
        if lead.status != LeadStatus.CONVERTED:
            raise ValueError("Sales orders can only be created from converted leads")
        return await SalesOrderService(self.session).create_from_lead(lead)
    
    async def get_stats(self) -> LeadStatsResponse:
        """Pipeline counts, conversion rate and open pipeline value."""
        leads = await self.lead_repo.list_all()
        by_status = {status.value: 0 for status in LeadStatus}
        pipeline_value = Decimal("0")
        for lead in leads:
            by_status[lead.status.value] += 1
            if lead.status in ACTIVE_LEAD_STATUSES:
                pipeline_value += to_money(lead.estimated_value)
        
        total = len(leads)
        converted = by_status[LeadStatus.CONVERTED.value]
        return LeadStatsResponse(
            total=total,
            by_status=by_status,
            active=sum(by_status[status.value] for status in ACTIVE_LEAD_STATUSES),
            converted=converted,
            lost=by_status[LeadStatus.LOST.value],
            conversion_rate=round(converted / total * 100, 1) if total else 0.0,
            pipeline_value=to_money(pipeline_value),
        )
    
    async def _place_in_column(self, lead: Lead, target: LeadStatus, position: Optional[int] = None) -> None:
        """Insert the lead into a column at position (default: end) and renumber both columns."""
        previous = lead.status
        target_column = [other for other in await self.lead_repo.list_by_status(target) if other.id != lead.id]
        source_column = []
        if previous != target:
            source_column = [other for other in await self.lead_repo.list_by_status(previous) if other.id != lead.id]
        
        if position is None or position > len(target_column):
            position = len(target_column)
        target_column.insert(position, lead)
        lead.status = target
        
        for index, other in enumerate(target_column):
            other.position = index
        for index, other in enumerate(source_column):
            other.position = index
        await self.session.flush()
    
    async def _publish(self, event_type: LeadEventType, lead: Lead) -> None:
        await self.event_bus.publish(
            LeadEvent(type=event_type, lead_id=lead.id, status=lead.status.value)
        )
