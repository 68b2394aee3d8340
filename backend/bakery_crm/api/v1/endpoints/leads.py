"""
Lead pipeline API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from bakery_crm.db.session import get_db
from bakery_crm.controllers.lead_controller import LeadController
from bakery_crm.schemas.lead import (
    LeadUpdate,
    LeadMove,
    LeadResponse,
    LeadListResponse,
    LeadBoardResponse,
    LeadStatsResponse,
    LeadConversionResponse,
)
from bakery_crm.schemas.sales_order import SalesOrderResponse

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Lead not found",
    )


@router.get("", response_model=LeadListResponse)
async def list_leads(
    search: str = Query(None),
    status: str = Query(None, description="Stage filter; 'all' disables it"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> LeadListResponse:
    """List leads with optional search and stage filter."""
    controller = LeadController(db)
    return await controller.list_leads(search=search, status=status, skip=skip, limit=limit)


@router.get("/board", response_model=LeadBoardResponse)
async def get_board(
    db: AsyncSession = Depends(get_db),
) -> LeadBoardResponse:
    """Leads grouped into the pipeline columns."""
    controller = LeadController(db)
    return await controller.get_board()


@router.get("/stats", response_model=LeadStatsResponse)
async def get_lead_stats(
    db: AsyncSession = Depends(get_db),
) -> LeadStatsResponse:
    """Pipeline statistics."""
    controller = LeadController(db)
    return await controller.get_stats()


@router.get("/{lead_id}", response_model=LeadResponse)
async def get_lead(
    lead_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> LeadResponse:
    """Get lead by ID."""
    controller = LeadController(db)
    lead = await controller.get_lead(lead_id)
    if not lead:
        raise _not_found()
    return lead


@router.put("/{lead_id}", response_model=LeadResponse)
async def update_lead(
    lead_id: UUID,
    lead_data: LeadUpdate,
    db: AsyncSession = Depends(get_db),
) -> LeadResponse:
    """Inline edit of a lead."""
    controller = LeadController(db)
    lead = await controller.update_lead(lead_id, lead_data)
    if not lead:
        raise _not_found()
    return lead


@router.post("/{lead_id}/move", response_model=LeadResponse)
async def move_lead(
    lead_id: UUID,
    move: LeadMove,
    db: AsyncSession = Depends(get_db),
) -> LeadResponse:
    """Move a lead to a stage (drag and drop on the board)."""
    controller = LeadController(db)
    lead = await controller.move_lead(lead_id, move)
    if not lead:
        raise _not_found()
    return lead


@router.post("/{lead_id}/convert", response_model=LeadConversionResponse)
async def convert_lead(
    lead_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> LeadConversionResponse:
    """Convert a lead to a client, linking an existing client with the same email."""
    controller = LeadController(db)
    result = await controller.convert_to_client(lead_id)
    if not result:
        raise _not_found()
    return result


@router.post("/{lead_id}/sales-order", response_model=SalesOrderResponse, status_code=status.HTTP_201_CREATED)
async def create_sales_order_from_lead(
    lead_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> SalesOrderResponse:
    """Open a sales order pre-filled from a converted lead."""
    controller = LeadController(db)
    try:
        order = await controller.create_sales_order(lead_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not order:
        raise _not_found()
    return order


@router.delete("/{lead_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_lead(
    lead_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a lead."""
    controller = LeadController(db)
    deleted = await controller.delete_lead(lead_id)
    if not deleted:
        raise _not_found()
