"""
Dashboard API endpoint.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.db.session import get_db
from bakery_crm.controllers.dashboard_controller import DashboardController
from bakery_crm.schemas.dashboard import DashboardResponse

router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    db: AsyncSession = Depends(get_db),
) -> DashboardResponse:
    """Headline metrics for the staff dashboard."""
    controller = DashboardController(db)
    return await controller.get_metrics()
