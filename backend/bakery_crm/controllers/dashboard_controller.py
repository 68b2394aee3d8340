"""
Dashboard controller.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.controllers.base_controller import BaseController
from bakery_crm.services.dashboard_service import DashboardService
from bakery_crm.schemas.dashboard import DashboardResponse


class DashboardController(BaseController):
    """Controller for dashboard metrics."""
    
    def __init__(self, session: AsyncSession):
        self.dashboard_service = DashboardService(session)
    
    async def get_metrics(self) -> DashboardResponse:
        return await self.dashboard_service.get_metrics()
