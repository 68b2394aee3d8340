"""
Dashboard service.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.services.base_service import BaseService
from bakery_crm.services.client_service import ClientService
from bakery_crm.services.invoice_service import InvoiceService
from bakery_crm.services.lead_service import LeadService
from bakery_crm.services.sale_service import SaleService
from bakery_crm.services.sales_order_service import SalesOrderService
from bakery_crm.schemas.dashboard import DashboardResponse
from bakery_crm.utils.money import to_money


class DashboardService(BaseService):
    """Composes the statistics of the other services."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.lead_service = LeadService(session)
        self.client_service = ClientService(session)
        self.order_service = SalesOrderService(session)
        self.invoice_service = InvoiceService(session)
        self.sale_service = SaleService(session)
    
    async def get_metrics(self) -> DashboardResponse:
        client_repo = self.client_service.client_repo
        return DashboardResponse(
            leads=await self.lead_service.get_stats(),
            total_clients=await client_repo.count(),
            total_client_spend=to_money(await client_repo.total_spent()),
            top_clients=await self.client_service.top_clients(),
            orders=await self.order_service.get_stats(),
            invoices=await self.invoice_service.get_stats(),
            sales=await self.sale_service.get_stats(),
        )
