"""
Dashboard schema: every headline figure in one response.
"""

from pydantic import BaseModel
from typing import List
from decimal import Decimal

from bakery_crm.schemas.client import ClientResponse
from bakery_crm.schemas.invoice import InvoiceStatsResponse
from bakery_crm.schemas.lead import LeadStatsResponse
from bakery_crm.schemas.sale import SaleStatsResponse
from bakery_crm.schemas.sales_order import SalesOrderStatsResponse


class DashboardResponse(BaseModel):
    """Aggregated metrics across leads, clients, orders, invoices and sales."""
    leads: LeadStatsResponse
    total_clients: int
    total_client_spend: Decimal
    top_clients: List[ClientResponse]
    orders: SalesOrderStatsResponse
    invoices: InvoiceStatsResponse
    sales: SaleStatsResponse
