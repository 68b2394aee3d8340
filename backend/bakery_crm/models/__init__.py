"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from bakery_crm.models.lead import Lead, LeadStatus
from bakery_crm.models.client import Client
from bakery_crm.models.product import Product, ProductUnit, ProductStatus
from bakery_crm.models.sales_order import SalesOrder, SalesOrderItem, SalesOrderStatus
from bakery_crm.models.invoice import Invoice, InvoiceItem, InvoiceStatus
from bakery_crm.models.sale import Sale
from bakery_crm.models.user import User, UserSession, UserRole
from bakery_crm.models.counter import DocumentCounter

__all__ = [
    "Lead",
    "LeadStatus",
    "Client",
    "Product",
    "ProductUnit",
    "ProductStatus",
    "SalesOrder",
    "SalesOrderItem",
    "SalesOrderStatus",
    "Invoice",
    "InvoiceItem",
    "InvoiceStatus",
    "Sale",
    "User",
    "UserSession",
    "UserRole",
    "DocumentCounter",
]
