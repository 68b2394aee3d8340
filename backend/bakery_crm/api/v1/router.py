"""
API v1 router that aggregates all endpoint routers.
All routes require a session except health, auth and the public inquiry form.
"""

from fastapi import APIRouter, Depends
from bakery_crm.api.v1.middleware import require_authentication

from bakery_crm.api.v1.endpoints import (
    health,
    auth,
    public,
    events,
    leads,
    clients,
    products,
    sales_orders,
    invoices,
    sales,
    dashboard,
    snapshots,
)

api_router = APIRouter()

# Public routes (no authentication required)
api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(public.router, prefix="/public", tags=["public"])

# WebSockets cannot send an Authorization header; the stream checks its token itself
api_router.include_router(events.router, prefix="/events", tags=["events"])

# Protected routes (authentication required for all endpoints)
# Authentication is enforced via dependency injection at the router level
api_router.include_router(
    leads.router,
    prefix="/leads",
    tags=["leads"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    clients.router,
    prefix="/clients",
    tags=["clients"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    products.router,
    prefix="/products",
    tags=["products"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    sales_orders.router,
    prefix="/sales-orders",
    tags=["sales-orders"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    invoices.router,
    prefix="/invoices",
    tags=["invoices"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    sales.router,
    prefix="/sales",
    tags=["sales"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(require_authentication)],
)
api_router.include_router(
    snapshots.router,
    prefix="/snapshots",
    tags=["snapshots"],
    dependencies=[Depends(require_authentication)],
)
