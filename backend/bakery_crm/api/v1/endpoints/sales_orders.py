"""
Sales order API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from bakery_crm.db.session import get_db
from bakery_crm.controllers.sales_order_controller import SalesOrderController
from bakery_crm.schemas.sales_order import (
    SalesOrderCreate,
    SalesOrderUpdate,
    SalesOrderStatusUpdate,
    SalesOrderResponse,
    SalesOrderListResponse,
    SalesOrderItemCreate,
    SalesOrderItemUpdate,
    SalesOrderStatsResponse,
)

router = APIRouter()


def _not_found(detail: str = "Sales order not found") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


@router.post("", response_model=SalesOrderResponse, status_code=status.HTTP_201_CREATED)
async def create_sales_order(
    order_data: SalesOrderCreate,
    db: AsyncSession = Depends(get_db),
) -> SalesOrderResponse:
    """Create a draft sales order, empty or with items."""
    controller = SalesOrderController(db)
    return await controller.create_order(order_data)


@router.get("", response_model=SalesOrderListResponse)
async def list_sales_orders(
    search: str = Query(None),
    status: str = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> SalesOrderListResponse:
    """List sales orders with optional search and status filter."""
    controller = SalesOrderController(db)
    return await controller.list_orders(search=search, status=status, skip=skip, limit=limit)


@router.get("/stats", response_model=SalesOrderStatsResponse)
async def get_sales_order_stats(
    db: AsyncSession = Depends(get_db),
) -> SalesOrderStatsResponse:
    """Order count, value and pending orders."""
    controller = SalesOrderController(db)
    return await controller.get_stats()


@router.get("/{order_id}", response_model=SalesOrderResponse)
async def get_sales_order(
    order_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> SalesOrderResponse:
    """Get sales order by ID."""
    controller = SalesOrderController(db)
    order = await controller.get_order(order_id)
    if not order:
        raise _not_found()
    return order


@router.put("/{order_id}", response_model=SalesOrderResponse)
async def update_sales_order(
    order_id: UUID,
    order_data: SalesOrderUpdate,
    db: AsyncSession = Depends(get_db),
) -> SalesOrderResponse:
    """Update client details, delivery date or notes."""
    controller = SalesOrderController(db)
    order = await controller.update_order(order_id, order_data)
    if not order:
        raise _not_found()
    return order


@router.patch("/{order_id}/status", response_model=SalesOrderResponse)
async def update_sales_order_status(
    order_id: UUID,
    status_data: SalesOrderStatusUpdate,
    db: AsyncSession = Depends(get_db),
) -> SalesOrderResponse:
    """Change order status."""
    controller = SalesOrderController(db)
    order = await controller.update_status(order_id, status_data.status)
    if not order:
        raise _not_found()
    return order


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sales_order(
    order_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a sales order."""
    controller = SalesOrderController(db)
    deleted = await controller.delete_order(order_id)
    if not deleted:
        raise _not_found()


@router.post("/{order_id}/items", response_model=SalesOrderResponse, status_code=status.HTTP_201_CREATED)
async def add_sales_order_item(
    order_id: UUID,
    item_data: SalesOrderItemCreate,
    db: AsyncSession = Depends(get_db),
) -> SalesOrderResponse:
    """Add a line item; totals are recomputed."""
    controller = SalesOrderController(db)
    order = await controller.add_item(order_id, item_data)
    if not order:
        raise _not_found()
    return order


@router.put("/{order_id}/items/{item_id}", response_model=SalesOrderResponse)
async def update_sales_order_item(
    order_id: UUID,
    item_id: UUID,
    item_data: SalesOrderItemUpdate,
    db: AsyncSession = Depends(get_db),
) -> SalesOrderResponse:
    """Edit a line item; totals are recomputed."""
    controller = SalesOrderController(db)
    order = await controller.update_item(order_id, item_id, item_data)
    if not order:
        raise _not_found("Sales order or item not found")
    return order


@router.delete("/{order_id}/items/{item_id}", response_model=SalesOrderResponse)
async def remove_sales_order_item(
    order_id: UUID,
    item_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> SalesOrderResponse:
    """Remove a line item; totals are recomputed."""
    controller = SalesOrderController(db)
    order = await controller.remove_item(order_id, item_id)
    if not order:
        raise _not_found("Sales order or item not found")
    return order
