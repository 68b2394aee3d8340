"""
Sales log API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.db.session import get_db
from bakery_crm.controllers.sale_controller import SaleController
from bakery_crm.schemas.sale import SaleCreate, SaleResponse, SaleListResponse, SaleStatsResponse

router = APIRouter()


@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
async def record_sale(
    sale_data: SaleCreate,
    db: AsyncSession = Depends(get_db),
) -> SaleResponse:
    """Record a sale and update the client's totals."""
    controller = SaleController(db)
    try:
        return await controller.record_sale(sale_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("", response_model=SaleListResponse)
async def list_sales(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> SaleListResponse:
    """List recorded sales, newest first."""
    controller = SaleController(db)
    return await controller.list_sales(skip=skip, limit=limit)


@router.get("/stats", response_model=SaleStatsResponse)
async def get_sales_stats(
    db: AsyncSession = Depends(get_db),
) -> SaleStatsResponse:
    """Revenue and item totals."""
    controller = SaleController(db)
    return await controller.get_stats()
