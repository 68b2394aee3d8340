"""
Product controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.controllers.base_controller import BaseController
from bakery_crm.services.product_service import ProductService
from bakery_crm.schemas.product import ProductCreate, ProductUpdate, ProductResponse, ProductListResponse


class ProductController(BaseController):
    """Controller for product catalog operations."""
    
    def __init__(self, session: AsyncSession):
        self.product_service = ProductService(session)
    
    async def create_product(self, product_data: ProductCreate) -> ProductResponse:
        return await self.product_service.create_product(product_data)
    
    async def get_product(self, product_id: UUID) -> Optional[ProductResponse]:
        return await self.product_service.get_product(product_id)
    
    async def list_products(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> ProductListResponse:
        """List products with optional filters."""
        products, total = await self.product_service.list_products(
            search=search,
            category=category,
            status=status,
            skip=skip,
            limit=limit,
        )
        return ProductListResponse(items=products, total=total)
    
    async def update_product(self, product_id: UUID, product_data: ProductUpdate) -> Optional[ProductResponse]:
        return await self.product_service.update_product(product_id, product_data)
    
    async def delete_product(self, product_id: UUID) -> bool:
        return await self.product_service.delete_product(product_id)
