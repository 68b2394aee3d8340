"""
Product catalog service.
"""

from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.services.base_service import BaseService
from bakery_crm.db.repositories.product_repository import ProductRepository
from bakery_crm.models.product import ProductStatus
from bakery_crm.schemas.product import ProductCreate, ProductUpdate, ProductResponse, PricingTier


def _tiers_to_json(tiers: List[PricingTier]) -> list:
    """Pricing tiers as JSON-safe dicts for the JSON column."""
    return [tier.model_dump(mode="json") for tier in tiers]


class ProductService(BaseService):
    """Service for product operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.product_repo = ProductRepository(session)
    
    async def create_product(self, product_data: ProductCreate) -> ProductResponse:
        """Create a catalog entry."""
        product_dict = product_data.model_dump()
        product_dict["pricing_tiers"] = _tiers_to_json(product_data.pricing_tiers)
        product = await self.product_repo.create(**product_dict)
        await self.session.commit()
        return ProductResponse.model_validate(product)
    
    async def get_product(self, product_id: UUID) -> Optional[ProductResponse]:
        """Get product by ID."""
        product = await self.product_repo.get(product_id)
        if not product:
            return None
        return ProductResponse.model_validate(product)
    
    async def list_products(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[List[ProductResponse], int]:
        """List products with optional filters."""
        status_enum = None
        if status and status != "all":
            try:
                status_enum = ProductStatus(status)
            except ValueError:
                return [], 0
        
        products = await self.product_repo.search(
            search=search,
            category=category if category != "all" else None,
            status=status_enum,
            skip=skip,
            limit=limit,
        )
        return [ProductResponse.model_validate(product) for product in products], len(products)
    
    async def update_product(
        self,
        product_id: UUID,
        product_data: ProductUpdate,
    ) -> Optional[ProductResponse]:
        """Update a product."""
        product = await self.product_repo.get(product_id)
        if not product:
            return None
        
        update_dict = product_data.model_dump(exclude_unset=True)
        if product_data.pricing_tiers is not None:
            update_dict["pricing_tiers"] = _tiers_to_json(product_data.pricing_tiers)
        for key, value in update_dict.items():
            if value is None and key not in ("category", "description"):
                continue
            setattr(product, key, value)
        await self.session.commit()
        return ProductResponse.model_validate(product)
    
    async def delete_product(self, product_id: UUID) -> bool:
        """Delete a product."""
        deleted = await self.product_repo.delete(product_id)
        await self.session.commit()
        return deleted
