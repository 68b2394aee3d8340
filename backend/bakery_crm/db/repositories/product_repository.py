"""
Product repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_, func

from bakery_crm.db.repositories.base_repository import LIKE_ESCAPE, BaseRepository, contains_pattern
from bakery_crm.models.product import Product, ProductStatus


class ProductRepository(BaseRepository[Product]):
    """Repository for product operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Product, session)
    
    async def search(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[ProductStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Product]:
        """List products filtered by free text, category and status."""
        query = select(Product)
        
        if search:
            pattern = contains_pattern(search.lower())
            query = query.where(
                or_(
                    func.lower(Product.name).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(func.coalesce(Product.description, "")).like(pattern, escape=LIKE_ESCAPE),
                )
            )
        if category:
            query = query.where(Product.category == category)
        if status:
            query = query.where(Product.status == status)
        
        query = query.order_by(Product.category, Product.name).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
    
    async def find_for_category(self, category: str) -> Optional[Product]:
        """
        Catalog entry a sales-log category refers to.
        Matches on category first, then on product name, active products preferred.
        """
        for column in (Product.category, Product.name):
            result = await self.session.execute(
                select(Product)
                .where(func.lower(column) == category.lower())
                .order_by(Product.status, Product.created_at)
                .limit(1)
            )
            product = result.scalar_one_or_none()
            if product:
                return product
        return None
