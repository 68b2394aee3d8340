"""
Product model for the bakery catalog.
"""

from sqlalchemy import Column, String, Integer, Numeric, JSON, DateTime, Uuid, Enum as SQLEnum
import uuid
import enum

from bakery_crm.db.base import Base, utcnow


class ProductUnit(str, enum.Enum):
    """Unit a product is priced by."""
    KG = "kg"
    PIECE = "piece"


class ProductStatus(str, enum.Enum):
    """Catalog visibility."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class Product(Base):
    """Catalog entry with base price, flavour options and pricing tiers."""
    
    __tablename__ = "products"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False, index=True)
    category = Column(String(255), nullable=True, index=True)
    base_price = Column(Numeric(12, 2), nullable=False)
    unit = Column(
        SQLEnum(ProductUnit, values_callable=lambda x: [e.value for e in ProductUnit]),
        nullable=False,
        default=ProductUnit.PIECE,
    )
    description = Column(String(2000), nullable=True)
    options = Column(JSON, nullable=False, default=list)
    pricing_tiers = Column(JSON, nullable=False, default=list)  # [{"label": ..., "price": ...}]
    min_quantity = Column(Integer, nullable=False, default=1)
    status = Column(
        SQLEnum(ProductStatus, values_callable=lambda x: [e.value for e in ProductStatus]),
        nullable=False,
        default=ProductStatus.ACTIVE,
    )
    created_at = Column(DateTime, nullable=False, default=utcnow)
