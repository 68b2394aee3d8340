"""
Sale model for the walk-in sales log.
"""

from sqlalchemy import Column, String, Numeric, Date, DateTime, Uuid
import uuid

from bakery_crm.db.base import Base, utcnow


class Sale(Base):
    """A recorded sale; recording one updates the client's running totals."""
    
    __tablename__ = "sales"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    date = Column(Date, nullable=False, index=True)
    client_id = Column(Uuid, nullable=False, index=True)
    client_name = Column(String(255), nullable=False)
    category = Column(String(255), nullable=False)
    product_type = Column(String(255), nullable=False, default="")
    quantity = Column(Numeric(10, 3), nullable=False)
    unit = Column(String(20), nullable=False)
    price_per_unit = Column(Numeric(12, 2), nullable=False)
    total_price = Column(Numeric(14, 2), nullable=False)
    notes = Column(String(1000), nullable=False, default="")
    created_at = Column(DateTime, nullable=False, default=utcnow)
