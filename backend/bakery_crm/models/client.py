"""
Client model for the customer registry.
"""

from sqlalchemy import Column, String, Integer, Numeric, Date, DateTime, Uuid
import uuid

from bakery_crm.db.base import Base, utcnow


class Client(Base):
    """Standing customer record, promoted from a lead or entered directly."""
    
    __tablename__ = "clients"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=True, index=True)
    phone = Column(String(50), nullable=True)
    address = Column(String(500), nullable=True)
    notes = Column(String(2000), nullable=True)
    total_orders = Column(Integer, nullable=False, default=0)
    total_spent = Column(Numeric(14, 2), nullable=False, default=0)
    last_order = Column(Date, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
