"""
Sales order and line item models.
"""

from sqlalchemy import Column, String, Integer, Numeric, Date, DateTime, ForeignKey, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship
import uuid
import enum

from bakery_crm.db.base import Base, utcnow


class SalesOrderStatus(str, enum.Enum):
    """Sales order status; any transition is permitted."""
    DRAFT = "draft"
    CONFIRMED = "confirmed"
    IN_PRODUCTION = "in_production"
    COMPLETED = "completed"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


PENDING_ORDER_STATUSES = (
    SalesOrderStatus.DRAFT,
    SalesOrderStatus.CONFIRMED,
    SalesOrderStatus.IN_PRODUCTION,
)


class SalesOrder(Base):
    """Itemized commitment to produce goods for a client."""
    
    __tablename__ = "sales_orders"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    order_number = Column(String(32), nullable=False, unique=True, index=True)
    
    # Client details are copied onto the order; client_id and lead_id are weak references
    client_id = Column(Uuid, nullable=True, index=True)
    client_name = Column(String(255), nullable=False, default="")
    client_email = Column(String(255), nullable=False, default="")
    client_phone = Column(String(50), nullable=False, default="")
    lead_id = Column(Uuid, nullable=True, index=True)
    
    status = Column(
        SQLEnum(SalesOrderStatus, values_callable=lambda x: [e.value for e in SalesOrderStatus]),
        nullable=False,
        default=SalesOrderStatus.DRAFT,
        index=True,
    )
    order_date = Column(Date, nullable=False)
    delivery_date = Column(Date, nullable=True)
    subtotal = Column(Numeric(14, 2), nullable=False, default=0)
    tax = Column(Numeric(14, 2), nullable=False, default=0)
    total = Column(Numeric(14, 2), nullable=False, default=0)
    notes = Column(String(2000), nullable=False, default="")
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
    
    # Relationships
    items = relationship(
        "SalesOrderItem",
        back_populates="sales_order",
        cascade="all, delete-orphan",
        order_by="SalesOrderItem.position",
        lazy="selectin",
    )


class SalesOrderItem(Base):
    """Line item on a sales order."""
    
    __tablename__ = "sales_order_items"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    sales_order_id = Column(Uuid, ForeignKey("sales_orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_name = Column(String(255), nullable=False)
    category = Column(String(255), nullable=False, default="")
    quantity = Column(Numeric(10, 3), nullable=False, default=1)
    unit = Column(String(20), nullable=False, default="piece")
    unit_price = Column(Numeric(12, 2), nullable=False, default=0)
    total_price = Column(Numeric(14, 2), nullable=False, default=0)
    notes = Column(String(1000), nullable=True)
    position = Column(Integer, nullable=False, default=0)
    
    # Relationships
    sales_order = relationship("SalesOrder", back_populates="items")
