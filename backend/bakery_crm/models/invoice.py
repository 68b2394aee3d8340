"""
Invoice and invoice line item models.
"""

from sqlalchemy import Column, String, Integer, Numeric, Date, DateTime, ForeignKey, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship
import uuid
import enum

from bakery_crm.db.base import Base, utcnow


class InvoiceStatus(str, enum.Enum):
    """Invoice status; overdue is a manual label only."""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


class Invoice(Base):
    """Billing document derived from a completed sales order."""
    
    __tablename__ = "invoices"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    invoice_number = Column(String(32), nullable=False, unique=True, index=True)
    
    # Weak reference to the source order, unique: one invoice per order
    sales_order_id = Column(Uuid, nullable=False, unique=True, index=True)
    sales_order_number = Column(String(32), nullable=False)
    
    client_id = Column(Uuid, nullable=True, index=True)
    client_name = Column(String(255), nullable=False, default="")
    client_email = Column(String(255), nullable=False, default="")
    client_phone = Column(String(50), nullable=False, default="")
    
    invoice_date = Column(Date, nullable=False)
    due_date = Column(Date, nullable=False)
    status = Column(
        SQLEnum(InvoiceStatus, values_callable=lambda x: [e.value for e in InvoiceStatus]),
        nullable=False,
        default=InvoiceStatus.DRAFT,
        index=True,
    )
    subtotal = Column(Numeric(14, 2), nullable=False, default=0)
    tax = Column(Numeric(14, 2), nullable=False, default=0)
    total = Column(Numeric(14, 2), nullable=False, default=0)
    notes = Column(String(2000), nullable=False, default="")
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
    
    # Relationships
    items = relationship(
        "InvoiceItem",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="InvoiceItem.position",
        lazy="selectin",
    )


class InvoiceItem(Base):
    """Line item copied from the source sales order."""
    
    __tablename__ = "invoice_items"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    invoice_id = Column(Uuid, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False, index=True)
    product_name = Column(String(255), nullable=False)
    category = Column(String(255), nullable=False, default="")
    quantity = Column(Numeric(10, 3), nullable=False, default=1)
    unit = Column(String(20), nullable=False, default="piece")
    unit_price = Column(Numeric(12, 2), nullable=False, default=0)
    total_price = Column(Numeric(14, 2), nullable=False, default=0)
    notes = Column(String(1000), nullable=True)
    position = Column(Integer, nullable=False, default=0)
    
    # Relationships
    invoice = relationship("Invoice", back_populates="items")
