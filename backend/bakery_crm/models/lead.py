"""
Lead model for the inquiry pipeline.
"""

from sqlalchemy import Column, String, Integer, Numeric, Boolean, DateTime, Uuid, Enum as SQLEnum
import uuid
import enum

from bakery_crm.db.base import Base, utcnow


class LeadStatus(str, enum.Enum):
    """Pipeline stage of a lead, in board order."""
    NEW = "new"
    CONTACTED = "contacted"
    QUOTED = "quoted"
    CONVERTED = "converted"
    LOST = "lost"


# Stages still being worked
ACTIVE_LEAD_STATUSES = (LeadStatus.NEW, LeadStatus.CONTACTED, LeadStatus.QUOTED)


class Lead(Base):
    """Inbound customer inquiry tracked through the pipeline."""
    
    __tablename__ = "leads"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    product_type = Column(String(255), nullable=True)
    category = Column(String(255), nullable=True)
    message = Column(String(2000), nullable=False)
    status = Column(
        SQLEnum(LeadStatus, values_callable=lambda x: [e.value for e in LeadStatus]),
        nullable=False,
        default=LeadStatus.NEW,
        index=True,
    )
    position = Column(Integer, nullable=False, default=0)  # Order inside its board column
    estimated_value = Column(Numeric(12, 2), nullable=False, default=0)
    note = Column(String(2000), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    last_updated = Column(DateTime, nullable=False, default=utcnow)
    
    # Weak reference, no FK: deleting a client leaves the lead untouched
    client_id = Column(Uuid, nullable=True, index=True)
    is_existing_client = Column(Boolean, nullable=False, default=False)
