"""
Named running counters backing order and invoice numbers.
"""

from sqlalchemy import Column, String, Integer

from bakery_crm.db.base import Base


class DocumentCounter(Base):
    """Last sequence value handed out for a document series."""
    
    __tablename__ = "document_counters"
    
    name = Column(String(50), primary_key=True)
    value = Column(Integer, nullable=False, default=0)
