"""
Staff user and session models.
"""

from sqlalchemy import Column, String, DateTime, Uuid, Enum as SQLEnum
import uuid
import enum

from bakery_crm.db.base import Base, utcnow


class UserRole(str, enum.Enum):
    """Staff role."""
    ADMIN = "admin"
    STAFF = "staff"


class User(Base):
    """Staff account allowed into the internal screens."""
    
    __tablename__ = "users"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    username = Column(String(100), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        SQLEnum(UserRole, values_callable=lambda x: [e.value for e in UserRole]),
        nullable=False,
        default=UserRole.STAFF,
    )
    created_at = Column(DateTime, nullable=False, default=utcnow)


class UserSession(Base):
    """
    Current-session marker created on login and removed on logout.
    Its presence alone grants access; sessions do not expire.
    """
    
    __tablename__ = "user_sessions"
    
    token = Column(String(128), primary_key=True)
    user_id = Column(Uuid, nullable=False, index=True)
    username = Column(String(100), nullable=False)
    role = Column(
        SQLEnum(UserRole, values_callable=lambda x: [e.value for e in UserRole]),
        nullable=False,
    )
    created_at = Column(DateTime, nullable=False, default=utcnow)
