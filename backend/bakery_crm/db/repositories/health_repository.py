"""
Health repository.
Answers readiness questions about the database behind the CRM.
"""

import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError

from bakery_crm.db.base import Base
import bakery_crm.models  # noqa: F401  registers every table on Base

logger = logging.getLogger(__name__)


class HealthRepository:
    """Repository for health check operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    async def check_database(self) -> bool:
        """True when a trivial query round-trips."""
        try:
            result = await self.session.execute(text("SELECT 1"))
            return result.scalar() == 1
        except SQLAlchemyError as e:
            logger.warning("Database check failed", extra={"error": str(e)})
            return False
    
    async def missing_tables(self) -> List[str]:
        """Names of model tables the database does not have yet (e.g. DB_CREATE_TABLES was off)."""
        connection = await self.session.connection()
        existing = await connection.run_sync(lambda conn: set(inspect(conn).get_table_names()))
        return sorted(name for name in Base.metadata.tables if name not in existing)
