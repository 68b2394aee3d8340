"""
Counter repository for document sequences.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import insert, update
from sqlalchemy.exc import IntegrityError

from bakery_crm.models.counter import DocumentCounter


class CounterRepository:
    """
    Repository for named running counters.
    
    Increments are issued as 'value = value + 1' in the database, so the row
    lock taken by the UPDATE keeps concurrent transactions from drawing the
    same value.
    """
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    async def _increment(self, name: str) -> Optional[int]:
        result = await self.session.execute(
            update(DocumentCounter)
            .where(DocumentCounter.name == name)
            .values(value=DocumentCounter.value + 1)
            .returning(DocumentCounter.value)
            .execution_options(synchronize_session=False)
        )
        return result.scalar_one_or_none()
    
    async def _create(self, name: str, value: int) -> bool:
        """Insert the counter row; False when another transaction created it first."""
        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(DocumentCounter).values(name=name, value=value)
                )
        except IntegrityError:
            return False
        return True
    
    async def next_value(self, name: str) -> int:
        """Increment the named counter and return its new value (first value is 1)."""
        value = await self._increment(name)
        if value is None:
            if await self._create(name, 1):
                return 1
            value = await self._increment(name)
        return value
    
    async def _raise_to(self, name: str, value: int) -> int:
        result = await self.session.execute(
            update(DocumentCounter)
            .where(DocumentCounter.name == name, DocumentCounter.value < value)
            .values(value=value)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
    
    async def ensure_at_least(self, name: str, value: int) -> None:
        """Raise the counter to value if it is lower, so imported numbers are never reissued."""
        if await self._raise_to(name, value) == 0 and not await self._create(name, value):
            await self._raise_to(name, value)
