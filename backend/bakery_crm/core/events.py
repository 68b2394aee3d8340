"""
In-process publish/subscribe for lead pipeline changes.

Subscribers get their own bounded queue. When a subscriber falls behind, the
oldest pending event is dropped so publishers never block.
"""

import asyncio
import enum
import logging
from datetime import datetime, timezone
from typing import Optional, Set
from uuid import UUID

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class LeadEventType(str, enum.Enum):
    """Kinds of lead change broadcast to subscribers."""
    CREATED = "created"
    UPDATED = "updated"
    MOVED = "moved"
    DELETED = "deleted"
    CONVERTED = "converted"


class LeadEvent(BaseModel):
    """A single lead change notification."""
    type: LeadEventType
    lead_id: UUID
    status: Optional[str] = None
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class LeadEventBus:
    """Fan-out of lead events to any number of queue subscribers."""
    
    def __init__(self, max_queue_size: int = 100):
        self.max_queue_size = max_queue_size
        self._subscribers: Set[asyncio.Queue] = set()
    
    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
    
    def subscribe(self) -> asyncio.Queue:
        """Register a new subscriber and return its queue."""
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.max_queue_size)
        self._subscribers.add(queue)
        logger.debug("Lead event subscriber added", extra={"subscribers": len(self._subscribers)})
        return queue
    
    def unsubscribe(self, queue: asyncio.Queue) -> None:
        """Remove a subscriber; unknown queues are ignored."""
        self._subscribers.discard(queue)
    
    async def publish(self, event: LeadEvent) -> int:
        """
        Deliver an event to every subscriber.
        
        Returns:
            Number of subscribers the event was queued for
        """
        delivered = 0
        for queue in list(self._subscribers):
            if queue.full():
                queue.get_nowait()
                logger.warning("Lead event subscriber lagging, dropped oldest event")
            queue.put_nowait(event)
            delivered += 1
        logger.info(
            f"Lead event published: {event.type.value}",
            extra={"lead_id": str(event.lead_id), "subscribers": delivered},
        )
        return delivered
