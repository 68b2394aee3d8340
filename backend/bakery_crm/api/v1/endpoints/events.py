"""
Lead event stream over WebSocket.
Pushes every lead change to connected staff instead of having them poll.
"""

import asyncio
import logging
from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect, status

from bakery_crm.db.session import get_sessionmaker
from bakery_crm.deps.di_container import get_container
from bakery_crm.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter()


async def _forward_events(websocket: WebSocket, queue: asyncio.Queue) -> None:
    while True:
        event = await queue.get()
        await websocket.send_json(event.model_dump(mode="json"))


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    """Drain client messages until the client goes away; the stream is one-way."""
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return


@router.websocket("/leads")
async def lead_events(
    websocket: WebSocket,
    token: str = Query(None),
):
    """Stream LeadEvent JSON messages; the session token is passed as ?token=."""
    # The session is released before streaming so open streams hold no pooled connection
    async with get_sessionmaker()() as session:
        current_user = await AuthService(session).get_current_user(token)
    if not current_user:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    
    bus = get_container().lead_event_bus()
    queue = bus.subscribe()
    tasks = set()
    try:
        await websocket.accept()
        logger.info("Lead event stream opened", extra={"username": current_user.username})
        
        tasks = {
            asyncio.create_task(_forward_events(websocket, queue)),
            asyncio.create_task(_wait_for_disconnect(websocket)),
        }
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            error = task.exception()
            if error is not None and not isinstance(error, WebSocketDisconnect):
                raise error
    finally:
        for task in tasks:
            task.cancel()
        bus.unsubscribe(queue)
        logger.info("Lead event stream closed", extra={"username": current_user.username})
