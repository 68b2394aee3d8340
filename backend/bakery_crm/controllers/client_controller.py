"""
Client controller.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.controllers.base_controller import BaseController
from bakery_crm.services.client_service import ClientService
from bakery_crm.schemas.client import ClientCreate, ClientUpdate, ClientResponse, ClientListResponse


class ClientController(BaseController):
    """Controller for client operations."""
    
    def __init__(self, session: AsyncSession):
        self.client_service = ClientService(session)
    
    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        return await self.client_service.create_client(client_data)
    
    async def get_client(self, client_id: UUID) -> Optional[ClientResponse]:
        """Get client by ID."""
        return await self.client_service.get_client(client_id)
    
    async def list_clients(
        self,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> ClientListResponse:
        """List clients with optional search."""
        clients, total = await self.client_service.list_clients(search=search, skip=skip, limit=limit)
        return ClientListResponse(items=clients, total=total)
    
    async def top_clients(self, limit: Optional[int] = None) -> List[ClientResponse]:
        return await self.client_service.top_clients(limit)
    
    async def update_client(
        self,
        client_id: UUID,
        client_data: ClientUpdate,
    ) -> Optional[ClientResponse]:
        """Update a client."""
        return await self.client_service.update_client(client_id, client_data)
    
    async def delete_client(self, client_id: UUID) -> bool:
        """Delete a client."""
        return await self.client_service.delete_client(client_id)
