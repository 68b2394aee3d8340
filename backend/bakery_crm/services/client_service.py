"""
Client service with business logic.
"""

from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.core.config import settings
from bakery_crm.services.base_service import BaseService
from bakery_crm.db.repositories.client_repository import ClientRepository
from bakery_crm.schemas.client import ClientCreate, ClientUpdate, ClientResponse


class ClientService(BaseService):
    """Service for client operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.client_repo = ClientRepository(session)
    
    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client with zeroed totals."""
        client_dict = client_data.model_dump(exclude_unset=True)
        client = await self.client_repo.create(**client_dict, total_orders=0, total_spent=0)
        await self.session.commit()
        await self.session.refresh(client)
        return ClientResponse.model_validate(client)
    
    async def get_client(self, client_id: UUID) -> Optional[ClientResponse]:
        """Get client by ID."""
        client = await self.client_repo.get(client_id)
        if not client:
            return None
        return ClientResponse.model_validate(client)
    
    async def list_clients(
        self,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[List[ClientResponse], int]:
        """List clients, optionally filtered by name, email or phone."""
        clients = await self.client_repo.search(search=search, skip=skip, limit=limit)
        return [ClientResponse.model_validate(client) for client in clients], len(clients)
    
    async def top_clients(self, limit: Optional[int] = None) -> List[ClientResponse]:
        """Highest-spending clients."""
        clients = await self.client_repo.top_by_spend(limit or settings.TOP_CLIENTS_LIMIT)
        return [ClientResponse.model_validate(client) for client in clients]
    
    async def update_client(
        self,
        client_id: UUID,
        client_data: ClientUpdate,
    ) -> Optional[ClientResponse]:
        """Update contact details of a client."""
        client = await self.client_repo.get(client_id)
        if not client:
            return None
        
        update_dict = client_data.model_dump(exclude_unset=True)
        if update_dict.get("name", "") is None:
            update_dict.pop("name")
        if not update_dict:
            return ClientResponse.model_validate(client)
        updated = await self.client_repo.update(client_id, **update_dict)
        await self.session.commit()
        await self.session.refresh(updated)
        return ClientResponse.model_validate(updated)
    
    async def delete_client(self, client_id: UUID) -> bool:
        """Delete a client. Leads, orders and sales that reference it are kept."""
        deleted = await self.client_repo.delete(client_id)
        await self.session.commit()
        return deleted
