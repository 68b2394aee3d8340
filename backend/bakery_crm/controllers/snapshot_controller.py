"""
Snapshot controller.
"""

from typing import Any, Dict, List
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.controllers.base_controller import BaseController
from bakery_crm.services.snapshot_service import SnapshotService
from bakery_crm.schemas.snapshot import SnapshotImportResult


class SnapshotController(BaseController):
    """Controller for whole-store export and import."""
    
    def __init__(self, session: AsyncSession):
        self.snapshot_service = SnapshotService(session)
    
    async def export_snapshot(self) -> Dict[str, List[Dict[str, Any]]]:
        return await self.snapshot_service.export_snapshot()
    
    async def import_snapshot(self, payload: Dict[str, Any]) -> SnapshotImportResult:
        return await self.snapshot_service.import_snapshot(payload)
