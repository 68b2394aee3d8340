"""
Snapshot API endpoints for whole-store backup and restore.
"""

from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bakery_crm.db.session import get_db
from bakery_crm.controllers.snapshot_controller import SnapshotController
from bakery_crm.schemas.snapshot import SnapshotImportResult

router = APIRouter()


@router.get("/export")
async def export_snapshot(
    db: AsyncSession = Depends(get_db),
) -> Dict[str, List[Dict[str, Any]]]:
    """Every collection in one JSON document."""
    controller = SnapshotController(db)
    return await controller.export_snapshot()


@router.post("/import", response_model=SnapshotImportResult)
async def import_snapshot(
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
) -> SnapshotImportResult:
    """
    Replace the collections present in the payload.
    Malformed collections are reset to empty and listed in the result.
    """
    controller = SnapshotController(db)
    return await controller.import_snapshot(payload)
