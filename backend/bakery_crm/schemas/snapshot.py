"""
Snapshot schemas for bulk export/import of every collection.
"""

from pydantic import BaseModel
from typing import Dict, List


class SnapshotImportResult(BaseModel):
    """Records loaded per collection, and the collections that were reset."""
    imported: Dict[str, int]
    reset: List[str] = []
