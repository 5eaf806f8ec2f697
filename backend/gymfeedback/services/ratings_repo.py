from __future__ import annotations
from typing import Any, Dict, List

from gymfeedback.core.constants import RATINGS_TABLE
from gymfeedback.services.supabase import SupabaseClient


class RatingsRepo:
    def __init__(self, db: SupabaseClient):
        self.db = db

    async def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        return await self.db.insert(RATINGS_TABLE, row)

    async def values(self, professor_id: str | None = None) -> List[int]:
        """Every rating value, optionally only those for one professor."""
        filters = {"professor_id": professor_id} if professor_id is not None else None
        rows = await self.db.select(RATINGS_TABLE, columns="rating", filters=filters)
        return [int(r["rating"]) for r in rows if r.get("rating") is not None]

    async def count(self) -> int:
        return await self.db.count(RATINGS_TABLE)
