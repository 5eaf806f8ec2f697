from __future__ import annotations
from typing import Any, Dict, List, Optional

from gymfeedback.core.constants import PROFESSORS_TABLE
from gymfeedback.services.supabase import SupabaseClient


class ProfessorsRepo:
    def __init__(self, db: SupabaseClient):
        self.db = db

    async def list_active(self) -> List[Dict[str, Any]]:
        return await self.db.select(PROFESSORS_TABLE, filters={"active": True}, order="name.asc")

    async def get(self, professor_id: str) -> Optional[Dict[str, Any]]:
        rows = await self.db.select(PROFESSORS_TABLE, filters={"id": professor_id}, limit=1)
        return rows[0] if rows else None

    async def set_rating(self, professor_id: str, *, rating: float, reviews_count: int) -> List[Dict[str, Any]]:
        return await self.db.update(
            PROFESSORS_TABLE,
            {"rating": rating, "reviews_count": reviews_count},
            filters={"id": professor_id},
        )
