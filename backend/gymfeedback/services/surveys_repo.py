from __future__ import annotations
from typing import Any, Dict

from gymfeedback.core.constants import SURVEYS_TABLE
from gymfeedback.services.supabase import SupabaseClient


class SurveysRepo:
    def __init__(self, db: SupabaseClient):
        self.db = db

    async def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        return await self.db.insert(SURVEYS_TABLE, row)

    async def count(self) -> int:
        return await self.db.count(SURVEYS_TABLE)
