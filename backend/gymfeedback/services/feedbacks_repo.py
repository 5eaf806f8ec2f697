from __future__ import annotations
from typing import Any, Dict

from gymfeedback.core.constants import FEEDBACKS_TABLE
from gymfeedback.services.supabase import SupabaseClient


class FeedbacksRepo:
    def __init__(self, db: SupabaseClient):
        self.db = db

    async def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        return await self.db.insert(FEEDBACKS_TABLE, row)

    async def count(self) -> int:
        return await self.db.count(FEEDBACKS_TABLE)
