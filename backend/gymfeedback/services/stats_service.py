from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from gymfeedback.schemas.stats import Stats
from gymfeedback.services.feedbacks_repo import FeedbacksRepo
from gymfeedback.services.ratings_repo import RatingsRepo
from gymfeedback.services.supabase import SupabaseClient
from gymfeedback.services.surveys_repo import SurveysRepo

SATISFIED_FROM = 4


def _half_up(value: Decimal, places: str) -> Decimal:
    return value.quantize(Decimal(places), rounding=ROUND_HALF_UP)


def mean_rating(values: Sequence[int]) -> float:
    """Arithmetic mean rounded half-up to one decimal; 0 for no ratings."""
    if not values:
        return 0.0
    mean = Decimal(sum(values)) / Decimal(len(values))
    return float(_half_up(mean, "0.1"))


def satisfaction_rate(values: Sequence[int]) -> int:
    """Percentage (0-100) of ratings scoring 4 or 5; 0 for no ratings."""
    if not values:
        return 0
    good = sum(1 for v in values if v >= SATISFIED_FROM)
    return int(_half_up(Decimal(100 * good) / Decimal(len(values)), "1"))


class StatsService:
    def __init__(self, db: SupabaseClient):
        self.ratings = RatingsRepo(db)
        self.surveys = SurveysRepo(db)
        self.feedbacks = FeedbacksRepo(db)

    async def compute_stats(self) -> Stats:
        """Read-only. PersistenceError propagates; the caller picks a fallback."""
        values = await self.ratings.values()

        # three separate exact counts, summed
        total = await self.ratings.count() + await self.surveys.count() + await self.feedbacks.count()

        return Stats(
            average_rating=mean_rating(values),
            total_feedbacks=total,
            satisfaction_rate=satisfaction_rate(values),
        )
