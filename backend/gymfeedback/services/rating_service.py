from __future__ import annotations
from typing import Optional

import structlog

from gymfeedback.core.errors import PersistenceError
from gymfeedback.schemas.common import parse
from gymfeedback.schemas.rating import Rating, RatingIn
from gymfeedback.services.professors_repo import ProfessorsRepo
from gymfeedback.services.ratings_repo import RatingsRepo
from gymfeedback.services.stats_service import mean_rating
from gymfeedback.services.supabase import SupabaseClient

logger = structlog.get_logger("rating-updater")


class RatingService:
    """Records a rating and recomputes the professor's aggregate from scratch.

    Known race: the insert and the re-read/update below are separate requests
    with no transaction around them. Two ratings for the same professor landing
    at the same time can leave ``reviews_count`` one short until the next rating
    for that professor is recorded, which recomputes from the full set again.
    """

    def __init__(self, db: SupabaseClient):
        self.ratings = RatingsRepo(db)
        self.professors = ProfessorsRepo(db)

    async def record_rating(
        self,
        professor_id: str,
        rating: int,
        comment: Optional[str] = None,
        user_name: Optional[str] = None,
        user_phone: Optional[str] = None,
    ) -> Rating:
        body = parse(RatingIn, {
            "professor_id": professor_id,
            "rating": rating,
            "comment": comment,
            "user_name": user_name,
            "user_phone": user_phone,
        })
        return await self.record(body)

    async def record(self, body: RatingIn) -> Rating:
        row = await self.ratings.insert(body.to_row())
        await self.refresh_professor(body.professor_id)
        return Rating.model_validate(row)

    async def refresh_professor(self, professor_id: str) -> None:
        """Recompute the professor aggregate; failures are logged, not raised.

        The rating is already stored by the time this runs, so a failed
        recompute leaves a stale aggregate that the next rating corrects.
        """
        try:
            values = await self.ratings.values(professor_id)
            if not values:
                # insert not visible yet; the next rating will recompute
                logger.warning("No ratings found after insert", professor_id=professor_id)
                return

            avg, count = mean_rating(values), len(values)
            await self.professors.set_rating(professor_id, rating=avg, reviews_count=count)
        except PersistenceError as exc:
            logger.error(
                "Professor rating recompute failed",
                professor_id=professor_id,
                table=exc.table,
                operation=exc.operation,
                error=str(exc),
            )
            return
        logger.debug("Professor rating recomputed", professor_id=professor_id, rating=avg, reviews_count=count)
