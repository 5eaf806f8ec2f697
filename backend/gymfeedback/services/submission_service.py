from __future__ import annotations
from typing import Any, Mapping, Union

import structlog

from gymfeedback.schemas.common import parse
from gymfeedback.schemas.feedback import Feedback, FeedbackIn
from gymfeedback.schemas.rating import Rating, RatingIn
from gymfeedback.schemas.survey import SurveyIn, SurveyResponse
from gymfeedback.services.feedbacks_repo import FeedbacksRepo
from gymfeedback.services.rating_service import RatingService
from gymfeedback.services.supabase import SupabaseClient
from gymfeedback.services.surveys_repo import SurveysRepo

logger = structlog.get_logger("submissions")


class SubmissionGateway:
    """Validates each submission kind and writes it as a single insert.

    Invalid payloads raise ValidationError before any request is made;
    storage failures raise PersistenceError. No retries.
    """

    def __init__(self, db: SupabaseClient):
        self.ratings = RatingService(db)
        self.surveys = SurveysRepo(db)
        self.feedbacks = FeedbacksRepo(db)

    async def submit_rating(self, payload: Union[RatingIn, Mapping[str, Any]]) -> Rating:
        body = parse(RatingIn, payload)
        rating = await self.ratings.record(body)
        logger.info("Rating recorded", professor_id=body.professor_id, rating=body.rating)
        return rating

    async def submit_survey(self, payload: Union[SurveyIn, Mapping[str, Any]]) -> SurveyResponse:
        body = parse(SurveyIn, payload)
        row = await self.surveys.insert(body.to_row())
        logger.info("Survey recorded", nps_score=body.nps_score, answers=len(body.answers))
        return SurveyResponse.model_validate(row)

    async def submit_feedback(self, payload: Union[FeedbackIn, Mapping[str, Any]]) -> Feedback:
        body = parse(FeedbackIn, payload)
        row = await self.feedbacks.insert(body.to_row())
        logger.info("Feedback recorded", type=body.type, category=body.category, anonymous=body.is_anonymous)
        return Feedback.model_validate(row)
