from fastapi import APIRouter

from gymfeedback.core.constants import ACADEMY_INFO, FEEDBACK_CATEGORIES, RATING_LABELS, SURVEY_QUESTIONS

router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])

@router.get("/survey-questions")
async def survey_questions():
    return SURVEY_QUESTIONS

@router.get("/feedback-categories")
async def feedback_categories():
    return FEEDBACK_CATEGORIES

@router.get("/academy")
async def academy():
    return {**ACADEMY_INFO, "rating_labels": RATING_LABELS}
