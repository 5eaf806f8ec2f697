from fastapi import APIRouter, Depends

from gymfeedback.api.v1.dependencies import submission_gateway
from gymfeedback.schemas.feedback import Feedback, FeedbackIn
from gymfeedback.schemas.rating import Rating, RatingIn
from gymfeedback.schemas.survey import SurveyIn, SurveyResponse
from gymfeedback.services.submission_service import SubmissionGateway

router = APIRouter(prefix="/api/v1", tags=["submissions"])

@router.post("/ratings", response_model=Rating, status_code=201)
async def create_rating(body: RatingIn, gw: SubmissionGateway = Depends(submission_gateway)):
    return await gw.submit_rating(body)

@router.post("/surveys", response_model=SurveyResponse, status_code=201)
async def create_survey(body: SurveyIn, gw: SubmissionGateway = Depends(submission_gateway)):
    return await gw.submit_survey(body)

@router.post("/feedbacks", response_model=Feedback, status_code=201)
async def create_feedback(body: FeedbackIn, gw: SubmissionGateway = Depends(submission_gateway)):
    return await gw.submit_feedback(body)
