from fastapi import APIRouter, Depends

from gymfeedback.api.v1.dependencies import stats_service
from gymfeedback.schemas.stats import Stats
from gymfeedback.services.stats_service import StatsService

router = APIRouter(prefix="/api/v1/stats", tags=["stats"])

@router.get("", response_model=Stats)
async def get_stats(svc: StatsService = Depends(stats_service)):
    return await svc.compute_stats()
