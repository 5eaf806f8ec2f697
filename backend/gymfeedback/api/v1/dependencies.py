from fastapi import Depends

from gymfeedback.services.professors_repo import ProfessorsRepo
from gymfeedback.services.stats_service import StatsService
from gymfeedback.services.submission_service import SubmissionGateway
from gymfeedback.services.supabase import SupabaseClient


def supabase_client() -> SupabaseClient:
    return SupabaseClient()

def professors_repo(db: SupabaseClient = Depends(supabase_client)) -> ProfessorsRepo:
    return ProfessorsRepo(db)

def stats_service(db: SupabaseClient = Depends(supabase_client)) -> StatsService:
    return StatsService(db)

def submission_gateway(db: SupabaseClient = Depends(supabase_client)) -> SubmissionGateway:
    return SubmissionGateway(db)
