from fastapi import APIRouter, Depends, HTTPException

from gymfeedback.api.v1.dependencies import professors_repo
from gymfeedback.schemas.professor import Professor
from gymfeedback.services.professors_repo import ProfessorsRepo

router = APIRouter(prefix="/api/v1/professors", tags=["professors"])

@router.get("", response_model=list[Professor])
async def list_professors(repo: ProfessorsRepo = Depends(professors_repo)):
    return await repo.list_active()

@router.get("/{professor_id}", response_model=Professor)
async def get_professor(professor_id: str, repo: ProfessorsRepo = Depends(professors_repo)):
    row = await repo.get(professor_id)
    if not row:
        raise HTTPException(404, "not found")
    return row
