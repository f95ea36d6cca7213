"""Insights API router - revision plan and analytics."""

from fastapi import APIRouter, Depends

from skillfade.routers.dependencies import get_skill_service
from skillfade.schemas.insights import AnalyticsSummary, RevisionPlan
from skillfade.services.skill_service import SkillService

router = APIRouter()


@router.get("/revision-plan", response_model=RevisionPlan)
def get_revision_plan(service: SkillService = Depends(get_skill_service)) -> RevisionPlan:
    """Skills grouped into practice today, practice this week, and healthy."""
    return service.revision_plan()


@router.get("/analytics", response_model=AnalyticsSummary)
def get_analytics(service: SkillService = Depends(get_skill_service)) -> AnalyticsSummary:
    return service.analytics()
