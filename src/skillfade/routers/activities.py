"""Activities API router - log and list practice sessions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from skillfade.config import decay_config
from skillfade.routers.dependencies import get_skill_service
from skillfade.schemas.activity import ActivityCreate, ActivityLogResult, ActivityRead
from skillfade.services.skill_service import SkillNotFoundError, SkillService

router = APIRouter()


@router.get("/activities", response_model=list[ActivityRead])
def list_activities(
    limit: int = Query(default=decay_config.activity_feed_limit, ge=1, le=500),
    skill_id: int | None = None,
    service: SkillService = Depends(get_skill_service),
) -> list[ActivityRead]:
    """
    List logged activities.

    Args:
        limit: Maximum number of activities to return.
        skill_id: Only return activities for this skill.

    Returns:
        Activities ordered by most recently practiced.
    """
    return [ActivityRead.model_validate(a) for a in service.list_activities(limit, skill_id)]


@router.post("/activities", response_model=ActivityLogResult, status_code=201)
def log_activity(
    activity_in: ActivityCreate,
    service: SkillService = Depends(get_skill_service),
) -> ActivityLogResult:
    """
    Log a practice session and boost the skill's score.

    Returns:
        The stored activity with the skill's score before and after.

    Raises:
        HTTPException 404: If the skill is not found.
    """
    try:
        return service.log_activity(activity_in)
    except SkillNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Skill not found") from exc
