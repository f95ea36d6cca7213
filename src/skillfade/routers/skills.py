"""Skills API router - CRUD, projection, and score history endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from skillfade.routers.dependencies import get_skill_service
from skillfade.schemas.skill import (
    SkillCreate,
    SkillProjection,
    SkillRead,
    SkillSnapshotRead,
    SkillUpdate,
)
from skillfade.services.skill_service import SkillNotFoundError, SkillService

router = APIRouter()


@router.get("/skills", response_model=list[SkillRead])
def list_skills(service: SkillService = Depends(get_skill_service)) -> list[SkillRead]:
    """
    List all tracked skills.

    Returns:
        Skills ordered by most recently created, with decay applied.
    """
    return service.list_skills()


@router.post("/skills", response_model=SkillRead, status_code=201)
def create_skill(
    skill_in: SkillCreate,
    service: SkillService = Depends(get_skill_service),
) -> SkillRead:
    """
    Register a new skill.

    Args:
        skill_in: Name, category, initial proficiency and decay rate.

    Returns:
        The created skill.
    """
    skill = service.create_skill(skill_in)
    return service.to_view(skill)


@router.get("/skills/{skill_id}", response_model=SkillRead)
def get_skill(skill_id: int, service: SkillService = Depends(get_skill_service)) -> SkillRead:
    """
    Get a single skill with its current decayed score.

    Raises:
        HTTPException 404: If the skill is not found.
    """
    try:
        return service.get_skill_view(skill_id)
    except SkillNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Skill not found") from exc


@router.patch("/skills/{skill_id}", response_model=SkillRead)
def update_skill(
    skill_id: int,
    skill_update: SkillUpdate,
    service: SkillService = Depends(get_skill_service),
) -> SkillRead:
    """
    Update a skill's name, category or decay rate.

    Raises:
        HTTPException 404: If the skill is not found.
    """
    try:
        skill = service.update_skill(skill_id, skill_update)
    except SkillNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Skill not found") from exc
    return service.to_view(skill)


@router.delete("/skills/{skill_id}", status_code=204)
def delete_skill(skill_id: int, service: SkillService = Depends(get_skill_service)) -> Response:
    """
    Delete a skill and its practice history.

    Raises:
        HTTPException 404: If the skill is not found.
    """
    try:
        service.delete_skill(skill_id)
    except SkillNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Skill not found") from exc
    return Response(status_code=204)


@router.get("/skills/{skill_id}/projection", response_model=SkillProjection)
def project_skill(
    skill_id: int,
    days: int | None = Query(default=None, ge=0, le=365),
    service: SkillService = Depends(get_skill_service),
) -> SkillProjection:
    """
    Project how a skill will decay without further practice.

    Args:
        skill_id: The numeric ID of the skill.
        days: Projection horizon, defaults to the configured horizon.

    Raises:
        HTTPException 404: If the skill is not found.
    """
    try:
        return service.project_skill(skill_id, days)
    except SkillNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Skill not found") from exc


@router.get("/skills/{skill_id}/snapshots", response_model=list[SkillSnapshotRead])
def list_snapshots(
    skill_id: int,
    service: SkillService = Depends(get_skill_service),
) -> list[SkillSnapshotRead]:
    """
    Score history recorded at creation and after each activity.

    Raises:
        HTTPException 404: If the skill is not found.
    """
    try:
        snapshots = service.list_snapshots(skill_id)
    except SkillNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Skill not found") from exc
    return [SkillSnapshotRead.model_validate(s) for s in snapshots]
