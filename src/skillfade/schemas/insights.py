"""Revision plan and analytics Pydantic schemas."""

from pydantic import BaseModel

from skillfade.services.skill_decay import FreshnessLevel


class RevisionItem(BaseModel):
    """A skill entry in the revision plan."""

    skill_id: int
    name: str
    score: float
    freshness: FreshnessLevel
    target_score: float | None = None
    days_until_target: int | None = None
    message: str = ""


class RevisionPlan(BaseModel):
    """Skills grouped by how urgently they need practice."""

    practice_today: list[RevisionItem]
    practice_this_week: list[RevisionItem]
    healthy: list[RevisionItem]
    more_healthy: int
    total_skills: int


class CategoryShare(BaseModel):
    """Number of skills in a category and their share of the total."""

    category: str
    count: int
    share: float


class RankedSkill(BaseModel):
    """Skill in the score ranking."""

    skill_id: int
    name: str
    category: str
    score: float


class AnalyticsSummary(BaseModel):
    """Portfolio statistics across skills and activities."""

    total_skills: int
    average_score: float
    strong_skills: int
    weak_skills: int
    recent_activities: int
    recent_window_days: int
    total_activities: int
    total_practice_minutes: int
    average_practice_minutes: float
    total_practice_display: str
    top_categories: list[CategoryShare]
    ranking: list[RankedSkill]
