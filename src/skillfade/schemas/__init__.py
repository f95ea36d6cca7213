"""Pydantic schemas package."""

from skillfade.schemas.activity import (
    ActivityCreate,
    ActivityLogResult,
    ActivityRead,
    ActivityType,
)
from skillfade.schemas.insights import (
    AnalyticsSummary,
    CategoryShare,
    RankedSkill,
    RevisionItem,
    RevisionPlan,
)
from skillfade.schemas.skill import (
    DecayPointRead,
    SkillBase,
    SkillCategory,
    SkillCreate,
    SkillProjection,
    SkillRead,
    SkillSnapshotRead,
    SkillUpdate,
)

__all__ = [
    "ActivityCreate",
    "ActivityLogResult",
    "ActivityRead",
    "ActivityType",
    "AnalyticsSummary",
    "CategoryShare",
    "DecayPointRead",
    "RankedSkill",
    "RevisionItem",
    "RevisionPlan",
    "SkillBase",
    "SkillCategory",
    "SkillCreate",
    "SkillProjection",
    "SkillRead",
    "SkillSnapshotRead",
    "SkillUpdate",
]
