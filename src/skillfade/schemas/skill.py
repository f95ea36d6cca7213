"""Skill Pydantic schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from skillfade.services.skill_decay import FreshnessLevel


class SkillCategory(str, Enum):
    """Skill category enumeration."""

    PROGRAMMING_LANGUAGE = "Programming Language"
    FRAMEWORK = "Framework"
    DATABASE = "Database"
    DEVOPS = "DevOps"
    DATA_STRUCTURES = "Data Structures"
    ALGORITHMS = "Algorithms"
    SYSTEM_DESIGN = "System Design"
    TOOLS = "Tools"
    OTHER = "Other"


class SkillBase(BaseModel):
    """Base skill schema with common fields."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    category: SkillCategory = SkillCategory.PROGRAMMING_LANGUAGE


class SkillCreate(SkillBase):
    """Schema for creating a new skill."""

    initial_proficiency: int = Field(default=70, ge=0, le=100)
    # None means the configured default_decay_rate
    decay_rate: float | None = Field(default=None, ge=0.01, le=0.15)


class SkillUpdate(BaseModel):
    """Schema for a partial skill update."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1)
    category: SkillCategory | None = None
    decay_rate: float | None = Field(default=None, ge=0.01, le=0.15)


class SkillRead(SkillBase):
    """Skill as displayed, with decay applied since the last practice."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    initial_proficiency: int
    decay_rate: float
    current_score: float
    stored_score: float
    freshness: FreshnessLevel
    days_since_practice: int
    last_practiced_at: datetime
    created_at: datetime
    updated_at: datetime


class SkillSnapshotRead(BaseModel):
    """Recorded score history entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    skill_id: int
    score: float
    snapshot_date: datetime


class DecayPointRead(BaseModel):
    """One day of a projected decay curve."""

    day: int
    score: float


class SkillProjection(BaseModel):
    """Future decay of a skill if it is not practiced."""

    skill_id: int
    current_score: float
    decay_rate: float
    days: int
    points: list[DecayPointRead]
    days_until_review: int | None
    days_until_critical: int | None
