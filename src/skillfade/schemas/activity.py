"""Activity Pydantic schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ActivityType(str, Enum):
    """Activity type enumeration."""

    CODING = "coding"
    READING = "reading"
    PROJECT = "project"
    PRACTICE = "practice"
    TUTORIAL = "tutorial"


class ActivityBase(BaseModel):
    """Base activity schema with common fields."""

    skill_id: int
    activity_type: ActivityType = ActivityType.PRACTICE
    duration_minutes: int = Field(default=30, gt=0, le=24 * 60)
    difficulty: int = Field(default=3, ge=1, le=5)
    notes: str = ""


class ActivityCreate(ActivityBase):
    """Schema for logging a practice session."""

    pass


class ActivityRead(ActivityBase):
    """Complete activity schema with database fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    practiced_at: datetime
    created_at: datetime


class ActivityLogResult(BaseModel):
    """Outcome of logging an activity against a skill."""

    activity: ActivityRead
    previous_score: float
    boost: float
    new_score: float
