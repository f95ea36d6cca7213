"""Database models package."""

from skillfade.models.activity import Activity
from skillfade.models.skill import Skill
from skillfade.models.skill_snapshot import SkillSnapshot

__all__ = ["Activity", "Skill", "SkillSnapshot"]
