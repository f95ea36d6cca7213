"""Shared FastAPI dependencies."""

from fastapi import Depends
from sqlalchemy.orm import Session

from skillfade.config import decay_config
from skillfade.database import get_db
from skillfade.services.skill_service import SkillService


def get_skill_service(db: Session = Depends(get_db)) -> SkillService:
    """
    Dependency function to get a SkillService bound to the request session.

    Returns:
        SkillService using the global decay configuration
    """
    return SkillService(db, decay_config)
