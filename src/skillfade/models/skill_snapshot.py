"""SkillSnapshot database model."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer
from sqlalchemy.sql import func

from skillfade.database import Base
from skillfade.utils.timeutils import utcnow


class SkillSnapshot(Base):
    """
    SkillSnapshot model recording a skill's score at a point in time.

    Attributes:
        id: Primary key
        skill_id: Foreign key to skills table
        score: Score written at snapshot time
        snapshot_date: When the score was observed
        created_at: Timestamp when record was created
    """

    __tablename__ = "skill_snapshots"

    id = Column(Integer, primary_key=True, autoincrement=True)
    skill_id = Column(Integer, ForeignKey("skills.id"), nullable=False, index=True)
    score = Column(Float, nullable=False)
    snapshot_date = Column(DateTime, default=utcnow, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of SkillSnapshot."""
        return f"<SkillSnapshot(id={self.id}, skill_id={self.skill_id}, score={self.score})>"
