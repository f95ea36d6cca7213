"""Skill database model."""

from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.sql import func

from skillfade.database import Base
from skillfade.utils.timeutils import utcnow


class Skill(Base):
    """
    Skill model representing a tracked proficiency.

    Attributes:
        id: Primary key
        name: Skill name
        category: Skill category label
        initial_proficiency: Self-assessed proficiency at creation (0-100)
        current_score: Score at the last checkpoint, before decay (0-100)
        decay_rate: Daily exponential decay rate (> 0)
        last_practiced_at: Checkpoint timestamp that decay is measured from
        created_at: Timestamp when record was created
        updated_at: Timestamp of the last write
    """

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, index=True)
    category = Column(String, nullable=False)
    initial_proficiency = Column(Integer, nullable=False)
    current_score = Column(Float, nullable=False)
    decay_rate = Column(Float, nullable=False)
    last_practiced_at = Column(DateTime, default=utcnow, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime, server_default=func.now(), onupdate=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of Skill."""
        return (
            f"<Skill(id={self.id}, name='{self.name}', "
            f"score={self.current_score}, decay_rate={self.decay_rate})>"
        )
