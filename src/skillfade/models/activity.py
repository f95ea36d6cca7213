"""Activity database model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from skillfade.database import Base
from skillfade.utils.timeutils import utcnow


class Activity(Base):
    """
    Activity model representing one logged practice session.

    Attributes:
        id: Primary key
        skill_id: Foreign key to skills table
        activity_type: coding, reading, project, practice or tutorial
        duration_minutes: Session length in minutes
        difficulty: Difficulty rating (1-5)
        notes: Free-text notes
        practiced_at: When the session happened
        created_at: Timestamp when record was created
    """

    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    skill_id = Column(Integer, ForeignKey("skills.id"), nullable=False, index=True)
    activity_type = Column(String, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    difficulty = Column(Integer, nullable=False)
    notes = Column(Text, default="", nullable=False)
    practiced_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Activity."""
        return (
            f"<Activity(id={self.id}, skill_id={self.skill_id}, "
            f"type='{self.activity_type}', minutes={self.duration_minutes})>"
        )
