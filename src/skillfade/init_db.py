"""Database initialization script."""

import logging
from pathlib import Path

from skillfade.config import settings
from skillfade.database import Base, engine
from skillfade.models import Activity, Skill, SkillSnapshot  # noqa: F401

logger = logging.getLogger(__name__)


def init_database():
    """
    Initialize the database by creating all tables.

    Creates the data directory first. Safe to run multiple times as it
    won't recreate existing tables.
    """
    Path(settings.data_root).mkdir(parents=True, exist_ok=True)
    print("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    print("Database tables created successfully!")
    print(f"Tables created: {', '.join(Base.metadata.tables.keys())}")
    logger.debug("Database ready at %s", settings.database_url)


if __name__ == "__main__":
    init_database()
