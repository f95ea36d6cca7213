"""Configuration management for the application."""

import json
import logging
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class DecayConfig(BaseSettings):
    """Revision and analytics thresholds layered over the decay engine."""

    default_decay_rate: float = Field(default=0.05, gt=0)
    critical_threshold: float = 50.0
    review_threshold: float = 70.0
    strong_threshold: float = 80.0
    healthy_preview_limit: int = 3
    projection_days: int = 30
    recent_activity_days: int = 7
    activity_feed_limit: int = 50
    top_categories_limit: int = 5

    @classmethod
    def from_file(cls, filepath: str = "config/decay.json") -> "DecayConfig":
        """
        Load decay configuration from JSON file.

        Args:
            filepath: Path to the configuration file

        Returns:
            DecayConfig instance, with defaults if the file does not exist
        """
        path = Path(filepath)
        if not path.exists():
            logger.debug("Decay config %s not found, using defaults", filepath)
            return cls()
        with open(path, "r") as f:
            data = json.load(f)
        return cls(**data)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Data root, the SQLite DB lives here (outside the repo)
    data_root: str = Field(default="~/Documents/skillfade")

    # Database, auto-derived from data_root if not explicitly set
    database_url: str | None = Field(default=None)

    # Backend Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000)

    # Frontend
    frontend_url: str = Field(default="http://localhost:3000")

    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def derive_paths(self) -> "Settings":
        """Expand data_root and derive database_url if not explicitly set."""
        self.data_root = str(Path(self.data_root).expanduser().resolve())
        if self.database_url is None:
            self.database_url = f"sqlite:///{self.data_root}/skillfade.db"
        return self


# Global settings instance
settings = Settings()

decay_config = DecayConfig.from_file()
