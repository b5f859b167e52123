"""Configuration management for d20sheet using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="D20SHEET_",
        extra="ignore",
    )

    # Rule data
    classes_file: Path = Field(
        default=PACKAGE_DATA_DIR / "classes.yaml",
        description="YAML catalog of character class definitions",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level", alias="LOG_LEVEL")
    log_format: str = Field(
        default="console", description="Log format (console or json)", alias="LOG_FORMAT"
    )

    @property
    def data_dir(self) -> Path:
        """Get the directory holding the class catalog."""
        return self.classes_file.parent


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
