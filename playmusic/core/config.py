"""Configuration module for the PlayMusic API."""

from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application
    APP_NAME: str = "PlayMusic API"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3333
    RELOAD: bool = False

    # Storage
    DATA_DIR: Path = Path(".")
    TRACKS_FILE: Path = Path("data.json")
    VIDEOS_FILE: Path = Path("videos.json")
    SEED_FILE: Path = PACKAGE_DIR / "data" / "library.json"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    @property
    def tracks_path(self) -> Path:
        """Resolved path of the persisted tracks file."""
        return self.DATA_DIR / self.TRACKS_FILE

    @property
    def videos_path(self) -> Path:
        """Resolved path of the persisted videos file."""
        return self.DATA_DIR / self.VIDEOS_FILE


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
