"""Backend profile configuration loaded from environment variables."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class AppEnv(str, Enum):
    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


def _split_profiles(raw: str) -> list[str]:
    profiles: list[str] = []
    for item in raw.split(","):
        name = item.strip()
        if name and name not in profiles:
            profiles.append(name)
    return profiles


class Settings(BaseSettings):
    """Application settings loaded from environment variables with APP_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    env: AppEnv = AppEnv.DEV
    debug: bool = False

    # Logging
    structured_logging: bool = False

    # Profiles (comma separated, e.g. "mysql,metrics")
    profiles_active: str = ""
    profiles_default: str = "default"

    @property
    def explicit_profiles(self) -> list[str]:
        """Profiles explicitly activated for this process, in declared order."""
        return _split_profiles(self.profiles_active)

    @property
    def default_profiles(self) -> list[str]:
        """Profiles considered active when no profile is explicitly set."""
        return _split_profiles(self.profiles_default)


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment, with optional overrides for testing."""
    settings = Settings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info("Loaded settings for environment: %s", settings.env.value)

    return settings
