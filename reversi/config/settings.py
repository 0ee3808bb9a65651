# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Engine configuration settings using Pydantic Settings.

Settings are loaded from environment variables (and an optional ``.env``
file) with sensible defaults. The Settings class aggregates all
subsettings; a cached instance is provided via get_settings().

The evaluation weights are fixed and deliberately not configurable here;
only the choice of opponent and its search budget are.

Example:
    >>> from reversi.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.search.default_difficulty)
    GameDifficulty.INSANE
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from reversi.models import GameDifficulty


class SearchSettings(BaseSettings):
    """AI opponent configuration.

    Attributes:
        default_difficulty: Difficulty used when a caller does not pick one.
        hard_depth: Fixed search depth of the HARD opponent.
        random_seed: Seed for the EASY opponent's random choices; unset
            means a fresh, unpredictable sequence.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_",
        extra="ignore",
    )

    default_difficulty: GameDifficulty = GameDifficulty.INSANE
    hard_depth: int = Field(default=3, ge=1, le=12)
    random_seed: int | None = None


class Settings(BaseSettings):
    """Main engine settings.

    Attributes:
        environment: Deployment environment.
        debug: Enable debug mode (console log rendering).
        log_level: Logging level.
        search: AI opponent settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    search: SearchSettings = Field(default_factory=SearchSettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Call clear_settings_cache() to reload settings from the environment.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing or after changing environment variables.
    """
    get_settings.cache_clear()
