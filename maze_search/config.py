"""Search configuration using Pydantic settings."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

AlgorithmName = Literal["bfs", "dfs", "dijkstra", "astar"]


class Settings(BaseSettings):
    """Settings loaded from environment variables prefixed with MAZE_SEARCH_."""

    model_config = SettingsConfigDict(
        env_prefix="MAZE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Algorithm used by solve() when the caller names none
    default_algorithm: AlgorithmName = "bfs"

    # Logging
    log_level: str = "INFO"

    @field_validator("default_algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v: str) -> str:
        """Accept algorithm names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level against the logging module's level names."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
