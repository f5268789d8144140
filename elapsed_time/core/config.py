"""Library configuration settings"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="ELAPSED_TIME_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Elapsed Time")
    version: str = Field(default="0.1.0")

    # Logging
    log_level: str = Field(default="INFO")
    log_measurements: bool = Field(default=False)  # INFO line per measurement

    # Timing
    clock: Literal["perf_counter", "monotonic"] = Field(default="perf_counter")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
