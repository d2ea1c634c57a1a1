"""Settings for the analyzer, read from ``TSTRACE_*`` variables or a ``.env`` file.

Usage:
    from tstrace.config import get_settings

    settings = get_settings()
    settings.slowest_files_limit  # TSTRACE_SLOWEST_FILES_LIMIT, default 10
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tstrace.primitives.events import MODULE_RESOLUTION_OPERATION
from tstrace.primitives.projectors import SLOWEST_FILES_LIMIT

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TSTRACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = "WARNING"
    module_resolution_operation: str = MODULE_RESOLUTION_OPERATION
    slowest_files_limit: int = Field(default=SLOWEST_FILES_LIMIT, ge=1)
    top_operations: int = Field(default=5, ge=0)
    top_files: int = Field(default=5, ge=0)
    top_file_operations: int = Field(default=3, ge=0)
    color: bool = True


def get_settings() -> Settings:
    return Settings()


__all__ = ["LogLevel", "Settings", "get_settings"]
