"""Primitives for build traces: events and the statistics projection."""

from .events import MODULE_RESOLUTION_OPERATION, Phase, TraceEvent
from .projectors import (
    FileStats,
    ModuleResolutionStats,
    Statistics,
    TimingStats,
    file_extension,
    project_statistics,
)

__all__ = [
    "MODULE_RESOLUTION_OPERATION",
    "FileStats",
    "ModuleResolutionStats",
    "Phase",
    "Statistics",
    "TimingStats",
    "TraceEvent",
    "file_extension",
    "project_statistics",
]
