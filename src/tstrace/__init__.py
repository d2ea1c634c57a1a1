"""tstrace: summary statistics for TypeScript build traces."""

from .errors import TraceError, TraceFormatError, TraceReadError
from .primitives.events import MODULE_RESOLUTION_OPERATION, Phase, TraceEvent
from .primitives.projectors import (
    FileStats,
    ModuleResolutionStats,
    Statistics,
    TimingStats,
    file_extension,
    project_statistics,
)
from .reader import TraceFile, load_trace, parse_trace

__version__ = "0.1.0"

__all__ = [
    "MODULE_RESOLUTION_OPERATION",
    "FileStats",
    "ModuleResolutionStats",
    "Phase",
    "Statistics",
    "TimingStats",
    "TraceError",
    "TraceEvent",
    "TraceFile",
    "TraceFormatError",
    "TraceReadError",
    "file_extension",
    "load_trace",
    "parse_trace",
    "project_statistics",
]
