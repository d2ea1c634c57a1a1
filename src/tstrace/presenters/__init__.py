"""Presenters that turn Statistics into terminal text or JSON files."""

from .json_report import report_path, statistics_to_json, write_statistics
from .terminal import format_duration, render_statistics

__all__ = [
    "format_duration",
    "render_statistics",
    "report_path",
    "statistics_to_json",
    "write_statistics",
]
