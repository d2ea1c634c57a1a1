from __future__ import annotations

from pathlib import Path

from tstrace.primitives.projectors import Statistics


def statistics_to_json(stats: Statistics) -> str:
    return stats.model_dump_json(by_alias=True, indent=2)


def report_path(output_dir: str | Path, input_path: str | Path) -> Path:
    """Where the report for ``input_path`` goes: ``<output_dir>/<stem>_stats.json``."""
    return Path(output_dir) / f"{Path(input_path).stem}_stats.json"


def write_statistics(stats: Statistics, output_dir: str | Path, input_path: str | Path) -> Path:
    path = report_path(output_dir, input_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(statistics_to_json(stats), encoding="utf-8")
    return path


__all__ = ["report_path", "statistics_to_json", "write_statistics"]
