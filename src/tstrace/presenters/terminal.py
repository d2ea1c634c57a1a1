"""Human-readable terminal report for build statistics."""

from __future__ import annotations

from pathlib import PurePosixPath

import click

from tstrace.primitives.projectors import Statistics

TITLE = "TypeScript Build Trace Analysis"


def format_duration(microseconds: float) -> str:
    if microseconds < 1000:
        return f"{microseconds:.2f}µs"
    if microseconds < 1_000_000:
        return f"{microseconds / 1000:.2f}ms"
    return f"{microseconds / 1_000_000:.2f}s"


def format_table(rows: dict[str, tuple[str, str | None]], title: str) -> str:
    """Render ``label: value`` rows under an underlined title, labels padded to align."""
    width = max((len(label) for label in rows), default=0)
    lines = ["", title, "=" * len(title)]
    for label, (value, color) in rows.items():
        shown = click.style(value, fg=color) if color else value
        lines.append(f"{label.ljust(width)}: {shown}")
    return "\n".join(lines)


def _heading(title: str) -> list[str]:
    return ["", click.style(title, bold=True), "=" * len(title)]


def render_statistics(
    stats: Statistics,
    *,
    top_operations: int = 5,
    top_files: int = 5,
    top_file_operations: int = 3,
) -> str:
    lines = ["", click.style(TITLE, fg="cyan", bold=True), ""]

    lines.append(
        format_table(
            {
                "Total build time": (format_duration(stats.total_time), "green"),
                "Total files processed": (str(stats.total_files), "blue"),
                "Total unique operations": (str(len(stats.operation_times)), "magenta"),
            },
            "Overall Statistics",
        )
    )

    lines += _heading(f"Top {top_operations} Slowest Operations")
    slowest_ops = sorted(
        stats.operation_times.items(), key=lambda item: item[1].total_time, reverse=True
    )[:top_operations]
    for name, timing in slowest_ops:
        lines += [
            click.style(name, fg="yellow"),
            f"  Total time: {format_duration(timing.total_time)}",
            f"  Count: {timing.count}",
            f"  Average time: {format_duration(timing.average_time)}",
            "",
        ]

    lines += _heading(f"Top {top_files} Slowest Files")
    for rank, file in enumerate(stats.slowest_files[:top_files], start=1):
        filename = PurePosixPath(file.path).name or file.path
        lines.append(
            f"{rank}. {click.style(filename, fg='red')} ({format_duration(file.total_time)})"
        )
        lines.append(f"   {click.style(file.path, fg='bright_black')}")
        file_ops = sorted(file.operations.items(), key=lambda item: item[1], reverse=True)
        file_ops = file_ops[:top_file_operations]
        if file_ops:
            lines.append("   Top operations:")
            lines += [f"     - {op}: {format_duration(time)}" for op, time in file_ops]
        lines.append("")

    if stats.files_by_type:
        lines += _heading("File Types")
        for ext, count in sorted(stats.files_by_type.items(), key=lambda item: item[1], reverse=True):
            lines.append(f"{click.style('.' + ext, fg='blue')}: {count} files")

    resolution = stats.module_resolution
    if resolution.total_count > 0:
        lines.append(
            format_table(
                {
                    "Total modules resolved": (str(resolution.total_count), "cyan"),
                    "Total resolution time": (format_duration(resolution.total_time), "yellow"),
                    "Average resolution time": (format_duration(resolution.average_time), "green"),
                },
                "Module Resolution",
            )
        )

    lines += [
        "",
        click.style(
            "Note: All times are in microseconds (µs) unless otherwise specified", fg="bright_black"
        ),
        "",
    ]
    return "\n".join(lines)


__all__ = ["format_duration", "format_table", "render_statistics"]
