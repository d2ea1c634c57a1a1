from __future__ import annotations

from pathlib import Path

import click
from loguru import logger

from tstrace.config import get_settings
from tstrace.errors import TraceError
from tstrace.log import setup_logging
from tstrace.presenters import render_statistics, write_statistics
from tstrace.primitives.projectors import project_statistics
from tstrace.reader import load_trace


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-i",
    "--input",
    "input_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the TypeScript trace file.",
)
@click.option(
    "-o",
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to write the statistics JSON to (default: print to the terminal).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.option("--color/--no-color", default=None, help="Force or disable coloured output.")
def main(input_path: Path, output_dir: Path | None, verbose: bool, color: bool | None) -> None:
    """TypeScript Build Trace Analyzer."""
    settings = get_settings()
    if color is None and not settings.color:
        color = False
    setup_logging("DEBUG" if verbose else settings.log_level, colorize=color is not False)

    input_path = input_path.resolve()
    click.echo(f"Reading trace file: {input_path}", err=True)
    try:
        trace = load_trace(input_path)
    except TraceError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo("Analyzing trace data...", err=True)
    stats = project_statistics(
        trace.events,
        module_resolution_operation=settings.module_resolution_operation,
        slowest_files_limit=settings.slowest_files_limit,
    )
    logger.info(
        "Trace {}: {} operations across {} files",
        trace.trace_id,
        len(stats.operation_times),
        stats.total_files,
    )

    if output_dir is not None:
        path = write_statistics(stats, output_dir.resolve(), input_path)
        click.echo(f"Statistics written to: {path}")
        return

    click.echo(
        render_statistics(
            stats,
            top_operations=settings.top_operations,
            top_files=settings.top_files,
            top_file_operations=settings.top_file_operations,
        ),
        color=color,
    )
