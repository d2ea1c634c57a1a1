"""Loading trace files written by ``tsc --generateTrace``."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from ulid import ULID

from tstrace.errors import TraceFormatError, TraceReadError
from tstrace.primitives.events import KNOWN_PHASES, TraceEvent


class TraceFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    trace_id: str = Field(default_factory=lambda: str(ULID()))
    path: Path
    events: list[TraceEvent] = Field(default_factory=list)
    skipped: int = 0


def parse_trace(raw: Any) -> tuple[list[TraceEvent], int]:
    """Turn decoded trace JSON into TraceEvents.

    Accepts a bare event array or an object with a ``traceEvents`` array.
    Events with a phase the analyzer does not use are skipped.

    Returns:
        The parsed events and the number of skipped entries.

    Raises:
        TraceFormatError: If the document or one of its entries has the wrong shape.
    """
    if isinstance(raw, dict):
        raw = raw.get("traceEvents")
    if not isinstance(raw, list):
        msg = "Trace must be a JSON array of events or an object with a 'traceEvents' array"
        raise TraceFormatError(msg)

    events: list[TraceEvent] = []
    skipped = 0
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            msg = f"Trace event #{index} is not an object"
            raise TraceFormatError(msg)
        phase = item.get("ph")
        if not isinstance(phase, str) or phase not in KNOWN_PHASES:
            skipped += 1
            continue
        try:
            events.append(TraceEvent.model_validate(item))
        except ValidationError as exc:
            msg = f"Trace event #{index} is invalid: {exc.errors()[0]['msg']}"
            raise TraceFormatError(msg) from exc

    return events, skipped


def load_trace(path: str | Path) -> TraceFile:
    """Read and decode a trace file.

    Raises:
        TraceReadError: If the file cannot be read.
        TraceFormatError: If the content is not valid trace JSON.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        msg = f"Trace file not found: {path}"
        raise TraceReadError(msg) from exc
    except OSError as exc:
        msg = f"Cannot read trace file {path}: {exc.strerror or exc}"
        raise TraceReadError(msg) from exc
    except UnicodeDecodeError as exc:
        msg = f"Trace file {path} is not UTF-8 text"
        raise TraceFormatError(msg) from exc

    try:
        raw = json.loads(content)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {path}: {exc}"
        raise TraceFormatError(msg) from exc

    events, skipped = parse_trace(raw)
    trace = TraceFile(path=path, events=events, skipped=skipped)
    logger.debug(
        "Loaded trace {} from {}: {} events, {} skipped",
        trace.trace_id,
        path,
        len(events),
        skipped,
    )
    return trace


__all__ = ["TraceFile", "load_trace", "parse_trace"]
