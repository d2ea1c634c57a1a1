"""Projection of a build trace into summary statistics.

The projector walks a flat list of TraceEvents once, reconciling the two ways
a duration can be encoded (self-contained COMPLETE events and separately
emitted BEGIN/END pairs) into one set of tallies, then freezes the tallies
into a Statistics snapshot.
"""

from __future__ import annotations

import heapq
import itertools
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .events import MODULE_RESOLUTION_OPERATION, Micros, Phase, TraceEvent

if TYPE_CHECKING:
    from collections.abc import Sequence

SLOWEST_FILES_LIMIT = 10
UNKNOWN_EXTENSION = "unknown"

_EXTENSION_RE = re.compile(r"\.([^.]+)$")


class _StatsModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class TimingStats(_StatsModel):
    total_time: Micros = 0
    count: int = 0
    average_time: float = 0.0


class FileStats(_StatsModel):
    path: str
    total_time: Micros = 0
    operations: dict[str, Micros] = {}


class ModuleResolutionStats(_StatsModel):
    total_time: Micros = 0
    total_count: int = 0
    average_time: float = 0.0


class Statistics(_StatsModel):
    """Finalized result of one aggregation pass.

    The model and every nested tally are frozen. The dict and list containers
    are only shallow-frozen: they can be edited in place, but they are copies
    owned by this snapshot and the projector keeps no reference to them.
    """

    total_time: Micros = 0
    total_files: int = 0
    operation_times: dict[str, TimingStats] = {}
    category_times: dict[str, TimingStats] = {}
    slowest_files: list[FileStats] = []
    files_by_type: dict[str, int] = {}
    module_resolution: ModuleResolutionStats = ModuleResolutionStats()


@dataclass
class _Tally:
    total: Micros = 0
    count: int = 0

    def add(self, duration: Micros) -> None:
        self.total += duration
        self.count += 1

    def average(self) -> float:
        if self.count == 0:
            return 0.0
        return self.total / self.count


@dataclass
class _FileTally:
    path: str
    total: Micros = 0
    operations: dict[str, Micros] = field(default_factory=dict)

    def add(self, operation: str, duration: Micros) -> None:
        self.total += duration
        self.operations[operation] = self.operations.get(operation, 0) + duration


_MatchKey = tuple[str, str | None]


class _PendingBegins:
    """Unmatched BEGIN events, earliest first per (name, file path) key."""

    def __init__(self) -> None:
        self._queues: dict[_MatchKey, list[tuple[Micros, int, TraceEvent]]] = {}
        self._sequence = itertools.count()

    def push(self, event: TraceEvent) -> None:
        queue = self._queues.setdefault((event.name, event.file_path), [])
        heapq.heappush(queue, (event.timestamp, next(self._sequence), event))

    def pop(self, event: TraceEvent) -> TraceEvent | None:
        queue = self._queues.get((event.name, event.file_path))
        if not queue:
            return None
        return heapq.heappop(queue)[2]

    def __len__(self) -> int:
        return sum(len(queue) for queue in self._queues.values())


def file_extension(path: str) -> str:
    """Return the text after the last '.' in ``path``, or ``"unknown"``."""
    match = _EXTENSION_RE.search(path)
    return match.group(1) if match else UNKNOWN_EXTENSION


def project_statistics(
    events: Sequence[TraceEvent],
    *,
    module_resolution_operation: str = MODULE_RESOLUTION_OPERATION,
    slowest_files_limit: int = SLOWEST_FILES_LIMIT,
) -> Statistics:
    """Project trace events into build statistics.

    Events are consumed in input order. An END event is paired with the
    earliest still-open BEGIN sharing its name and file path; END events with
    no open BEGIN are ignored and BEGIN events left open at the end of the
    pass are dropped. Module resolution is only tallied from COMPLETE events.

    Args:
        events: TraceEvents in trace order.
        module_resolution_operation: Operation name counted as module resolution.
        slowest_files_limit: Maximum number of entries in ``slowest_files``.

    Returns:
        Statistics snapshot for the whole sequence.

    Raises:
        ValueError: If ``slowest_files_limit`` is negative.
    """
    if slowest_files_limit < 0:
        msg = f"slowest_files_limit must be >= 0, got {slowest_files_limit}"
        raise ValueError(msg)

    if not events:
        return Statistics()

    operations: dict[str, _Tally] = {}
    categories: dict[str, _Tally] = {}
    files: dict[str, _FileTally] = {}
    files_by_type: dict[str, int] = {}
    module_resolution = _Tally()
    pending = _PendingBegins()
    unmatched_ends = 0

    def record(event: TraceEvent, duration: Micros) -> None:
        operations.setdefault(event.name, _Tally()).add(duration)
        categories.setdefault(event.category, _Tally()).add(duration)

        path = event.file_path
        if path:
            files.setdefault(path, _FileTally(path=path)).add(event.name, duration)
            ext = file_extension(path)
            files_by_type[ext] = files_by_type.get(ext, 0) + 1

    for event in events:
        if event.phase == Phase.METADATA:
            continue

        if event.phase == Phase.COMPLETE:
            if event.duration is None:
                continue
            record(event, event.duration)
            if event.name == module_resolution_operation:
                module_resolution.add(event.duration)

        elif event.phase == Phase.BEGIN:
            pending.push(event)

        elif event.phase == Phase.END:
            begin = pending.pop(event)
            if begin is None:
                unmatched_ends += 1
                continue
            record(event, event.timestamp - begin.timestamp)

    if unmatched_ends or len(pending):
        logger.debug(
            "Dropped {} unmatched END and {} unmatched BEGIN events",
            unmatched_ends,
            len(pending),
        )

    ends = [e.effective_end for e in events if e.phase != Phase.METADATA]
    total_time = max(ends) - min(e.timestamp for e in events) if ends else 0

    slowest = sorted(files.values(), key=lambda f: f.total, reverse=True)[:slowest_files_limit]

    return Statistics(
        total_time=total_time,
        total_files=len(files),
        operation_times=_finalize(operations),
        category_times=_finalize(categories),
        slowest_files=[
            FileStats(path=f.path, total_time=f.total, operations=dict(f.operations))
            for f in slowest
        ],
        files_by_type=files_by_type,
        module_resolution=ModuleResolutionStats(
            total_time=module_resolution.total,
            total_count=module_resolution.count,
            average_time=module_resolution.average(),
        ),
    )


def _finalize(tallies: dict[str, _Tally]) -> dict[str, TimingStats]:
    return {
        key: TimingStats(total_time=t.total, count=t.count, average_time=t.average())
        for key, t in tallies.items()
        if t.count > 0
    }
