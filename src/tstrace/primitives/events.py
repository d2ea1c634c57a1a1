from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    field_validator,
    model_validator,
)

MODULE_RESOLUTION_OPERATION = "resolveModuleNamesWorker"

# Microseconds; integer traces stay integral through aggregation.
Micros = int | float


class Phase(StrEnum):
    BEGIN = "B"
    END = "E"
    COMPLETE = "X"
    METADATA = "M"
    INSTANT = "i"


KNOWN_PHASES = frozenset({*Phase, "I"})


class TraceEvent(BaseModel):
    """One record from a build trace.

    Accepts the trace-file keys (``ph``, ``ts``, ``dur``, ``cat``) as well as
    the field names. ``file_path`` is taken from ``args.path``, falling back to
    ``args.fileName``, unless passed explicitly.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    category: str = Field(default="", alias="cat")
    phase: Phase = Field(alias="ph")
    timestamp: NonNegativeInt | NonNegativeFloat = Field(alias="ts")
    duration: NonNegativeInt | NonNegativeFloat | None = Field(default=None, alias="dur")
    file_path: str | None = None
    args: dict[str, Any] = Field(default_factory=dict)

    @field_validator("phase", mode="before")
    @classmethod
    def _normalize_instant(cls, value: Any) -> Any:
        if value == "I":
            return Phase.INSTANT
        return value

    @field_validator("args", mode="before")
    @classmethod
    def _default_args(cls, value: Any) -> Any:
        return {} if value is None else value

    @model_validator(mode="before")
    @classmethod
    def _derive_file_path(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("file_path") is not None:
            return data
        args = data.get("args")
        if not isinstance(args, dict):
            return data
        for key in ("path", "fileName"):
            value = args.get(key)
            if isinstance(value, str) and value:
                return {**data, "file_path": value}
        return data

    @property
    def effective_end(self) -> Micros:
        """Timestamp at which this event stops occupying the build."""
        if self.phase == Phase.COMPLETE:
            return self.timestamp + (self.duration or 0)
        return self.timestamp
