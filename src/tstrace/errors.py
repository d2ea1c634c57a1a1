from __future__ import annotations


class TraceError(Exception):
    """Base class for errors raised while loading a trace."""


class TraceReadError(TraceError):
    """The trace file could not be read."""


class TraceFormatError(TraceError):
    """The trace file was read but is not a usable event list."""


__all__ = ["TraceError", "TraceFormatError", "TraceReadError"]
