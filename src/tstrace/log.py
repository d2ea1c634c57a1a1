"""Logging setup for the command line, using loguru."""

from __future__ import annotations

import sys

from loguru import logger

FMT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | {message}"


def setup_logging(level: str = "WARNING", *, colorize: bool = True) -> None:
    logger.remove()
    logger.add(sys.stderr, format=FMT, level=level.upper(), colorize=colorize, diagnose=False)


__all__ = ["logger", "setup_logging"]
