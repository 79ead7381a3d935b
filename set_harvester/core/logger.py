# logger.py
"""
Loguru sink setup.

Usage in the entrypoint (once at startup):
    from set_harvester.core.logger import setup_logging
    setup_logging(log_level="DEBUG")  # optional log_path parameter

Then in any module:
    from loguru import logger
    logger.info("message")

"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from set_harvester.core.config import LOG_DIR

_DEFAULT_LEVEL = "INFO"
_DEFAULT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} "
    "| {function} | {message}"
)
_DEFAULT_FILENAME = "harvester.log"


def setup_logging(
    *,
    log_level: str | int = _DEFAULT_LEVEL,
    log_path: str | Path | None = None,
    rotation: str | int = "5 MB",
    retention: int = 5,
) -> Path:
    """
    Configure loguru with a console sink and a rotating file sink.

    Call this once at application startup.

    Args:
        log_level: Logging level (name or numeric).
        log_path: Directory or file path for the log file.
                  If a directory, `harvester.log` is created inside.
        rotation: Rotate the file when it grows past this size.
        retention: How many rotated files to keep.

    Returns the resolved log file path.
    """
    level = _resolve_level(log_level)
    path = _resolve_log_path(log_path)

    # Reset sinks to avoid duplicates
    logger.remove()
    logger.add(sys.stderr, level=level, format=_DEFAULT_FORMAT)
    logger.add(
        path,
        level=level,
        format=_DEFAULT_FORMAT,
        rotation=rotation,
        retention=retention,
        encoding="utf-8",
    )
    return path


def _resolve_level(level: str | int) -> str | int:
    if isinstance(level, int):
        return level
    name = level.upper()
    try:
        logger.level(name)
    except ValueError as exc:
        raise ValueError(f"Invalid log level: {level}") from exc
    return name


def _resolve_log_path(target: str | Path | None) -> Path:
    if target is None:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        return LOG_DIR / _DEFAULT_FILENAME

    target_path = Path(target)
    if target_path.suffix:  # treat as file
        target_path.parent.mkdir(parents=True, exist_ok=True)
        return target_path

    target_path.mkdir(parents=True, exist_ok=True)
    return target_path / _DEFAULT_FILENAME
