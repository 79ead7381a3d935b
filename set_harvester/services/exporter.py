# exporter.py

import os
import re
from pathlib import Path

from loguru import logger

from set_harvester.core.exceptions import OutputWriteError

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")
_FALLBACK_STEM = "set"


def sanitize_filename(name: str) -> str:
    """
    Map a set name to its output filename.

    "Base Set" -> "BaseSet.html". Names that strip down to nothing use "set.html".
    """
    stem = _UNSAFE_CHARS.sub("", name) or _FALLBACK_STEM
    return f"{stem}.html"


def write_text_atomic(path: Path | str, text: str) -> Path:
    """
    Write `text` as UTF-8 through a temporary sibling that then replaces `path`,
    so the target is either the old file or the complete new one.
    """
    path = Path(path)
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        tmp_path.write_text(text, encoding="utf-8")
        os.replace(tmp_path, path)
    except (OSError, UnicodeError) as exc:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            logger.warning(f"Could not remove temporary file {tmp_path}")
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        raise OutputWriteError(path, reason) from exc
    return path


def write_html(output_dir: Path | str, name: str, html: str) -> Path:
    """Write the consolidated markup for one set, replacing any earlier file."""
    path = write_text_atomic(Path(output_dir) / sanitize_filename(name), html)
    logger.success(f"Consolidated HTML saved for {name} at {path}")
    return path
