# records_loader.py

import json
from pathlib import Path
from typing import List

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from set_harvester.core.exceptions import InputFileError
from set_harvester.models.records import SetRecord

_RECORDS = TypeAdapter(List[SetRecord])


def load_records(path: Path | str) -> List[SetRecord]:
    """
    Read the sets file: a JSON array of {"name": ..., "link": ...} objects.
    Any problem here is fatal, so it is raised before a browser is launched.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputFileError(path, exc.strerror or str(exc)) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InputFileError(path, f"malformed JSON ({exc.msg} at line {exc.lineno})") from exc

    if not isinstance(data, list):
        raise InputFileError(path, "expected a JSON array of sets")

    try:
        records = _RECORDS.validate_python(data)
    except ValidationError as exc:
        raise InputFileError(path, f"invalid set record: {exc.errors()[0]['msg']}") from exc

    logger.info(f"Loaded {len(records)} sets from {path}")
    return records
