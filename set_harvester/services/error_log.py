import json
from pathlib import Path
from typing import List

from loguru import logger

from set_harvester.core.exceptions import InputFileError, OutputWriteError
from set_harvester.models.records import ErrorLogEntry
from set_harvester.services.exporter import write_text_atomic


class ErrorLog:
    """
    JSON array of failed sets on disk.

    Every append re-reads and rewrites the whole file, so entries written
    before a crash survive it.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self._dump([])
            else:
                # fail at startup, not on the first failure
                self._load()
        except (OSError, OutputWriteError) as exc:
            raise InputFileError(self.path, f"error log is not usable ({exc})") from exc

    def _load(self) -> list:
        raw = self.path.read_text(encoding="utf-8")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise InputFileError(self.path, f"error log is not valid JSON ({exc.msg})") from exc
        if not isinstance(data, list):
            raise InputFileError(self.path, "error log must hold a JSON array")
        return data

    def _dump(self, data: list) -> None:
        write_text_atomic(self.path, json.dumps(data, ensure_ascii=False, indent=2))

    def entries(self) -> List[ErrorLogEntry]:
        return [ErrorLogEntry.model_validate(item) for item in self._load()]

    def append(self, entry: ErrorLogEntry) -> None:
        """Raises OutputWriteError when the log cannot be read back or rewritten."""
        try:
            data = self._load()
        except OSError as exc:
            raise OutputWriteError(self.path, exc.strerror or str(exc)) from exc
        data.append(entry.model_dump())
        self._dump(data)
        logger.debug(f"Recorded failure for {entry.name} in {self.path}")
