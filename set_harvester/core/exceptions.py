from __future__ import annotations

from pathlib import Path


class HarvesterError(Exception):
    """Base class for every error raised by set_harvester."""


class InputFileError(HarvesterError):
    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"Cannot use input file {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class HarvestError(HarvesterError):
    """A fault that ends one record's harvest; the batch carries on."""

    def __init__(self, url: str, message: str):
        super().__init__(f"{message} ({url})")
        self.url = url


class PageLoadError(HarvestError):
    pass


class PageStructureError(HarvestError):
    def __init__(self, url: str, selector: str):
        super().__init__(url, f"Expected element '{selector}' never appeared")
        self.selector = selector


class ControlNotFoundError(HarvestError):
    def __init__(self, url: str, selector: str, page_index: int):
        super().__init__(url, f"Next page control '{selector}' not found on page {page_index}")
        self.selector = selector
        self.page_index = page_index


class OutputWriteError(HarvestError):
    def __init__(self, path: Path | str, reason: str):
        super().__init__(str(path), f"Could not write output: {reason}")
        self.path = Path(path)
