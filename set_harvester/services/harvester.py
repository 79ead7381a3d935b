"""Batch harvest: one consolidated HTML file per set, failures logged and skipped."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from set_harvester.core.exceptions import HarvestError, HarvesterError
from set_harvester.models.records import ErrorLogEntry, HarvestResult, SetRecord
from set_harvester.models.settings import HarvestConfig
from set_harvester.services.browser import open_page
from set_harvester.services.error_log import ErrorLog
from set_harvester.services.exporter import sanitize_filename, write_html
from set_harvester.services.pagination import collect_pages
from set_harvester.services.records_loader import load_records


async def harvest_record(
    page: Page,
    record: SetRecord,
    output_dir: Path,
    config: HarvestConfig,
) -> HarvestResult:
    logger.info(f"Fetching: {record.name} ({record.link})")
    pages = await collect_pages(page, record, config)
    path = write_html(output_dir, record.name, "".join(pages))
    return HarvestResult(record=record, path=path, pages=len(pages))


async def harvest(
    records: Sequence[SetRecord],
    output_dir: Path | str,
    page: Page,
    config: Optional[HarvestConfig] = None,
    error_log: Optional[ErrorLog] = None,
) -> List[HarvestResult]:
    """
    Harvest every set in order on the given page.

    A set that fails is logged (and appended to `error_log` when one is given)
    and the batch moves on to the next set.
    """
    config = config or HarvestConfig()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    results: List[HarvestResult] = []
    claimed: Dict[str, str] = {}

    for record in records:
        filename = sanitize_filename(record.name)
        previous = claimed.setdefault(filename, record.name)
        if previous != record.name:
            logger.warning(f"{record.name!r} and {previous!r} both write {filename}; the later one wins")

        try:
            result = await harvest_record(page, record, output_dir, config)
        except (HarvestError, PlaywrightError) as exc:
            message = str(exc)
            logger.error(f"Failed to fetch {record.name}: {message}")
            if error_log is not None:
                try:
                    error_log.append(ErrorLogEntry.from_record(record, message))
                except HarvesterError:
                    logger.exception(f"Could not record failure of {record.name} in {error_log.path}")
            result = HarvestResult(record=record, error=message)

        results.append(result)

    failed = sum(1 for r in results if not r.ok)
    logger.info(f"All sets processed. {len(results) - failed} saved, {failed} failed.")
    return results


async def run_harvest(
    sets_path: Path | str,
    output_dir: Path | str,
    config: Optional[HarvestConfig] = None,
    error_log_path: Path | str | None = None,
) -> List[HarvestResult]:
    """Load the sets file, open a stealth browser, and harvest every set."""
    config = config or HarvestConfig()
    records = load_records(sets_path)
    error_log = ErrorLog(error_log_path) if error_log_path else None

    async with open_page(headless=config.headless) as page:
        return await harvest(records, output_dir, page, config, error_log)
