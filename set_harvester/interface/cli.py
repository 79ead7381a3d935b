# cli.py

import asyncio
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from playwright.async_api import Error as PlaywrightError

from set_harvester.core import config
from set_harvester.core.exceptions import HarvesterError
from set_harvester.core.logger import setup_logging
from set_harvester.models.settings import (
    EndSignal,
    HarvestConfig,
    MissingControlPolicy,
    PaginationStrategy,
)
from set_harvester.services.browser import open_page
from set_harvester.services.harvester import run_harvest
from set_harvester.services.snapshot import snapshot as take_snapshot

app = typer.Typer(help="Save consolidated cardmarket listing HTML for a list of sets.")


@app.command()
def harvest(
    sets: Path = typer.Option(config.SETS_FILE, "--sets", help="JSON array of {name, link} sets"),
    output: Path = typer.Option(config.OUTPUT_DIR, "--output", help="Folder for the consolidated HTML files"),
    strategy: PaginationStrategy = typer.Option(
        PaginationStrategy.query_increment, "--strategy", help="Walk pages by ?site=N or by clicking 'Next page'"
    ),
    end_signal: EndSignal = typer.Option(
        EndSignal.no_results, "--end-signal", help="Last-page signal for the query strategy"
    ),
    on_missing_control: MissingControlPolicy = typer.Option(
        MissingControlPolicy.error, "--on-missing-control", help="Fail the set, or treat the page as the last one"
    ),
    error_log: Optional[Path] = typer.Option(config.ERROR_LOG_FILE, "--error-log", help="JSON file collecting failed sets"),
    no_error_log: bool = typer.Option(False, "--no-error-log", help="Do not persist failures"),
    headless: bool = typer.Option(config.HEADLESS, "--headless/--headed", help="Run the browser without a window"),
    log_level: str = typer.Option("INFO", "--log-level"),
):
    """
    Harvest every set in the sets file.
    Example:
        python main.py harvest --sets pokemon_sets.json --output html_files --strategy click
    """
    setup_logging(log_level=log_level)

    run_config = HarvestConfig(
        strategy=strategy,
        end_signal=end_signal,
        on_missing_control=on_missing_control,
        headless=headless,
    )

    try:
        results = asyncio.run(
            run_harvest(sets, output, run_config, error_log_path=None if no_error_log else error_log)
        )
    except (HarvesterError, PlaywrightError) as exc:
        logger.error(str(exc))
        raise typer.Exit(1)

    failed = [r for r in results if not r.ok]
    if failed:
        typer.echo(f"{len(failed)} of {len(results)} sets failed")


@app.command()
def snapshot(
    url: str = typer.Option(config.SNAPSHOT_URL, "--url", help="Page to save"),
    output: Path = typer.Option(config.SNAPSHOT_FILE, "--output", help="Where to write the HTML"),
    ready_selector: str = typer.Option(
        config.SNAPSHOT_READY_SELECTOR, "--ready-selector", help="Wait for this element before saving"
    ),
    headless: bool = typer.Option(config.HEADLESS, "--headless/--headed"),
    log_level: str = typer.Option("INFO", "--log-level"),
):
    """Save the rendered HTML of a single page."""
    setup_logging(log_level=log_level)
    run_config = HarvestConfig(headless=headless)

    async def _run() -> Path:
        async with open_page(headless=headless) as page:
            return await take_snapshot(page, url, output, ready_selector, run_config)

    try:
        asyncio.run(_run())
    except (HarvesterError, PlaywrightError) as exc:
        logger.error(f"Failed to retrieve and save the HTML: {exc}")
        raise typer.Exit(1)
