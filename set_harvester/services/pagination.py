"""
Page walkers for cardmarket listings.

Each walker loads every page of one set and returns the full document markup
of each page, in order. Faults are raised as HarvestError subclasses; nothing
collected so far is returned when that happens.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from loguru import logger
from playwright.async_api import ElementHandle, Page
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from set_harvester.core.exceptions import ControlNotFoundError, PageLoadError, PageStructureError
from set_harvester.models.records import SetRecord
from set_harvester.models.settings import (
    EndSignal,
    HarvestConfig,
    MissingControlPolicy,
    PaginationStrategy,
)

OUTER_HTML_JS = "() => document.documentElement.outerHTML"


def build_page_url(link: str, param: str, index: int) -> str:
    """
    Set `param=index` on the link's query string, replacing any earlier value.
    Every other part of the link is kept byte for byte.
    """
    base, hash_sep, fragment = link.partition("#")
    path, _, query = base.partition("?")
    pairs = [p for p in query.split("&") if p and p.split("=", 1)[0] != param]
    pairs.append(f"{param}={index}")
    url = f"{path}?{'&'.join(pairs)}"
    return f"{url}#{fragment}" if hash_sep else url


async def open_url(page: Page, url: str, config: HarvestConfig) -> None:
    try:
        await page.goto(url, wait_until=config.wait_until, timeout=config.navigation_timeout_ms)
    except PlaywrightTimeoutError as exc:
        raise PageLoadError(url, f"Navigation timed out after {config.navigation_timeout_ms} ms") from exc
    except PlaywrightError as exc:
        raise PageLoadError(url, f"Navigation failed: {exc.message}") from exc


async def wait_for_element(page: Page, url: str, selector: str, config: HarvestConfig) -> None:
    try:
        await page.wait_for_selector(selector, timeout=config.selector_timeout_ms)
    except PlaywrightTimeoutError as exc:
        raise PageStructureError(url, selector) from exc


async def read_outer_html(page: Page) -> str:
    return await page.evaluate(OUTER_HTML_JS)


async def _next_control(page: Page, config: HarvestConfig) -> Tuple[Optional[ElementHandle], bool]:
    """Return the "next page" control (None when absent) and whether it is disabled."""
    control = await page.query_selector(config.next_page_selector)
    if control is None:
        return None, False
    classes = (await control.get_attribute("class")) or ""
    return control, config.disabled_class in classes.split()


def _control_missing(url: str, index: int, config: HarvestConfig) -> None:
    if config.on_missing_control is MissingControlPolicy.error:
        raise ControlNotFoundError(url, config.next_page_selector, index)
    logger.warning(f"Next page control not found on page {index}; treating it as the last page")


async def walk_query_pages(page: Page, record: SetRecord, config: HarvestConfig) -> List[str]:
    """Visit link?site=1, ?site=2, ... until the site signals the end."""
    pages: List[str] = []
    index = 1

    while True:
        url = build_page_url(record.link, config.page_param, index)
        logger.info(f"Visiting: {url}")
        await open_url(page, url, config)
        await wait_for_element(page, url, config.content_selector, config)

        if config.end_signal is EndSignal.no_results:
            if await page.query_selector(config.no_results_selector):
                logger.info(f"No more results on page {index}")
                break
            pages.append(await read_outer_html(page))
            logger.info(f"Page {index} added.")
            index += 1
            continue

        control, disabled = await _next_control(page, config)
        pages.append(await read_outer_html(page))
        logger.info(f"Page {index} added.")
        if control is None:
            _control_missing(url, index, config)
            break
        if disabled:
            logger.info(f"No more pages after page {index}")
            break
        index += 1

    return pages


async def walk_click_pages(page: Page, record: SetRecord, config: HarvestConfig) -> List[str]:
    """Open the first page once, then follow the "next page" control until it is disabled."""
    pages: List[str] = []
    index = 1

    logger.info(f"Visiting: {record.link}")
    await open_url(page, record.link, config)

    while True:
        logger.info(f"Processing page {index} for {record.name}")
        await wait_for_element(page, page.url, config.content_selector, config)
        pages.append(await read_outer_html(page))

        control, disabled = await _next_control(page, config)
        if control is None:
            _control_missing(page.url, index, config)
            break
        if disabled:
            logger.info(f"Reached the last page for {record.name}")
            break

        try:
            async with page.expect_navigation(
                wait_until=config.wait_until, timeout=config.navigation_timeout_ms
            ):
                await control.click()
        except PlaywrightTimeoutError as exc:
            raise PageLoadError(
                page.url, f"Next page did not load within {config.navigation_timeout_ms} ms"
            ) from exc
        index += 1

    return pages


async def collect_pages(page: Page, record: SetRecord, config: HarvestConfig) -> List[str]:
    if config.strategy is PaginationStrategy.click_through:
        return await walk_click_pages(page, record, config)
    return await walk_query_pages(page, record, config)
