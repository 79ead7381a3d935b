# browser.py

from contextlib import asynccontextmanager
from typing import AsyncIterator

from loguru import logger
from playwright.async_api import Page, async_playwright
from playwright_stealth import Stealth

from set_harvester.core.config import BROWSER_ARGS, LOCALE, TIMEZONE_ID, USER_AGENT, VIEWPORT


@asynccontextmanager
async def open_page(headless: bool = True) -> AsyncIterator[Page]:
    """
    Launch a stealth Chromium and yield its single page.

    The browser is closed on every exit path, including faults raised by the
    caller while the page is in use.
    """
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=headless, args=BROWSER_ARGS)
        try:
            context = await browser.new_context(
                viewport=VIEWPORT,
                user_agent=USER_AGENT,
                locale=LOCALE,
                timezone_id=TIMEZONE_ID,
            )

            stealth = Stealth()
            await stealth.apply_stealth_async(context)

            page = await context.new_page()
            logger.debug(f"Browser ready (headless={headless})")
            yield page
        finally:
            await browser.close()
            logger.debug("Browser closed")
