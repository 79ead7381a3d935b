# snapshot.py

from pathlib import Path
from typing import Optional

from loguru import logger
from playwright.async_api import Page

from set_harvester.core.exceptions import OutputWriteError
from set_harvester.models.settings import HarvestConfig
from set_harvester.services.exporter import write_text_atomic
from set_harvester.services.pagination import open_url, read_outer_html, wait_for_element


async def snapshot(
    page: Page,
    url: str,
    output_path: Path | str,
    ready_selector: str,
    config: Optional[HarvestConfig] = None,
) -> Path:
    """
    Save the rendered markup of a single page once `ready_selector` is present.
    """
    config = config or HarvestConfig()
    output_path = Path(output_path)

    logger.info(f"Snapshotting {url}")
    await open_url(page, url, config)
    await wait_for_element(page, url, ready_selector, config)
    html = await read_outer_html(page)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(output_path, exc.strerror or str(exc)) from exc
    write_text_atomic(output_path, html)

    logger.success(f"HTML content saved to {output_path}")
    return output_path
