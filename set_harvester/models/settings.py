"""Per-run harvest settings. Defaults come from core.config (and so from .env)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from set_harvester.core import config


class PaginationStrategy(str, Enum):
    query_increment = "query"
    click_through = "click"


class EndSignal(str, Enum):
    """How the query-increment walk recognises the last page."""

    no_results = "no-results"
    next_disabled = "next-disabled"


class MissingControlPolicy(str, Enum):
    error = "error"
    end = "end"


@dataclass
class HarvestConfig:
    strategy: PaginationStrategy = PaginationStrategy.query_increment
    end_signal: EndSignal = EndSignal.no_results
    on_missing_control: MissingControlPolicy = MissingControlPolicy.error

    page_param: str = config.PAGE_PARAM
    content_selector: str = config.CONTENT_SELECTOR
    no_results_selector: str = config.NO_RESULTS_SELECTOR
    next_page_selector: str = config.NEXT_PAGE_SELECTOR
    disabled_class: str = config.DISABLED_CLASS

    wait_until: str = config.WAIT_UNTIL
    navigation_timeout_ms: int = config.NAVIGATION_TIMEOUT_MS
    selector_timeout_ms: int = config.SELECTOR_TIMEOUT_MS
    headless: bool = config.HEADLESS
