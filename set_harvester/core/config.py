# config.py

from dotenv import load_dotenv
import os
from pathlib import Path

# Load .env file
load_dotenv()

_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSE_VALUES


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


# Paths
SETS_FILE = Path(os.getenv("HARVESTER_SETS_FILE", "pokemon_sets.json"))
OUTPUT_DIR = Path(os.getenv("HARVESTER_OUTPUT_DIR", "html_files"))
ERROR_LOG_FILE = Path(os.getenv("HARVESTER_ERROR_LOG", "failed_sets.json"))
LOG_DIR = Path(os.getenv("HARVESTER_LOG_DIR", "logs"))

# Browser
HEADLESS = _env_bool("HARVESTER_HEADLESS", True)

BROWSER_ARGS = [
    "--disable-blink-features=AutomationControlled",
    "--disable-dev-shm-usage",
    "--no-first-run",
    "--no-default-browser-check",
]

VIEWPORT = {"width": 1280, "height": 720}

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/118.0.5993.88 Safari/537.36"
)

LOCALE = os.getenv("HARVESTER_LOCALE", "en-US")
TIMEZONE_ID = os.getenv("HARVESTER_TIMEZONE", "Europe/Berlin")

# Waits (milliseconds)
WAIT_UNTIL = os.getenv("HARVESTER_WAIT_UNTIL", "networkidle")
NAVIGATION_TIMEOUT_MS = _env_int("HARVESTER_NAVIGATION_TIMEOUT_MS", 30000)
SELECTOR_TIMEOUT_MS = _env_int("HARVESTER_SELECTOR_TIMEOUT_MS", 10000)

# Cardmarket listing markup
PAGE_PARAM = os.getenv("HARVESTER_PAGE_PARAM", "site")
CONTENT_SELECTOR = os.getenv("HARVESTER_CONTENT_SELECTOR", "div.table-body")
NO_RESULTS_SELECTOR = os.getenv(
    "HARVESTER_NO_RESULTS_SELECTOR",
    "div.table-body > p.noResults.text-center.h3.text-muted.py-5",
)
NEXT_PAGE_SELECTOR = os.getenv(
    "HARVESTER_NEXT_PAGE_SELECTOR",
    'a.pagination-control[aria-label="Next page"]',
)
DISABLED_CLASS = os.getenv("HARVESTER_DISABLED_CLASS", "disabled")

SNAPSHOT_URL = "https://www.cardmarket.com/en/Pokemon/Products/Singles"
SNAPSHOT_READY_SELECTOR = "div.row.g-2.align-items-end.filter-form"
SNAPSHOT_FILE = Path("base_singles.html")
