"""General-purpose helpers shared by page objects, hooks and tests."""

from __future__ import annotations

import logging
import random
import string
import time
from pathlib import Path

from faker import Faker
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from config import get_config

logger = logging.getLogger(__name__)

fake = Faker()

_CHARS = string.ascii_letters + string.digits


# -----------------------------------------------------------------------------
# Browser helpers
# -----------------------------------------------------------------------------

def take_screenshot(page: Page, name: str, directory: str | Path | None = None) -> str | None:
    """
    Capture a screenshot of ``page``.

    Args:
        page: Page to capture.
        name: Base filename without extension.
        directory: Target directory; defaults to ``SCREENSHOT_DIR``.

    Returns:
        The screenshot path, or None when the capture failed.
    """
    screenshot_dir = Path(directory or get_config().SCREENSHOT_DIR)
    path = screenshot_dir / f"{name}.png"
    try:
        screenshot_dir.mkdir(parents=True, exist_ok=True)
        page.screenshot(path=str(path))
    except (OSError, PlaywrightError):
        logger.error("Failed to capture screenshot '%s'", name, exc_info=True)
        return None
    logger.info("Screenshot captured: %s", path)
    return str(path)


def get_page_title(page: Page) -> str:
    title = page.title()
    logger.info("Page title: %s", title)
    return title


def get_current_url(page: Page) -> str:
    url = page.url
    logger.info("Current URL: %s", url)
    return url


# -----------------------------------------------------------------------------
# Test data generation
# -----------------------------------------------------------------------------

def generate_random_email() -> str:
    """Generate an email address that is unique within the run."""
    email = f"testuser_{fake.unique.user_name()}_{time.time_ns()}@test.com"
    logger.info("Generated random email: %s", email)
    return email


def generate_random_string(length: int) -> str:
    """
    Generate a random alphanumeric string.

    Raises:
        ValueError: If ``length`` is not positive.
    """
    if length <= 0:
        raise ValueError(f"Length must be positive, got: {length}")
    return "".join(random.choices(_CHARS, k=length))


# -----------------------------------------------------------------------------
# Time helpers
# -----------------------------------------------------------------------------

def pause(milliseconds: int) -> None:
    """
    Sleep the calling thread.

    Prefer Playwright's auto-waiting (``wait_for``, ``wait_for_url``);
    this is for the rare case where nothing observable can be awaited.
    """
    time.sleep(milliseconds / 1000)
