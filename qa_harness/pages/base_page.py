"""
Base Page class for the Page Object Model.

Provides logged wrappers around the Playwright interactions every page
object needs: navigation, clicks, typing, text extraction, waits and
visibility checks.

Interaction failures are logged with the selector that caused them and then
re-raised unchanged, so the test sees the original Playwright error. The
query helpers ``is_element_visible`` and ``count_elements`` are the
exception: they answer ``False`` / ``0`` instead of raising.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from config import Config, get_config
from qa_harness import utils

logger = logging.getLogger(__name__)


class BasePage:
    """
    Base class for all page objects.

    Attributes:
        page: Playwright page instance.
        base_url: Base URL of the application.
        config: Configuration class supplying timeouts.
    """

    def __init__(self, page: Page, base_url: str | None = None, config: type[Config] | None = None):
        """
        Initialize the base page.

        Args:
            page: Playwright page instance, usually ``SessionManager.get_page()``.
            base_url: Base URL of the application; defaults to ``config.BASE_URL``.
            config: Configuration class; defaults to ``get_config()``.
        """
        self.config = config or get_config()
        self.page = page
        self.base_url = (base_url or self.config.BASE_URL).rstrip("/")

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate_to(self, path: str = "") -> None:
        """
        Navigate to a path relative to the base URL.

        Args:
            path: URL path, e.g. ``/inventory.html``.
        """
        url = f"{self.base_url}{path}"
        self.page.goto(url)
        logger.info("Navigated to: %s", url)

    @property
    def current_url(self) -> str:
        return self.page.url

    # -------------------------------------------------------------------------
    # Element Interactions
    # -------------------------------------------------------------------------

    def locator(self, selector: str) -> Locator:
        return self.page.locator(selector)

    def click(self, selector: str) -> None:
        try:
            self.locator(selector).click()
            logger.info("Clicked: %s", selector)
        except PlaywrightError:
            logger.error("Failed to click element: %s", selector)
            raise

    def type_text(self, selector: str, text: str) -> None:
        try:
            self.locator(selector).fill(text)
            logger.info("Typed text into: %s", selector)
        except PlaywrightError:
            logger.error("Failed to type in element: %s", selector)
            raise

    def get_text(self, selector: str) -> str | None:
        try:
            text = self.locator(selector).text_content()
        except PlaywrightError:
            logger.error("Failed to get text from element: %s", selector)
            raise
        logger.info("Got text from %s: %s", selector, text)
        return text

    def get_text_by_index(self, selector: str, index: int) -> str | None:
        try:
            text = self.locator(selector).nth(index).text_content()
        except PlaywrightError:
            logger.error("Failed to get text from %s[%s]", selector, index)
            raise
        logger.info("Got text from %s[%s]: %s", selector, index, text)
        return text

    def get_attribute(self, selector: str, attribute: str) -> str | None:
        try:
            value = self.locator(selector).get_attribute(attribute)
        except PlaywrightError:
            logger.error("Failed to get attribute '%s' from %s", attribute, selector)
            raise
        logger.info("Got attribute '%s' from %s: %s", attribute, selector, value)
        return value

    def select_dropdown_option(self, selector: str, option: str) -> None:
        """
        Select a dropdown option by its visible label.

        Args:
            selector: Selector of the ``<select>`` element.
            option: Visible label of the option.
        """
        try:
            self.locator(selector).select_option(label=option)
            logger.info("Selected '%s' in dropdown: %s", option, selector)
        except PlaywrightError:
            logger.error("Failed to select option '%s' in dropdown %s", option, selector)
            raise

    # -------------------------------------------------------------------------
    # Wait Methods
    # -------------------------------------------------------------------------

    def wait_for_element(self, selector: str, timeout: int | None = None) -> None:
        """
        Wait for an element to be visible.

        Args:
            selector: Selector of the element.
            timeout: Maximum wait in milliseconds; defaults to ``WAIT_TIMEOUT_MS``.
        """
        timeout = timeout if timeout is not None else self.config.WAIT_TIMEOUT_MS
        try:
            self.locator(selector).wait_for(state="visible", timeout=timeout)
            logger.info("Element visible: %s", selector)
        except PlaywrightError:
            logger.error("Timed out waiting for element: %s", selector)
            raise

    def wait_for_url(self, url_fragment: str) -> None:
        """Wait until the current URL contains ``url_fragment``."""
        try:
            self.page.wait_for_url(
                f"**{url_fragment}**", timeout=self.config.DEFAULT_TIMEOUT_MS
            )
            logger.info("URL now contains: %s", url_fragment)
        except PlaywrightError:
            logger.error("Timed out waiting for URL fragment: %s", url_fragment)
            raise

    def wait_for_page_load(self) -> None:
        self.page.wait_for_load_state("load")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_element_visible(self, selector: str) -> bool:
        try:
            return self.locator(selector).is_visible()
        except PlaywrightError:
            logger.warning("Element not visible: %s", selector)
            return False

    def count_elements(self, selector: str) -> int:
        try:
            return self.locator(selector).count()
        except PlaywrightError:
            logger.warning("Failed to count elements: %s", selector)
            return 0

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def take_screenshot(self, name: str) -> str | None:
        """
        Take a screenshot of the current page.

        Args:
            name: Name for the screenshot file, without extension.

        Returns:
            Path to the saved screenshot, or None if capture failed.
        """
        return utils.take_screenshot(self.page, name, self.config.SCREENSHOT_DIR)
