"""
Thread-isolated browser session management.

The ``SessionManager`` owns the Playwright resource chain for the calling
thread: driver root -> browser (engine) -> context -> page. Every handle
lives in ``threading.local`` storage, so two threads running scenarios in
parallel never observe each other's browser state and no locking is needed.

Lifecycle per thread::

    COLD -> ENGINE_READY -> CONTEXT_READY -> PAGE_READY

Resources are created lazily: ``get_page()`` on a cold thread launches the
browser, opens a context and a page. Teardown is best-effort and runs in the
strict order page -> context -> browser -> driver; a failure in one step is
logged and the remaining steps still run. Only browser launch failures are
raised, as ``InitializationError``.

Example:
    manager = SessionManager()
    with manager.scenario() as page:
        page.goto("https://www.saucedemo.com")
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Generator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any

from playwright.sync_api import (
    Browser,
    BrowserContext,
    BrowserType,
    Page,
    Playwright,
    sync_playwright,
)

from config import Config, get_config
from qa_harness.exceptions import InitializationError

logger = logging.getLogger(__name__)

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")
DEFAULT_BROWSER = "chromium"


class SessionState(str, Enum):
    """How far the calling thread's resource chain has been built."""

    COLD = "cold"
    ENGINE_READY = "engine_ready"
    CONTEXT_READY = "context_ready"
    PAGE_READY = "page_ready"


@dataclass(frozen=True)
class Session:
    """
    Snapshot of one thread's browser resources.

    Attributes:
        driver: Playwright driver root started by ``sync_playwright()``.
        browser: Launched browser engine.
        context: Isolated browsing context (cookies, storage).
        page: Active tab inside ``context``.
    """

    driver: Playwright | None = None
    browser: Browser | None = None
    context: BrowserContext | None = None
    page: Page | None = None

    @property
    def state(self) -> SessionState:
        if self.page is not None:
            return SessionState.PAGE_READY
        if self.context is not None:
            return SessionState.CONTEXT_READY
        if self.browser is not None:
            return SessionState.ENGINE_READY
        return SessionState.COLD


class SessionManager:
    """
    Lazily build, reuse, reset and tear down per-thread browser sessions.

    Args:
        config: Configuration class providing ``BROWSER_TYPE``, ``HEADLESS``
            and ``DEFAULT_TIMEOUT_MS``. Defaults to ``get_config()``.
        driver_factory: Callable returning an object whose ``start()``
            yields a Playwright driver root. Defaults to ``sync_playwright``.
    """

    def __init__(
        self,
        config: type[Config] | None = None,
        driver_factory: Callable[[], Any] = sync_playwright,
    ):
        self.config = config or get_config()
        self._driver_factory = driver_factory
        self._local = threading.local()

    # -------------------------------------------------------------------------
    # Thread-local storage
    # -------------------------------------------------------------------------

    def _get(self, name: str) -> Any:
        return getattr(self._local, name, None)

    def _set(self, name: str, value: Any) -> None:
        setattr(self._local, name, value)

    def _forget(self, name: str) -> None:
        vars(self._local).pop(name, None)

    @property
    def session(self) -> Session:
        """Snapshot of the calling thread's resources."""
        return Session(
            driver=self._get("driver"),
            browser=self._get("browser"),
            context=self._get("context"),
            page=self._get("page"),
        )

    @property
    def state(self) -> SessionState:
        return self.session.state

    @property
    def browser(self) -> Browser | None:
        return self._get("browser")

    @property
    def context(self) -> BrowserContext | None:
        return self._get("context")

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    def _browser_type(self, driver: Playwright, name: str) -> BrowserType:
        if name not in SUPPORTED_BROWSERS:
            logger.warning("Unknown browser type %r; falling back to %s", name, DEFAULT_BROWSER)
            name = DEFAULT_BROWSER
        return getattr(driver, name)

    def init_browser(self) -> None:
        """
        Start a Playwright driver and launch a browser for this thread.

        A fresh browser is launched on every call. The thread keeps a single
        Playwright driver root, started on the first call and reused after
        that. Calling it twice without ``close_browser()`` in between leaks
        the first browser.

        Raises:
            InitializationError: If the driver or browser cannot be started.
        """
        browser_type = str(self.config.get("BROWSER_TYPE", DEFAULT_BROWSER)).lower()
        headless = bool(self.config.get("HEADLESS", True))

        if self._get("browser") is not None:
            logger.warning("init_browser called while a browser is live on this thread")

        driver = self._get("driver")
        started = None
        try:
            if driver is None:
                driver = started = self._driver_factory().start()
            browser = self._browser_type(driver, browser_type).launch(headless=headless)
        except Exception as exc:
            logger.exception("Failed to initialize browser %s", browser_type)
            if started is not None:
                self._safe_close("driver", started.stop)
            raise InitializationError(browser_type) from exc

        self._set("driver", driver)
        self._set("browser", browser)
        logger.info("Browser launched: %s (headless: %s)", browser_type, headless)

    def create_context(self) -> None:
        """Open an isolated browser context, launching the browser if needed."""
        if self._get("context") is not None:
            logger.debug("Reusing existing browser context")
            return
        if self._get("browser") is None:
            self.init_browser()

        context = self._get("browser").new_context()
        context.set_default_timeout(self.config.get("DEFAULT_TIMEOUT_MS", 30000))
        self._set("context", context)
        logger.info("Browser context created")

    def create_page(self) -> None:
        """Open a page in the current context, creating the context if needed."""
        if self._get("page") is not None:
            logger.debug("Reusing existing page")
            return
        if self._get("context") is None:
            self.create_context()

        self._set("page", self._get("context").new_page())
        logger.info("New page created")

    def get_page(self) -> Page:
        """Return this thread's page, bootstrapping the whole chain if cold."""
        if self._get("page") is None:
            self.create_page()
        return self._get("page")

    def navigate_to(self, url: str) -> None:
        self.get_page().goto(url)
        logger.info("Navigated to: %s", url)

    # -------------------------------------------------------------------------
    # Teardown
    # -------------------------------------------------------------------------

    @staticmethod
    def _safe_close(label: str, close: Callable[[], Any]) -> bool:
        try:
            close()
        except Exception:
            logger.warning("Failed to close %s", label, exc_info=True)
            return False
        return True

    def _release(self, name: str, close_method: str = "close") -> None:
        resource = self._get(name)
        if resource is None:
            return
        try:
            if self._safe_close(name, getattr(resource, close_method)):
                logger.info("%s closed", name.capitalize())
        finally:
            self._forget(name)

    def close_page(self) -> None:
        """Close and forget this thread's page; no-op if there is none."""
        self._release("page")

    def close_context(self) -> None:
        """Close this thread's context (and its page first); no-op if absent."""
        self.close_page()
        self._release("context")

    def close_browser(self) -> None:
        """
        Tear down every resource owned by the calling thread.

        Order is page -> context -> browser -> driver. Each step is
        independent: an exception is logged and the next step still runs.
        Safe to call repeatedly.
        """
        steps = (
            ("page", self.close_page),
            ("context", self.close_context),
            ("browser", lambda: self._release("browser")),
            ("driver", lambda: self._release("driver", "stop")),
        )
        had_resources = bool(vars(self._local))
        for label, step in steps:
            try:
                step()
            except Exception:
                logger.warning("Teardown step '%s' failed", label, exc_info=True)
        vars(self._local).clear()
        if had_resources:
            logger.info("Browser closed")

    def reset_browser(self) -> None:
        """Replace the context and page while keeping the browser running."""
        self.close_page()
        self.close_context()
        self.create_context()
        self.create_page()
        logger.info("Browser reset")

    @contextmanager
    def scenario(self) -> Generator[Page, None, None]:
        """
        Run one scenario with a fresh browser, always tearing it down.

        Any session already live on the thread is closed first.

        Yields:
            The thread's ready page.
        """
        if self.state is not SessionState.COLD:
            logger.warning("Discarding live session on this thread before the scenario")
            self.close_browser()
        self.init_browser()
        try:
            self.create_context()
            self.create_page()
            yield self.get_page()
        finally:
            self.close_browser()
