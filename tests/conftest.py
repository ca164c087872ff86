"""
Shared pytest fixtures for the harness test suite.

The unit suites never launch a real browser. ``FakeDriverFactory`` stands
in for ``sync_playwright`` and hands out ``MagicMock`` handles, recording
each one so tests can count what the ``SessionManager`` created and
assert what it closed.
"""

from __future__ import annotations

import threading
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError

from config import Config
from qa_harness.session import SessionManager


class UnitTestConfig(Config):
    """Deterministic settings, independent of the caller's environment."""

    BASE_URL = "https://shop.example.test"
    BROWSER_TYPE = "chromium"
    HEADLESS = True
    DEFAULT_TIMEOUT_MS = 15000
    WAIT_TIMEOUT_MS = 5000
    API_BASE_URL = "https://api.example.test"
    API_TIMEOUT_MS = 2000
    API_MAX_RETRIES = 0


class FakeDriverFactory:
    """
    Drop-in replacement for ``sync_playwright``.

    Every driver, browser, context and page it creates is a distinct mock
    and is appended to the matching list. Set ``launch_error`` to make the
    next browser launch raise.

    Like the real sync API, only one driver may run per thread: starting a
    second one before ``stop()`` raises a Playwright ``Error``.
    """

    def __init__(self):
        self.drivers: list[MagicMock] = []
        self.browsers: list[MagicMock] = []
        self.contexts: list[MagicMock] = []
        self.pages: list[MagicMock] = []
        self.launch_error: Exception | None = None
        self._lock = threading.Lock()
        self._live = threading.local()

    def _record(self, bucket: list, handle: MagicMock) -> MagicMock:
        with self._lock:
            bucket.append(handle)
        return handle

    def __call__(self) -> MagicMock:
        starter = MagicMock(name="sync_playwright")
        starter.start.side_effect = self._start
        return starter

    def _start(self) -> MagicMock:
        if getattr(self._live, "driver", None) is not None:
            raise PlaywrightError(
                "It looks like you are using Playwright Sync API inside the asyncio loop."
            )
        driver = MagicMock(name="playwright")
        driver.stop.side_effect = self._stopper(driver)
        self._live.driver = driver
        for engine in ("chromium", "firefox", "webkit"):
            browser_type = getattr(driver, engine)
            browser_type.launch.side_effect = self._launcher(engine)
        return self._record(self.drivers, driver)

    def _stopper(self, driver: MagicMock):
        def _stop() -> None:
            if getattr(self._live, "driver", None) is driver:
                self._live.driver = None

        return _stop

    def _launcher(self, engine: str):
        def _launch(**options) -> MagicMock:
            if self.launch_error is not None:
                raise self.launch_error
            browser = MagicMock(name=f"{engine}_browser")
            browser.engine = engine
            browser.launch_options = options
            browser.new_context.side_effect = self._new_context
            return self._record(self.browsers, browser)

        return _launch

    def _new_context(self, *args, **kwargs) -> MagicMock:
        context = MagicMock(name="browser_context")
        context.new_page.side_effect = self._new_page
        return self._record(self.contexts, context)

    def _new_page(self, *args, **kwargs) -> MagicMock:
        page = MagicMock(name="page")
        page.url = "about:blank"
        return self._record(self.pages, page)


# -----------------------------------------------------------------------------
# Session Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def harness_config() -> type[Config]:
    return UnitTestConfig


@pytest.fixture
def fake_driver() -> FakeDriverFactory:
    return FakeDriverFactory()


@pytest.fixture
def manager(
    harness_config: type[Config], fake_driver: FakeDriverFactory
) -> Generator[SessionManager, None, None]:
    """
    SessionManager wired to the fake driver.

    Torn down after the test so no thread-local state leaks between tests.
    """
    session_manager = SessionManager(config=harness_config, driver_factory=fake_driver)
    yield session_manager
    session_manager.close_browser()


@pytest.fixture
def mock_page() -> MagicMock:
    """Bare Playwright page double for page-object tests."""
    page = MagicMock(name="page")
    page.url = "https://shop.example.test/inventory.html"
    return page
