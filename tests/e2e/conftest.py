"""
Playwright fixtures for the SauceDemo E2E suite.

Every test gets a fresh browser, context and page from a
``SessionManager`` and the whole chain is closed in a ``finally`` block,
whatever the outcome. Sessions are thread-local, so the suite is safe to
run with a threaded runner. On failure a screenshot is captured before
teardown.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Generator

import pytest
from playwright.sync_api import Page

from config import Config, get_config
from qa_harness import utils
from qa_harness.constants import Selectors, TestUsers
from qa_harness.pages import CartPage, LoginPage, ProductPage
from qa_harness.session import SessionManager
from shared.live_site import live_site_url

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def harness_config() -> type[Config]:
    """Real configuration, selected by TEST_ENV."""
    return get_config()


@pytest.fixture(scope="session")
def base_url(harness_config: type[Config]) -> str:
    return live_site_url(
        base_url_env="BASE_URL",
        base_url_default=harness_config.BASE_URL,
        suite_name="e2e",
    )


@pytest.fixture(scope="session")
def session_manager(harness_config: type[Config]) -> SessionManager:
    return SessionManager(config=harness_config)


@pytest.fixture
def page(session_manager: SessionManager, base_url: str) -> Generator[Page, None, None]:
    """
    Before/after hooks for a browser scenario.

    Launches a fresh browser, context and page for the calling thread and
    always tears them down afterwards. A browser that cannot be launched
    surfaces as an ``InitializationError`` setup error.
    """
    logger.info("===== Setting up browser (thread: %s) =====", threading.get_ident())
    with session_manager.scenario() as scenario_page:
        yield scenario_page
        logger.info("===== Tearing down browser (thread: %s) =====", threading.get_ident())


@pytest.fixture(scope="module")
def shared_engine(harness_config: type[Config], base_url: str) -> Generator[SessionManager, None, None]:
    """
    SessionManager whose browser stays up for a whole test module.

    It owns the thread's driver root while the module runs, so a module that
    uses it must not also use ``page``.
    """
    manager = SessionManager(config=harness_config)
    manager.init_browser()
    try:
        yield manager
    finally:
        manager.close_browser()


@pytest.fixture
def recycled_page(shared_engine: SessionManager) -> Generator[Page, None, None]:
    """Fresh context and page on the module's browser, via ``reset_browser``."""
    shared_engine.reset_browser()
    try:
        yield shared_engine.get_page()
    finally:
        shared_engine.close_context()


@pytest.fixture
def login_page(page: Page, base_url: str, harness_config: type[Config]) -> LoginPage:
    return LoginPage(page, base_url, config=harness_config).navigate()


@pytest.fixture
def product_page(page: Page, base_url: str, harness_config: type[Config]) -> ProductPage:
    return ProductPage(page, base_url, config=harness_config)


@pytest.fixture
def cart_page(page: Page, base_url: str, harness_config: type[Config]) -> CartPage:
    return CartPage(page, base_url, config=harness_config)


@pytest.fixture
def logged_in(login_page: LoginPage, product_page: ProductPage) -> ProductPage:
    """Log in as the standard user and land on the inventory page."""
    login_page.login(TestUsers.STANDARD_USER, TestUsers.STANDARD_PASSWORD)
    product_page.wait_for_url(ProductPage.URL_PATH)
    product_page.wait_for_element(Selectors.PRODUCTS_CONTAINER)
    return product_page


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on UI test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page") or item.funcargs.get("recycled_page")
        if page:
            test_name = item.name.replace("/", "_").replace("::", "_")
            path = utils.take_screenshot(page, f"failed_{test_name}_{int(time.time())}")
            if path:
                logger.error("Scenario FAILED: %s (screenshot: %s)", item.name, path)
            else:
                logger.warning("Scenario FAILED: %s (no screenshot captured)", item.name)
