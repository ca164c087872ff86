"""Login page object for the SauceDemo sign-in screen."""

from __future__ import annotations

import logging

from qa_harness.constants import Selectors, URLPaths
from qa_harness.pages.base_page import BasePage

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    """
    Page object for the login page.

    Provides methods for:
    - Entering credentials
    - Submitting the login form
    - Reading the login error banner
    """

    URL_PATH = URLPaths.LOGIN

    def navigate(self) -> "LoginPage":
        """
        Navigate to the login page.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        self.wait_for_element(Selectors.LOGIN_BUTTON)
        return self

    def enter_username(self, username: str) -> None:
        self.type_text(Selectors.USERNAME_INPUT, username)

    def enter_password(self, password: str) -> None:
        self.type_text(Selectors.PASSWORD_INPUT, password)

    def click_login_button(self) -> None:
        self.click(Selectors.LOGIN_BUTTON)

    def login(self, username: str, password: str) -> None:
        """
        Fill credentials and submit the login form.

        Args:
            username: Username to enter.
            password: Password to enter.
        """
        self.enter_username(username)
        self.enter_password(password)
        self.click_login_button()
        logger.info("Login attempted with username: %s", username)

    def get_error_message(self) -> str | None:
        return self.get_text(Selectors.ERROR_MESSAGE)

    def is_error_message_displayed(self) -> bool:
        return self.is_element_visible(Selectors.ERROR_MESSAGE)
