"""Page objects for the SauceDemo application."""

from qa_harness.pages.base_page import BasePage
from qa_harness.pages.cart_page import CartPage
from qa_harness.pages.login_page import LoginPage
from qa_harness.pages.product_page import ProductPage

__all__ = ["BasePage", "CartPage", "LoginPage", "ProductPage"]
