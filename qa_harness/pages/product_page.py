"""
Product (inventory) page object.

Encapsulates the SauceDemo inventory listing: reading products, adding
and removing them from the cart, sorting, and the header menu.
"""

from __future__ import annotations

import logging

from qa_harness.constants import Selectors, URLPaths
from qa_harness.pages.base_page import BasePage

logger = logging.getLogger(__name__)


def product_slug(name: str) -> str:
    """Convert a product name to the suffix SauceDemo uses in ``data-test``."""
    return name.strip().lower().replace(" ", "-")


def parse_price(price_text: str | None) -> float:
    """
    Parse a price label such as ``"$9.99"``.

    Raises:
        ValueError: If the text is empty or not a price.
    """
    if not price_text or not price_text.strip():
        raise ValueError("Price text is empty")
    try:
        return float(price_text.replace("$", "").strip())
    except ValueError as exc:
        raise ValueError(f"Invalid price format: {price_text}") from exc


class ProductPage(BasePage):
    """Page object for the product inventory page."""

    URL_PATH = URLPaths.PRODUCTS

    def navigate(self) -> "ProductPage":
        self.navigate_to(self.URL_PATH)
        return self

    def is_loaded(self) -> bool:
        return self.is_element_visible(Selectors.PRODUCTS_CONTAINER)

    # -------------------------------------------------------------------------
    # Product Queries
    # -------------------------------------------------------------------------

    def get_product_count(self) -> int:
        return self.count_elements(Selectors.INVENTORY_ITEM)

    def get_product_title(self, index: int) -> str | None:
        """Title of the product at zero-based ``index``."""
        return self.get_text_by_index(Selectors.INVENTORY_ITEM_NAME, index)

    def get_product_names(self) -> list[str]:
        names = self.locator(Selectors.INVENTORY_ITEM_NAME).all_text_contents()
        return [name.strip() for name in names]

    def get_product_prices(self) -> list[float]:
        prices = self.locator(Selectors.INVENTORY_ITEM_PRICE).all_text_contents()
        return [parse_price(price) for price in prices]

    # -------------------------------------------------------------------------
    # Cart Interactions
    # -------------------------------------------------------------------------

    def add_product_to_cart(self, name: str) -> "ProductPage":
        """
        Click the "Add to cart" button of the named product.

        Args:
            name: Product name as displayed, e.g. "Sauce Labs Backpack".

        Returns:
            Self for method chaining.
        """
        self.click(f"[data-test='add-to-cart-{product_slug(name)}']")
        logger.info("Added product '%s' to cart", name)
        return self

    def remove_product_from_cart(self, name: str) -> "ProductPage":
        self.click(f"[data-test='remove-{product_slug(name)}']")
        logger.info("Removed product '%s' from cart", name)
        return self

    def get_cart_count(self) -> int:
        """Count shown on the cart badge; 0 when the badge is absent."""
        if not self.is_element_visible(Selectors.CART_BADGE):
            return 0
        text = (self.get_text(Selectors.CART_BADGE) or "").strip()
        try:
            return int(text)
        except ValueError:
            logger.debug("Cart badge text %r is not a number; returning 0", text)
            return 0

    def open_cart(self) -> None:
        self.click(Selectors.CART_LINK)
        self.wait_for_url(URLPaths.CART)
        self.wait_for_element(Selectors.CART_LIST)

    # -------------------------------------------------------------------------
    # Sorting and Menu
    # -------------------------------------------------------------------------

    def sort_by(self, label: str) -> "ProductPage":
        """
        Sort products using the dropdown.

        Args:
            label: Visible option label, e.g. "Price (low to high)".
        """
        self.select_dropdown_option(Selectors.SORT_DROPDOWN, label)
        logger.info("Products sorted by: %s", label)
        return self

    def logout(self) -> None:
        self.click(Selectors.MENU_BUTTON)
        self.wait_for_element(Selectors.LOGOUT_LINK)
        self.click(Selectors.LOGOUT_LINK)
