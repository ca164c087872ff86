"""Cart page object for the SauceDemo shopping cart."""

from __future__ import annotations

import logging

from qa_harness.constants import Selectors, URLPaths
from qa_harness.pages.base_page import BasePage
from qa_harness.pages.product_page import parse_price, product_slug

logger = logging.getLogger(__name__)


class CartPage(BasePage):
    """Page object for the shopping cart page."""

    URL_PATH = URLPaths.CART

    def navigate(self) -> "CartPage":
        self.navigate_to(self.URL_PATH)
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_cart_item_count(self) -> int:
        count = self.count_elements(Selectors.CART_ITEM)
        logger.info("Cart contains %s items", count)
        return count

    def get_cart_item_names(self) -> list[str]:
        names = self.locator(Selectors.CART_ITEM_NAME).all_text_contents()
        return [name.strip() for name in names]

    def get_cart_item_price(self, index: int) -> float:
        """
        Price of the cart item at zero-based ``index``.

        Raises:
            ValueError: If the price text is missing or malformed.
        """
        price = parse_price(self.get_text_by_index(Selectors.INVENTORY_ITEM_PRICE, index))
        logger.info("Cart item [%s] price: $%s", index, price)
        return price

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    def is_item_in_cart(self, name: str) -> bool:
        return name in self.get_cart_item_names()

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def remove_item(self, name: str) -> "CartPage":
        self.click(f"[data-test='remove-{product_slug(name)}']")
        return self

    def continue_shopping(self) -> None:
        self.click(Selectors.CONTINUE_SHOPPING_BUTTON)

    def checkout(self) -> None:
        """Start checkout and wait for the customer information step."""
        self.click(Selectors.CHECKOUT_BUTTON)
        self.wait_for_url(URLPaths.CHECKOUT)
