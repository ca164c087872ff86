"""
Centralised test constants for the SauceDemo suites.

Keep selectors, users and messages here instead of hard-coding them in
page objects and tests.
"""


class TestUsers:
    """SauceDemo accounts for the various login scenarios."""

    __test__ = False

    STANDARD_USER = "standard_user"
    STANDARD_PASSWORD = "secret_sauce"
    LOCKED_USER = "locked_out_user"
    INVALID_USER = "invalid_user"
    INVALID_PASSWORD = "wrong_password"


class URLPaths:
    """Paths relative to the application base URL."""

    LOGIN = "/"
    PRODUCTS = "/inventory.html"
    CART = "/cart.html"
    CHECKOUT = "/checkout-step-one.html"


class Selectors:
    """CSS selectors shared across page objects."""

    # Login form
    USERNAME_INPUT = "#user-name"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#login-button"
    ERROR_MESSAGE = "[data-test='error']"

    # Inventory
    PRODUCTS_CONTAINER = ".inventory_container"
    INVENTORY_ITEM = ".inventory_item"
    INVENTORY_ITEM_NAME = ".inventory_item_name"
    INVENTORY_ITEM_PRICE = ".inventory_item_price"
    SORT_DROPDOWN = ".product_sort_container"

    # Header
    CART_BADGE = ".shopping_cart_badge"
    CART_LINK = ".shopping_cart_link"
    MENU_BUTTON = "#react-burger-menu-btn"
    LOGOUT_LINK = "#logout_sidebar_link"

    # Cart
    CART_LIST = ".cart_list"
    CART_ITEM = ".cart_item"
    CART_ITEM_NAME = ".inventory_item_name"
    CONTINUE_SHOPPING_BUTTON = "#continue-shopping"
    CHECKOUT_BUTTON = "#checkout"


class AssertionMessages:
    INVALID_STATUS_CODE = "Response status code does not match expected value"
    MISSING_RESPONSE_FIELD = "Response is missing required field"
    INVALID_FIELD_VALUE = "Response field value does not match expected"
    CART_COUNT_MISMATCH = "Cart item count does not match expected"
    WRONG_PAGE = "Expected to be on different page"


class TestData:
    """Product data used across shopping scenarios."""

    __test__ = False

    PRODUCT_BACKPACK = "Sauce Labs Backpack"
    PRODUCT_BIKE_LIGHT = "Sauce Labs Bike Light"
    SORT_PRICE_LOW_TO_HIGH = "Price (low to high)"
    SORT_PRICE_HIGH_TO_LOW = "Price (high to low)"
    SORT_NAME_Z_TO_A = "Name (Z to A)"
    INVENTORY_SIZE = 6
