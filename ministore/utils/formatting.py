import re
from typing import Iterable, Optional

from ministore.config import get_settings
from ministore.models.product import Product
from ministore.services.inventory_service import InvalidInputError

# "5.500" style: a dot followed by exactly three digits
THOUSANDS_DOT_PATTERN = re.compile(r"\d+\.\d{3}")
# Plain decimal: optional sign, digits, optional fraction
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")
INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def format_currency(value: float, decimals: Optional[int] = None) -> str:
    """
    Format an amount with a period decimal separator and no grouping.

    Uses PRICE_DECIMALS from settings unless decimals is given,
    e.g. 2.4 -> "2.4", 1234.5 -> "1234.5".
    """
    if decimals is None:
        decimals = get_settings().PRICE_DECIMALS
    return f"{value:.{decimals}f}"


def format_money(value: float) -> str:
    """Format an amount prefixed with the configured currency symbol."""
    return f"{get_settings().CURRENCY_SYMBOL}{format_currency(value)}"


def format_product_line(product: Product) -> str:
    return (
        f"Product: {product.name} | Price: {format_currency(product.price)} "
        f"| Stock: {product.stock}"
    )


def format_inventory(products: Iterable[Product]) -> str:
    """Render the inventory listing, or the empty-inventory message."""
    lines = [format_product_line(p) for p in products]
    if not lines:
        return "The inventory is empty."
    return "\n".join(["--- INVENTORY ---", *lines])


def format_receipt(total_sales: float) -> str:
    return (
        "Thank you for using the Mini-Store.\n"
        f"Total accumulated sales: {format_money(total_sales)}"
    )


def parse_price(text: str, thousands_dot: Optional[bool] = None) -> float:
    """
    Parse a typed price.

    Commas are always dropped. When the thousands-dot heuristic is on
    (THOUSANDS_DOT_HEURISTIC, or the thousands_dot argument), a value
    such as "5.500" is read as 5500.

    Raises:
        InvalidInputError: If the text is not a number
    """
    if thousands_dot is None:
        thousands_dot = get_settings().THOUSANDS_DOT_HEURISTIC

    cleaned = text.strip().replace(",", "")
    if thousands_dot and THOUSANDS_DOT_PATTERN.fullmatch(cleaned):
        cleaned = cleaned.replace(".", "")

    if not DECIMAL_PATTERN.fullmatch(cleaned):
        raise InvalidInputError(f"Invalid price: {text!r}")
    return float(cleaned)


def parse_int(text: str) -> int:
    """
    Parse a typed whole number.

    Raises:
        InvalidInputError: If the text is not an integer
    """
    cleaned = text.strip()
    if not INTEGER_PATTERN.fullmatch(cleaned):
        raise InvalidInputError(f"Invalid integer: {text!r}")
    return int(cleaned)
