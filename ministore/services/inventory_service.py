from dataclasses import dataclass
from typing import Dict, Optional, List
import logging
import math
import numbers
import threading

from ministore.models.product import Product

logger = logging.getLogger(__name__)


class InventoryError(Exception):
    """Base class for every error the inventory ledger raises."""
    pass


class InvalidInputError(InventoryError):
    """Exception raised for malformed or out-of-range input."""
    pass


class InvalidQuantityError(InvalidInputError):
    """Exception raised when a purchase quantity is not a positive integer."""
    pass


class DuplicateNameError(InventoryError):
    """Exception raised when a product with the same name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"The product '{name}' already exists in the inventory")


class ProductNotFoundError(InventoryError):
    """Exception raised when the requested product doesn't exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"The product '{name}' does not exist")


class InsufficientStockError(InventoryError):
    """Exception raised when there's not enough stock to fulfill a purchase."""

    def __init__(self, name: str, available: int, requested: int):
        self.name = name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock. Available: {available}, Requested: {requested}"
        )


@dataclass(frozen=True)
class PriceStatistics:
    """Cheapest and most expensive products at the time of the scan."""
    cheapest: Product
    most_expensive: Product


def _normalize(name: str) -> str:
    return name.strip().lower()


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class InventoryLedger:
    """
    In-memory ledger of products and accumulated sales.

    The ledger owns:
    - An insertion-ordered list of products (listing order, tie-breaks)
    - A case-insensitive name index for constant-time lookups
    - The running total of confirmed sales

    CONCURRENCY:
    ============
    add_product and purchase are check-then-write sequences
    (duplicate check then append, stock check then decrement). Every public
    operation runs under a single re-entrant lock so that callers on the
    API's worker threads never observe a half-applied update.
    """

    def __init__(self):
        self._products: List[Product] = []
        self._index: Dict[str, Product] = {}
        self._total_sales = 0.0
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._products)

    def locked(self) -> threading.RLock:
        """Hold the ledger lock across several calls, e.g. purchase then read back."""
        return self._lock

    def add_product(self, name: str, price: float, stock: int) -> Product:
        """
        Add a new product to the inventory.

        Args:
            name: Product name, non-blank; surrounding whitespace is dropped
            price: Unit price, must be positive
            stock: Initial stock, must be a non-negative integer

        Returns:
            A copy of the stored product

        Raises:
            InvalidInputError: If any attribute is malformed or out of range
            DuplicateNameError: If the name already exists (case-insensitive)
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidInputError("Name cannot be empty")
        if (
            not isinstance(price, numbers.Real)
            or isinstance(price, bool)
            or not math.isfinite(price)
            or price <= 0
        ):
            raise InvalidInputError("The price must be a positive number")
        if not _is_integer(stock) or stock < 0:
            raise InvalidInputError("Stock cannot be negative")

        name = name.strip()
        key = _normalize(name)

        with self._lock:
            if key in self._index:
                logger.warning(f"Rejected duplicate product '{name}'")
                raise DuplicateNameError(name)

            product = Product(name=name, price=float(price), stock=int(stock))
            self._products.append(product)
            self._index[key] = product

        logger.info(f"Product '{name}' added (price={price}, stock={stock})")
        return product.copy()

    def list_inventory(self) -> List[Product]:
        """Return copies of all products in insertion order."""
        with self._lock:
            return [p.copy() for p in self._products]

    def find_by_name(self, query: str) -> Optional[int]:
        """
        Find the position of a product by case-insensitive exact name.

        Returns:
            Index into the insertion order, or None if not found
        """
        if not isinstance(query, str):
            return None
        with self._lock:
            product = self._index.get(_normalize(query))
            if product is None:
                return None
            return self._products.index(product)

    def get_product(self, name: str) -> Product:
        """Return a copy of the product matching name, or raise ProductNotFoundError."""
        with self._lock:
            return self._lookup(name).copy()

    def search_by_name(self, substring: str) -> List[Product]:
        """
        Case-insensitive substring search over product names.

        Matches are returned in original product order. An empty
        result is a valid answer.
        """
        needle = substring.lower()
        with self._lock:
            return [p.copy() for p in self._products if needle in p.key]

    def purchase(self, name: str, quantity: int) -> float:
        """
        Purchase a quantity of a product.

        Algorithm:
        1. Acquire the ledger lock
        2. Resolve the product by case-insensitive name
        3. Validate the quantity and check stock availability
        4. Deduct stock and add the subtotal to total sales
        5. Release the lock

        Args:
            name: Product name (case-insensitive)
            quantity: Number of units to buy, must be positive

        Returns:
            Subtotal charged for this purchase (quantity * price)

        Raises:
            ProductNotFoundError: If product doesn't exist
            InvalidQuantityError: If quantity is not a positive integer
            InsufficientStockError: If not enough stock available
        """
        with self._lock:
            product = self._lookup(name)

            if not _is_integer(quantity) or quantity <= 0:
                logger.warning(f"Rejected purchase of {quantity!r} x '{product.name}'")
                raise InvalidQuantityError("The quantity must be a positive number")

            if product.stock < quantity:
                logger.warning(
                    f"Insufficient stock for '{product.name}': "
                    f"available={product.stock}, requested={quantity}"
                )
                raise InsufficientStockError(product.name, product.stock, quantity)

            subtotal = quantity * product.price
            product.stock -= quantity
            self._total_sales += subtotal

        logger.info(f"Purchased {quantity} x '{product.name}' for {subtotal}")
        return subtotal

    def statistics(self) -> Optional[PriceStatistics]:
        """
        Find the cheapest and most expensive products in one scan.

        Only strictly lower or higher prices replace the running extremes,
        so on ties the earliest product wins.

        Returns:
            PriceStatistics, or None if the inventory is empty
        """
        with self._lock:
            if not self._products:
                return None

            cheapest = most_expensive = self._products[0]
            for product in self._products[1:]:
                if product.price < cheapest.price:
                    cheapest = product
                if product.price > most_expensive.price:
                    most_expensive = product

            return PriceStatistics(
                cheapest=cheapest.copy(),
                most_expensive=most_expensive.copy(),
            )

    def total_sales(self) -> float:
        """Total revenue of all confirmed purchases since the ledger was created."""
        with self._lock:
            return self._total_sales

    def _lookup(self, name: str) -> Product:
        if not isinstance(name, str):
            raise ProductNotFoundError(str(name))
        product = self._index.get(_normalize(name))
        if product is None:
            raise ProductNotFoundError(name)
        return product
