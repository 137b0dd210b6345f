from typing import Tuple


class Product:
    """
    Product model representing an item tracked by the inventory ledger.

    Attributes:
        name: Product name, stored exactly as entered
        price: Unit price (positive, fixed at creation)
        stock: Available quantity (non-negative)
    """
    __slots__ = ("_name", "_price", "stock")

    def __init__(self, name: str, price: float, stock: int = 0):
        self._name = name
        self._price = price
        self.stock = stock

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> float:
        return self._price

    @property
    def key(self) -> str:
        """Lookup key used for case-insensitive name comparisons."""
        return self._name.lower()

    def copy(self) -> "Product":
        return Product(self._name, self._price, self.stock)

    def as_tuple(self) -> Tuple[str, float, int]:
        return (self._name, self._price, self.stock)

    def __eq__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return f"<Product(name='{self._name}', price={self._price}, stock={self.stock})>"
