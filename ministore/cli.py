import argparse
import logging
import math
from typing import Callable, Optional, Sequence

import uvicorn

from ministore.config import get_settings
from ministore.dependencies import get_ledger
from ministore.services.inventory_service import (
    InventoryLedger,
    InventoryError,
    InvalidInputError
)
from ministore.utils.formatting import (
    format_currency,
    format_inventory,
    format_money,
    format_product_line,
    format_receipt,
    parse_int,
    parse_price
)

logger = logging.getLogger(__name__)

MENU = """--- INVENTORY MANAGEMENT ---
1. Add product
2. List inventory
3. Buy product
4. Show statistics
5. Search product by name
0. Exit (Show final receipt)"""

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class MenuShell:
    """
    Interactive menu over an inventory ledger.

    Every prompt that expects a number keeps asking until the answer
    is valid. End of input at any prompt abandons the current operation
    without touching the ledger; at the main menu it exits.
    """

    def __init__(
        self,
        ledger: InventoryLedger,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.ledger = ledger
        self._input = input_fn or input
        self._output = output_fn or print
        self.actions = {
            1: self.add_product,
            2: self.list_inventory,
            3: self.buy_product,
            4: self.show_statistics,
            5: self.search_product,
        }

    def run(self) -> int:
        """Run the menu loop until the user exits. Returns the exit code."""
        while True:
            self._output(MENU)
            answer = self._ask("Choose an option: ")
            if answer is None:
                option = 0
            else:
                try:
                    option = int(answer.strip())
                except ValueError:
                    self._output("Invalid input. Please enter a number.")
                    continue

            if option == 0:
                self.show_final_receipt()
                return 0

            action = self.actions.get(option)
            if action is None:
                self._output("Invalid option. Please try again.")
                continue
            action()

    def add_product(self) -> None:
        name = self._ask("Enter the product name: ")
        if name is None or not name.strip():
            self._output("Name cannot be empty.")
            return

        if self.ledger.find_by_name(name) is not None:
            self._output("The product already exists in the inventory.")
            return

        price = self._ask_number(
            "Enter the product price (e.g. 5,500 or 5.500): ",
            parse_price,
            lambda value: math.isfinite(value) and value > 0,
            invalid="Invalid price. Please enter a valid number.",
            out_of_range="The price must be a positive number.",
        )
        if price is None:
            return

        stock = self._ask_number(
            "Enter the initial stock: ",
            parse_int,
            lambda value: value >= 0,
            invalid="Invalid stock. Please enter an integer.",
            out_of_range="Stock cannot be negative. Please enter a non-negative integer.",
        )
        if stock is None:
            return

        try:
            self.ledger.add_product(name, price, stock)
        except InventoryError as e:
            self._output(f"Error: {e}")
            return
        self._output("Product added successfully.")

    def list_inventory(self) -> None:
        self._output(format_inventory(self.ledger.list_inventory()))

    def buy_product(self) -> None:
        if len(self.ledger) == 0:
            self._output("The inventory is empty. Cannot buy.")
            return

        while True:
            self._output(format_inventory(self.ledger.list_inventory()))
            name = self._ask("Enter the name of the product to buy: ")
            if name is None:
                return
            if not name.strip():
                self._output("The name cannot be empty.")
                continue
            if self.ledger.find_by_name(name) is None:
                self._output(f"The product '{name}' does not exist. Please try again.")
                continue
            break

        product = self.ledger.get_product(name)

        while True:
            answer = self._ask("Enter the quantity to buy: ")
            if answer is None:
                return
            try:
                quantity = parse_int(answer)
            except InvalidInputError:
                self._output("Invalid quantity. Please enter an integer.")
                continue
            if quantity <= 0:
                self._output("The quantity must be a positive number.")
            elif quantity > product.stock:
                self._output(f"Insufficient stock. Available stock: {product.stock}")
            else:
                break

        confirmation = self._ask(
            f"Confirm the purchase of {quantity} of {product.name}? [y/n]: "
        )
        if confirmation is None or confirmation.strip().lower() not in ("y", "yes"):
            self._output("Purchase canceled.")
            return

        try:
            subtotal = self.ledger.purchase(product.name, quantity)
        except InventoryError as e:
            self._output(f"Error: {e}")
            return
        self._output(f"Purchase successful.\nSubtotal: {format_money(subtotal)}")

    def show_statistics(self) -> None:
        stats = self.ledger.statistics()
        if stats is None:
            self._output("No products to show statistics for.")
            return

        self._output(
            "--- STATISTICS ---\n"
            f"Cheapest product: {stats.cheapest.name} "
            f"({format_currency(stats.cheapest.price)})\n"
            f"Most expensive product: {stats.most_expensive.name} "
            f"({format_currency(stats.most_expensive.price)})"
        )

    def search_product(self) -> None:
        query = self._ask("Enter the name (or part of it) of the product to search: ")
        if query is None or not query.strip():
            return

        matches = self.ledger.search_by_name(query)
        lines = ["--- SEARCH RESULTS ---"]
        if matches:
            lines.extend(format_product_line(p) for p in matches)
        else:
            lines.append("No products were found that match the search.")
        self._output("\n".join(lines))

    def show_final_receipt(self) -> None:
        self._output(format_receipt(self.ledger.total_sales()))

    def _ask(self, prompt: str) -> Optional[str]:
        try:
            return self._input(prompt)
        except EOFError:
            return None

    def _ask_number(self, prompt, parse, accept, invalid, out_of_range):
        # Re-prompt until the answer parses and is in range; None means abandoned
        while True:
            answer = self._ask(prompt)
            if answer is None:
                return None
            try:
                value = parse(answer)
            except InvalidInputError:
                self._output(invalid)
                continue
            if accept(value):
                return value
            self._output(out_of_range)


def serve() -> None:
    settings = get_settings()
    uvicorn.run(
        "ministore.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ministore",
        description="Mini-store inventory manager."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level for the interactive shell (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("shell", help="Run the interactive menu (default)")
    subparsers.add_parser("serve", help="Serve the HTTP API with uvicorn")
    args = parser.parse_args(argv)

    if args.command == "serve":
        serve()
        return 0

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger.info("Starting interactive shell")
    return MenuShell(get_ledger()).run()


if __name__ == "__main__":
    raise SystemExit(main())
