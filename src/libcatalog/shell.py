"""Interactive numbered menu over a library session."""

import logging
from typing import Callable, Optional

import typer

from .catalog import Book
from .display import (
    console,
    describe_error,
    print_error,
    print_success,
    show_catalog,
    show_customer_loans,
    show_loans,
    show_search_results,
)
from .errors import LibraryError
from .library import Library

logger = logging.getLogger(__name__)

MENU_ITEMS = [
    "Add Book",
    "Remove Book",
    "List Books",
    "Search Books",
    "Lend Book",
    "Return Book",
    "List Loans",
    "Search Loans",
    "Exit",
]


class MenuShell:
    """Reads menu choices and runs them against a library until Exit."""

    def __init__(self, library: Library, default_loan_days: int = 14):
        """Initialize shell.

        Args:
            library: Open library session
            default_loan_days: Days offered by default when lending
        """
        self.library = library
        self.default_loan_days = default_loan_days
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_book,
            2: self.remove_book,
            3: self.list_books,
            4: self.search_books,
            5: self.lend_book,
            6: self.return_book,
            7: self.list_loans,
            8: self.search_loans,
        }

    def show_menu(self) -> None:
        """Print the numbered menu."""
        console.print()
        for number, label in enumerate(MENU_ITEMS, 1):
            console.print(f"[cyan]{number}.[/cyan] {label}")

    def read_choice(self) -> Optional[int]:
        """Read a menu choice; None for Exit or anything unrecognised."""
        raw = typer.prompt("Enter your choice").strip()
        try:
            choice = int(raw)
        except ValueError:
            return None
        return choice if choice in self._actions else None

    def run(self) -> None:
        """Run the menu loop until the user picks Exit.

        Library errors and invalid field values are reported and the loop
        continues.
        """
        while True:
            self.show_menu()
            choice = self.read_choice()
            if choice is None:
                logger.debug("Leaving menu")
                return
            try:
                self._actions[choice]()
            except (LibraryError, ValueError) as e:
                print_error(describe_error(e))

    # -------------------------------------------------------------------------
    # Book Actions
    # -------------------------------------------------------------------------

    def add_book(self) -> None:
        title = _prompt_token("Enter title")
        author = _prompt_token("Enter author")
        isbn = _prompt_token("Enter ISBN")
        book = self.library.catalog.add(Book(title=title, author=author, isbn=isbn))
        print_success(f"Book added: {book}")

    def remove_book(self) -> None:
        isbn = _prompt_token("Enter ISBN of the book to remove")
        self.library.catalog.remove(isbn)
        print_success(f"Book with ISBN {isbn} removed.")

    def list_books(self) -> None:
        show_catalog(self.library.catalog.list_books())

    def search_books(self) -> None:
        query = typer.prompt("Enter search query (title or author)", default="", show_default=False)
        show_search_results(self.library.catalog.search(query))

    # -------------------------------------------------------------------------
    # Loan Actions
    # -------------------------------------------------------------------------

    def lend_book(self) -> None:
        customer_name = typer.prompt("Enter customer name").strip()
        isbn = _prompt_token("Enter ISBN of the book to lend")
        days = typer.prompt("Enter days to due", type=int, default=self.default_loan_days)
        loan = self.library.loans.lend(customer_name, isbn, days)
        print_success(f"Book {loan.isbn} lent to {loan.customer_name}.")

    def return_book(self) -> None:
        customer_name = typer.prompt("Enter customer name").strip()
        isbn = _prompt_token("Enter ISBN of the book to return")
        self.library.loans.return_loan(customer_name, isbn)
        print_success(f"Book {isbn} returned by {customer_name}.")

    def list_loans(self) -> None:
        show_loans(self.library.loans.list_loans())

    def search_loans(self) -> None:
        customer_name = typer.prompt("Enter customer name for loan search").strip()
        show_customer_loans(customer_name, self.library.loans.search_by_customer(customer_name))


def _prompt_token(text: str) -> str:
    """Prompt for a single-token field."""
    return typer.prompt(text).strip()

