"""Exception hierarchy for catalog, loan and store operations."""

from pathlib import Path
from typing import Optional


class LibraryError(Exception):
    """Base error for all library operations."""

    pass


class DuplicateISBNError(LibraryError):
    """A book with the same ISBN is already in the catalog."""

    def __init__(self, isbn: str):
        self.isbn = isbn
        super().__init__(f"A book with ISBN {isbn} already exists.")


class NotFoundError(LibraryError):
    """The target of a remove or return does not exist."""

    pass


class BookNotFoundError(NotFoundError):
    """No book in the catalog has the given ISBN."""

    def __init__(self, isbn: str):
        self.isbn = isbn
        super().__init__(f"Book with ISBN {isbn} not found.")


class LoanNotFoundError(NotFoundError):
    """No active loan matches the customer and ISBN."""

    def __init__(self, customer_name: str, isbn: str):
        self.customer_name = customer_name
        self.isbn = isbn
        super().__init__(
            f"Book with ISBN {isbn} not found in the loans of {customer_name}."
        )


class StoreError(LibraryError):
    """A backing store could not be opened for reading or writing."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)


class StoreFormatError(StoreError):
    """A store line does not hold a well-formed record."""

    def __init__(self, path: Path, line_number: int, reason: str):
        self.line_number = line_number
        super().__init__(f"{path}:{line_number}: {reason}", path=path)
