"""Catalog manager for book operations."""

import logging
from typing import TYPE_CHECKING, Iterator, Optional

from ..errors import BookNotFoundError, DuplicateISBNError
from .schemas import Book

if TYPE_CHECKING:
    from ..store.text_store import BookStore

logger = logging.getLogger(__name__)


class BookCatalog:
    """Owns the books of the library, in insertion order."""

    def __init__(self, store: "BookStore"):
        """Initialize the catalog from its store.

        Args:
            store: Book store to load from and save to
        """
        self.store = store
        self._books: list[Book] = store.load()

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books))

    def __contains__(self, isbn: object) -> bool:
        return isinstance(isbn, str) and self.find_by_isbn(isbn) is not None

    @property
    def books(self) -> list[Book]:
        """Books in catalog order."""
        return list(self._books)

    def add(self, book: Book) -> Book:
        """Add a book to the catalog.

        Args:
            book: Book to add

        Returns:
            The added book

        Raises:
            DuplicateISBNError: If a book with the same ISBN exists
        """
        if self.find_by_isbn(book.isbn) is not None:
            raise DuplicateISBNError(book.isbn)

        self._books.append(book)
        logger.info("Added book %s (%s)", book.isbn, book.title)
        return book

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        """Get a book by ISBN.

        Args:
            isbn: ISBN to look up

        Returns:
            Book or None
        """
        for book in self._books:
            if book.isbn == isbn:
                return book
        return None

    def search(self, query: str) -> list[Book]:
        """Find books whose title or author contains the query.

        Matching is case-sensitive. An empty query matches every book.

        Args:
            query: Substring to look for

        Returns:
            Matching books in catalog order
        """
        return [
            book for book in self._books
            if query in book.title or query in book.author
        ]

    def remove(self, isbn: str) -> list[Book]:
        """Remove every book with the given ISBN.

        Args:
            isbn: ISBN to remove

        Returns:
            Removed books

        Raises:
            BookNotFoundError: If no book has that ISBN
        """
        removed = [book for book in self._books if book.isbn == isbn]
        if not removed:
            raise BookNotFoundError(isbn)

        self._books = [book for book in self._books if book.isbn != isbn]
        logger.info("Removed book %s", isbn)
        return removed

    def list_books(self) -> list[Book]:
        """List books sorted by title.

        Equal titles keep their catalog order. The catalog itself is not
        reordered.
        """
        return sorted(self._books, key=lambda book: book.title)

    def save(self) -> int:
        """Write the catalog to its store in catalog order."""
        return self.store.save(self._books)
