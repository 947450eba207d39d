"""Library session: both stores opened together and saved together.

A session loads the book and loan stores when it opens and writes them
back when it closes cleanly. Nothing is written in between, so changes
made since opening are lost if the session ends with an exception.
"""

import logging
import time
from contextlib import contextmanager
from typing import Callable, Generator, Optional

from .catalog import BookCatalog
from .config import Config, get_config
from .loans import LoanRegistry
from .store import BookStore, LoanStore, TextStore

logger = logging.getLogger(__name__)


class Library:
    """Book catalog and loan registry backed by their stores."""

    def __init__(
        self,
        book_store: BookStore,
        loan_store: LoanStore,
        clock: Callable[[], float] = time.time,
    ):
        """Load the catalog and the registry.

        Args:
            book_store: Store holding the books
            loan_store: Store holding the active loans
            clock: Wall clock used for due dates

        Raises:
            StoreError: If either store cannot be read
        """
        self.catalog = BookCatalog(book_store)
        self.loans = LoanRegistry(loan_store, clock=clock)
        logger.debug(
            "Opened library with %d books and %d loans",
            len(self.catalog),
            len(self.loans),
        )

    @classmethod
    def from_config(
        cls,
        config: Optional[Config] = None,
        clock: Callable[[], float] = time.time,
    ) -> "Library":
        """Open the stores named by the configuration."""
        config = config or get_config()
        return cls(BookStore(config.books_path), LoanStore(config.loans_path), clock=clock)

    def save(self) -> None:
        """Write books, then loans, back to their stores."""
        self.catalog.save()
        self.loans.save()


@contextmanager
def open_library(
    config: Optional[Config] = None,
    clock: Callable[[], float] = time.time,
) -> Generator[Library, None, None]:
    """Open a library session and save it when the block exits cleanly.

    Args:
        config: Configuration naming the stores; defaults to the global one
        clock: Wall clock used for due dates

    Yields:
        Loaded library
    """
    library = Library.from_config(config, clock=clock)
    yield library
    library.save()


def initialize_stores(config: Optional[Config] = None) -> list[TextStore]:
    """Create empty store files for any store that does not exist yet.

    Returns:
        Stores that were created
    """
    config = config or get_config()
    stores = [BookStore(config.books_path), LoanStore(config.loans_path)]
    return [store for store in stores if store.initialize()]
