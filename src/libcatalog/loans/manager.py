"""Loan registry for lend and return operations."""

import logging
import time
from typing import TYPE_CHECKING, Callable, Iterator

from ..errors import LoanNotFoundError
from .schemas import Loan

if TYPE_CHECKING:
    from ..store.text_store import LoanStore

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


class LoanRegistry:
    """Owns the active loans, in the order they were made.

    Loans are not checked against the catalog, and the same book may be
    lent any number of times.
    """

    def __init__(
        self,
        store: "LoanStore",
        clock: Callable[[], float] = time.time,
    ):
        """Initialize the registry from its store.

        Args:
            store: Loan store to load from and save to
            clock: Returns the current time in epoch seconds
        """
        self.store = store
        self.clock = clock
        self._loans: list[Loan] = store.load()

    def __len__(self) -> int:
        return len(self._loans)

    def __iter__(self) -> Iterator[Loan]:
        return iter(list(self._loans))

    @property
    def loans(self) -> list[Loan]:
        """Loans in registry order."""
        return list(self._loans)

    def lend(self, customer_name: str, isbn: str, days_to_due: int) -> Loan:
        """Record a new loan due ``days_to_due`` days from now.

        Args:
            customer_name: Borrowing customer
            isbn: ISBN of the lent book
            days_to_due: Days until due; zero and negative values are kept as is

        Returns:
            Created loan
        """
        now = int(self.clock())
        loan = Loan(
            customer_name=customer_name,
            isbn=isbn,
            due_at=now + days_to_due * SECONDS_PER_DAY,
        )
        self._loans.append(loan)
        logger.info("Lent %s to %s, due at %d", isbn, customer_name, loan.due_at)
        return loan

    def return_loan(self, customer_name: str, isbn: str) -> Loan:
        """Remove the first loan matching customer and ISBN.

        Args:
            customer_name: Borrowing customer
            isbn: ISBN of the returned book

        Returns:
            Removed loan

        Raises:
            LoanNotFoundError: If no loan matches
        """
        for index, loan in enumerate(self._loans):
            if loan.customer_name == customer_name and loan.isbn == isbn:
                del self._loans[index]
                logger.info("Returned %s from %s", isbn, customer_name)
                return loan
        raise LoanNotFoundError(customer_name, isbn)

    def search_by_customer(self, customer_name: str) -> list[Loan]:
        """Get loans whose customer name matches exactly."""
        return [loan for loan in self._loans if loan.customer_name == customer_name]

    def list_loans(self) -> list[Loan]:
        """List loans in registry order."""
        return list(self._loans)

    def save(self) -> int:
        """Write the loans to their store in registry order."""
        return self.store.save(self._loans)
