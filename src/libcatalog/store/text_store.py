"""Flat text stores for books and loans.

Each store is a line-oriented file with whitespace-delimited fields,
one record per line:

    books:  <title> <author> <isbn>
    loans:  <customer_name> <isbn> <due_epoch_seconds>
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, Iterable, TypeVar, Union

from ..catalog.schemas import Book
from ..errors import StoreError, StoreFormatError
from ..loans.schemas import Loan

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class TextStore(ABC, Generic[RecordT]):
    """Base class for a single flat-file store."""

    kind: str = "unknown"
    field_count: int = 0

    def __init__(self, path: Union[str, Path]):
        """Initialize store.

        Args:
            path: Path to the store file
        """
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    @abstractmethod
    def parse_record(self, fields: list[str], line_number: int) -> RecordT:
        """Build a record from the fields of one line.

        Args:
            fields: Exactly ``field_count`` whitespace-free tokens
            line_number: 1-based line number, for error reporting

        Returns:
            Parsed record
        """
        pass

    @abstractmethod
    def format_record(self, record: RecordT) -> list[str]:
        """Split a record into the fields written on its line."""
        pass

    def exists(self) -> bool:
        """Check whether the store file exists."""
        return self.path.is_file()

    def initialize(self) -> bool:
        """Create an empty store file if none exists.

        Returns:
            True if a new file was created
        """
        if self.exists():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()
        except OSError as e:
            raise StoreError(
                f"Failed to create {self.kind} data file: {self.path}", path=self.path
            ) from e
        logger.info("Created empty %s store at %s", self.kind, self.path)
        return True

    def load(self) -> list[RecordT]:
        """Read every record from the store.

        Blank lines are skipped. Any other line must hold exactly
        ``field_count`` fields.

        Returns:
            Records in file order

        Raises:
            StoreError: If the file cannot be opened
            StoreFormatError: If a line is malformed or not valid UTF-8
        """
        try:
            with open(self.path, "rb") as f:
                raw_lines = f.read().splitlines()
        except OSError as e:
            raise StoreError(
                f"Failed to open {self.kind} data file for reading: {self.path}",
                path=self.path,
            ) from e

        records = []
        for line_number, raw_line in enumerate(raw_lines, 1):
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError as e:
                raise StoreFormatError(
                    self.path, line_number, "line is not valid UTF-8"
                ) from e
            fields = line.split()
            if not fields:
                continue
            if len(fields) != self.field_count:
                raise StoreFormatError(
                    self.path,
                    line_number,
                    f"expected {self.field_count} fields, found {len(fields)}",
                )
            records.append(self.parse_record(fields, line_number))

        logger.debug("Loaded %d %s records from %s", len(records), self.kind, self.path)
        return records

    def save(self, records: Iterable[RecordT]) -> int:
        """Overwrite the store with the given records, in order.

        Returns:
            Number of records written

        Raises:
            StoreError: If the file cannot be opened for writing
        """
        lines = [" ".join(self.format_record(record)) + "\n" for record in records]
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.writelines(lines)
        except OSError as e:
            raise StoreError(
                f"Failed to open {self.kind} data file for writing: {self.path}",
                path=self.path,
            ) from e

        logger.debug("Saved %d %s records to %s", len(lines), self.kind, self.path)
        return len(lines)


class BookStore(TextStore[Book]):
    """Store of catalog books."""

    kind = "books"
    field_count = 3

    def parse_record(self, fields: list[str], line_number: int) -> Book:
        title, author, isbn = fields
        return Book(title=title, author=author, isbn=isbn)

    def format_record(self, record: Book) -> list[str]:
        return [record.title, record.author, record.isbn]


class LoanStore(TextStore[Loan]):
    """Store of active loans."""

    kind = "loans"
    field_count = 3

    def parse_record(self, fields: list[str], line_number: int) -> Loan:
        customer_name, isbn, due = fields
        try:
            due_at = int(due)
        except ValueError:
            raise StoreFormatError(
                self.path, line_number, f"due date is not an integer: {due!r}"
            )
        return Loan(customer_name=customer_name, isbn=isbn, due_at=due_at)

    def format_record(self, record: Loan) -> list[str]:
        return [record.customer_name, record.isbn, str(record.due_at)]
