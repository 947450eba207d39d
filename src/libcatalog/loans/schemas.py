"""Pydantic schemas for active loans."""

import time
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ..catalog.schemas import single_token


class Loan(BaseModel):
    """An active loan of a book to a customer.

    The ISBN is a plain string and is not checked against the catalog.
    """

    customer_name: str
    isbn: str
    due_at: int  # epoch seconds

    model_config = {"frozen": True}

    @field_validator("customer_name", "isbn")
    @classmethod
    def fields_are_tokens(cls, v: str) -> str:
        """Validate each text field is a single token."""
        return single_token(v)

    @property
    def due_date(self) -> datetime:
        """Due moment as a local datetime.

        Raises OverflowError, OSError or ValueError for epochs outside the
        platform's datetime range.
        """
        return datetime.fromtimestamp(self.due_at)

    def is_overdue(self, now: Optional[float] = None) -> bool:
        """Check if the due moment has passed."""
        if now is None:
            now = time.time()
        return self.due_at < now
