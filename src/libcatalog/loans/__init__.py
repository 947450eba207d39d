"""Loan registry module.

Tracks books currently lent to customers and their due dates.
"""

from .schemas import Loan
from .manager import LoanRegistry, SECONDS_PER_DAY

__all__ = [
    "LoanRegistry",
    "Loan",
    "SECONDS_PER_DAY",
]
