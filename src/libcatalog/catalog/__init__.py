"""Book catalog module.

Provides functionality for:
- Adding and removing books by ISBN
- Exact ISBN lookup and title/author substring search
- Title-sorted listing
"""

from .schemas import Book
from .manager import BookCatalog

__all__ = [
    "BookCatalog",
    "Book",
]
