"""Flat-file persistence for books and loans."""

from .text_store import BookStore, LoanStore, TextStore

__all__ = [
    "TextStore",
    "BookStore",
    "LoanStore",
]
