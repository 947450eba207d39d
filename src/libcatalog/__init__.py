"""Catalog manager for a small library: books, active loans, flat-file stores."""

__version__ = "0.1.0"
