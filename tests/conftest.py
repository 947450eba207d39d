"""Pytest configuration and shared fixtures.

This module provides fixtures for testing libcatalog, including
temporary stores, a fixed clock and CLI runners.
"""

from pathlib import Path
from typing import Generator

import pytest

from libcatalog.catalog import Book, BookCatalog
from libcatalog.config import Config, reset_config
from libcatalog.loans import LoanRegistry
from libcatalog.store import BookStore, LoanStore

# 2025-01-01 00:00:00 UTC
FIXED_NOW = 1735689600


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture
def books_path(tmp_path: Path) -> Path:
    """Path of an empty books store."""
    path = tmp_path / "library_books.txt"
    path.touch()
    return path


@pytest.fixture
def loans_path(tmp_path: Path) -> Path:
    """Path of an empty loans store."""
    path = tmp_path / "library_loans.txt"
    path.touch()
    return path


@pytest.fixture
def book_store(books_path: Path) -> BookStore:
    """Book store backed by an empty file."""
    return BookStore(books_path)


@pytest.fixture
def loan_store(loans_path: Path) -> LoanStore:
    """Loan store backed by an empty file."""
    return LoanStore(loans_path)


@pytest.fixture
def config(books_path: Path, loans_path: Path) -> Config:
    """Configuration pointing at the temporary stores."""
    return Config(
        books_path=books_path,
        loans_path=loans_path,
        default_loan_days=14,
        log_level="WARNING",
    )


@pytest.fixture(autouse=True)
def clean_config(monkeypatch) -> Generator[None, None, None]:
    """Keep the global config and LIBCATALOG_* variables out of tests."""
    for name in (
        "LIBCATALOG_BOOKS_FILE",
        "LIBCATALOG_LOANS_FILE",
        "LIBCATALOG_LOAN_DAYS",
        "LIBCATALOG_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def fixed_now() -> int:
    """Epoch seconds returned by the fixed clock."""
    return FIXED_NOW


@pytest.fixture
def fixed_clock(fixed_now: int):
    """Clock that always returns fixed_now."""
    return lambda: float(fixed_now)


@pytest.fixture
def catalog(book_store: BookStore) -> BookCatalog:
    """Empty catalog."""
    return BookCatalog(book_store)


@pytest.fixture
def registry(loan_store: LoanStore, fixed_clock) -> LoanRegistry:
    """Empty loan registry on a fixed clock."""
    return LoanRegistry(loan_store, clock=fixed_clock)


@pytest.fixture
def sample_books() -> list[Book]:
    """Books in a non-alphabetical insertion order."""
    return [
        Book(title="Neuromancer", author="Gibson", isbn="9780441569595"),
        Book(title="Dune", author="Herbert", isbn="9780441172719"),
        Book(title="Solaris", author="Lem", isbn="9780156027601"),
        Book(title="Hyperion", author="Simmons", isbn="9780553283686"),
    ]


@pytest.fixture
def populated_catalog(catalog: BookCatalog, sample_books: list[Book]) -> BookCatalog:
    """Catalog holding the sample books."""
    for book in sample_books:
        catalog.add(book)
    return catalog


# ============================================================================
# CLI Testing Fixtures
# ============================================================================


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner."""
    from typer.testing import CliRunner
    return CliRunner()


@pytest.fixture
def cli_app():
    """Get the CLI app for testing."""
    from libcatalog.cli import app
    return app


@pytest.fixture
def store_args(books_path: Path, loans_path: Path) -> list[str]:
    """Global CLI options pointing at the temporary stores."""
    return ["--books", str(books_path), "--loans", str(loans_path)]
