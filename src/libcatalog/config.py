"""Configuration management for libcatalog.

Loads configuration from environment variables and provides defaults.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


@dataclass
class Config:
    """Application configuration."""

    # Stores
    books_path: Path
    loans_path: Path

    # Lending
    default_loan_days: int

    # Logging
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            books_path=Path(
                os.environ.get("LIBCATALOG_BOOKS_FILE", "library_books.txt")
            ).expanduser(),
            loans_path=Path(
                os.environ.get("LIBCATALOG_LOANS_FILE", "library_loans.txt")
            ).expanduser(),
            default_loan_days=int(os.environ.get("LIBCATALOG_LOAN_DAYS", "14")),
            log_level=os.environ.get("LIBCATALOG_LOG_LEVEL", "WARNING").upper(),
        )

    def with_paths(
        self,
        books: Optional[Path] = None,
        loans: Optional[Path] = None,
    ) -> "Config":
        """Return a copy with the given store paths overridden."""
        return replace(
            self,
            books_path=books if books is not None else self.books_path,
            loans_path=loans if loans is not None else self.loans_path,
        )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
