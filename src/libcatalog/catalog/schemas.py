"""Pydantic schemas for catalog books."""

from pydantic import BaseModel, field_validator


def single_token(value: str) -> str:
    """Check that a stored field is one non-empty, whitespace-free token.

    Stores are whitespace-delimited without quoting, so a value holding
    whitespace would split into several fields on reload.
    """
    if not value:
        raise ValueError("must not be empty")
    if any(ch.isspace() for ch in value):
        raise ValueError("must not contain whitespace")
    return value


class Book(BaseModel):
    """A book in the catalog. Identity is the ISBN."""

    title: str
    author: str
    isbn: str

    model_config = {"frozen": True}

    @field_validator("title", "author", "isbn")
    @classmethod
    def fields_are_tokens(cls, v: str) -> str:
        """Validate each field is a single token."""
        return single_token(v)

    def __str__(self) -> str:
        return f"{self.title} by {self.author} (ISBN: {self.isbn})"
