"""
Book model for the Library Desk.

A book is a single catalog entry keyed by ISBN. It is either available on
the shelf or checked out with a due date:

- Available: ``is_available`` is True and ``due_date`` is None
- Checked out: ``is_available`` is False and ``due_date`` is set

The two fields always move together; ``check_out`` and ``mark_returned``
are the only transitions.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Book(BaseModel):
    """
    Represents a book in the library catalog.

    Books are created by the "add book" action and are never deleted.
    Circulation state is changed only through ``check_out`` and
    ``mark_returned``.
    """

    isbn: str = Field(
        ...,
        description="Unique identifier of the book",
        min_length=1,
        max_length=32,
        examples=["978-0743273565", "X1"],
    )

    title: str = Field(
        ...,
        description="The title of the book",
        min_length=1,
        max_length=500,
        examples=["The Great Gatsby", "1984"],
    )

    author: str = Field(
        default="",
        description="Author of the book",
        max_length=200,
        examples=["F. Scott Fitzgerald", "George Orwell"],
    )

    is_available: bool = Field(
        default=True,
        description="Whether the book is on the shelf",
    )

    due_date: date | None = Field(
        default=None,
        description="Date the book must be returned by; set only while checked out",
    )

    @field_validator("isbn", "title", "author")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip surrounding whitespace from text fields."""
        return v.strip()

    @field_validator("isbn", "title")
    @classmethod
    def require_text(cls, v: str) -> str:
        """Reject identifiers and titles that are blank after stripping."""
        if not v:
            raise ValueError("must not be blank")
        return v

    @model_validator(mode="after")
    def validate_circulation_state(self) -> "Book":
        """Ensure the due date is set exactly when the book is checked out."""
        if self.is_available and self.due_date is not None:
            raise ValueError("An available book cannot have a due date")
        if not self.is_available and self.due_date is None:
            raise ValueError("A checked out book must have a due date")
        return self

    @property
    def status(self) -> str:
        """Human-readable circulation status."""
        if self.is_available:
            return "Available"
        return f"Checked Out (Due: {self.due_date.isoformat()})"

    def check_out(self, due_date: date) -> None:
        """
        Mark the book as checked out.

        Args:
            due_date: Date the book must be returned by

        Raises:
            ValueError: If the book is already checked out
        """
        if not self.is_available:
            raise ValueError(f"'{self.title}' is already checked out")
        self.is_available = False
        self.due_date = due_date

    def mark_returned(self) -> None:
        """Put the book back on the shelf and clear its due date."""
        self.is_available = True
        self.due_date = None

    def __str__(self) -> str:
        return (
            f"Book [ISBN: {self.isbn}, Title: '{self.title}', "
            f"Author: '{self.author}', Status: {self.status}]"
        )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "isbn": "978-0743273565",
                "title": "The Great Gatsby",
                "author": "F. Scott Fitzgerald",
                "is_available": False,
                "due_date": "2024-02-15",
            }
        }
    )
