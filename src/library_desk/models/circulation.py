"""
Circulation models for the Library Desk.

These models describe the outcome of circulation operations:
- CheckoutReceipt: a member borrowed a book
- ReturnReceipt: a member brought a book back, with any fine assessed
- Loan: a book a member currently holds, with the fine accrued so far

Fines are never stored on books or members. They are computed from the due
date whenever a receipt or loan is produced.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .book import Book


class CheckoutReceipt(BaseModel):
    """Result of a successful checkout."""

    isbn: str = Field(..., description="ISBN of the checked out book")
    title: str = Field(..., description="Title of the checked out book")
    member_id: str = Field(..., description="ID of the borrowing member")
    member_name: str = Field(..., description="Name of the borrowing member")
    checkout_date: date = Field(..., description="Date the book was checked out")
    due_date: date = Field(..., description="Date the book must be returned by")

    @model_validator(mode="after")
    def validate_dates(self) -> "CheckoutReceipt":
        """Ensure due date is after checkout date."""
        if self.due_date <= self.checkout_date:
            raise ValueError("Due date must be after checkout date")
        return self

    @property
    def loan_period_days(self) -> int:
        """Calculate the loan period in days."""
        return (self.due_date - self.checkout_date).days

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "isbn": "978-0743273565",
                "title": "The Great Gatsby",
                "member_id": "M001",
                "member_name": "Alice Smith",
                "checkout_date": "2024-02-01",
                "due_date": "2024-02-15",
            }
        }
    )


class ReturnReceipt(BaseModel):
    """
    Result of a successful return.

    ``fine_amount`` is the fine assessed at return time; it is zero for a
    book returned on or before its due date.
    """

    isbn: str = Field(..., description="ISBN of the returned book")
    title: str = Field(..., description="Title of the returned book")
    member_id: str = Field(..., description="ID of the returning member")
    member_name: str = Field(..., description="Name of the returning member")
    return_date: date = Field(..., description="Date the book was returned")
    due_date: date = Field(..., description="Date the book was due")
    days_overdue: int = Field(
        default=0,
        description="Number of full days the return was late",
        ge=0,
    )
    fine_amount: float = Field(
        default=0.0,
        description="Fine assessed for this return",
        ge=0.0,
    )

    @property
    def is_overdue(self) -> bool:
        """Check if the book came back late."""
        return self.days_overdue > 0

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "isbn": "978-0743273565",
                "title": "The Great Gatsby",
                "member_id": "M001",
                "member_name": "Alice Smith",
                "return_date": "2024-02-18",
                "due_date": "2024-02-15",
                "days_overdue": 3,
                "fine_amount": 1.5,
            }
        }
    )


class Loan(BaseModel):
    """A book currently checked out to a member, with its accrued fine."""

    book: Book
    days_overdue: int = Field(default=0, ge=0)
    fine_amount: float = Field(default=0.0, ge=0.0)

    @property
    def is_overdue(self) -> bool:
        """Check if the loan is past its due date."""
        return self.days_overdue > 0
