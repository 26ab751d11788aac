"""
Member model for the Library Desk.

A member is a registered borrower. The member keeps the ISBNs of the books
currently checked out to them; the book records themselves live in the
book registry.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Member(BaseModel):
    """
    Represents a library member who can borrow books.

    ``borrowed_isbns`` is kept in checkout order and never holds the same
    ISBN twice.
    """

    member_id: str = Field(
        ...,
        description="Unique identifier for the member",
        min_length=1,
        max_length=32,
        examples=["M001", "M002"],
    )

    name: str = Field(
        ...,
        description="Full name of the member",
        min_length=1,
        max_length=200,
        examples=["Alice Smith", "Bob Johnson"],
    )

    borrowed_isbns: list[str] = Field(
        default_factory=list,
        description="ISBNs of the books the member currently has checked out",
    )

    @field_validator("member_id", "name")
    @classmethod
    def require_text(cls, v: str) -> str:
        """Strip whitespace and reject blank values."""
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("borrowed_isbns")
    @classmethod
    def remove_duplicates(cls, v: list[str]) -> list[str]:
        """Remove duplicate ISBNs while preserving order."""
        return list(dict.fromkeys(v))

    @property
    def loan_count(self) -> int:
        """Number of books currently checked out."""
        return len(self.borrowed_isbns)

    def has_borrowed(self, isbn: str) -> bool:
        """Check whether the member currently holds the given book."""
        return isbn in self.borrowed_isbns

    def borrow(self, isbn: str) -> None:
        """Record a checkout; an ISBN already held is ignored."""
        if isbn not in self.borrowed_isbns:
            self.borrowed_isbns.append(isbn)

    def release(self, isbn: str) -> None:
        """Record a return; an ISBN not held is ignored."""
        if isbn in self.borrowed_isbns:
            self.borrowed_isbns.remove(isbn)

    def __str__(self) -> str:
        return (
            f"Member [ID: {self.member_id}, Name: '{self.name}', "
            f"Books Borrowed: {self.loan_count}]"
        )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "member_id": "M001",
                "name": "Alice Smith",
                "borrowed_isbns": ["978-0743273565"],
            }
        }
    )
