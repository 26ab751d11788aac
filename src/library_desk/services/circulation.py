"""
Circulation desk for the Library Desk.

The desk owns the book and member registries and is the only place where
circulation state changes:

1. **Checkouts**: an available book is lent to a member for the loan period
2. **Returns**: a borrowed book comes back, with a fine if it is overdue
3. **Reporting**: available books and each member's current loans

A checkout is recorded twice, as the book's due date and as the ISBN in the
member's borrowed set. Every operation validates before it mutates, so a
failed operation leaves both records untouched.
"""

import logging
from datetime import date, timedelta

from ..config import DeskConfig, get_config
from ..models.book import Book
from ..models.circulation import CheckoutReceipt, Loan, ReturnReceipt
from ..models.member import Member
from ..registry.book_registry import BookRegistry
from ..registry.member_registry import MemberRegistry
from ..registry.repository import LibraryError
from .clock import Clock, SystemClock

logger = logging.getLogger(__name__)


class CirculationError(LibraryError):
    """Raised when a circulation rule forbids an operation."""


class AlreadyCheckedOutError(CirculationError):
    """Raised when checking out a book that is not on the shelf."""

    def __init__(self, book: Book):
        super().__init__(f"Book '{book.title}' is already checked out (due {book.due_date})")
        self.isbn = book.isbn
        self.due_date = book.due_date


class NotBorrowedByMemberError(CirculationError):
    """Raised when returning a book the member does not hold."""

    def __init__(self, isbn: str, member_id: str):
        super().__init__(f"Member {member_id} has not borrowed book {isbn}")
        self.isbn = isbn
        self.member_id = member_id


class CirculationDesk:
    """
    Orchestrates checkouts, returns and reports over both registries.

    Args:
        books: Book registry; a new empty one is created if omitted
        members: Member registry; a new empty one is created if omitted
        clock: Source of "today"; defaults to the system clock
        config: Circulation policy; defaults to the global configuration
    """

    def __init__(
        self,
        books: BookRegistry | None = None,
        members: MemberRegistry | None = None,
        clock: Clock | None = None,
        config: DeskConfig | None = None,
    ):
        self.books = books if books is not None else BookRegistry()
        self.members = members if members is not None else MemberRegistry()
        self.clock = clock or SystemClock()
        self.config = config or get_config()

    @property
    def loan_period(self) -> timedelta:
        return timedelta(days=self.config.loan_period_days)

    # === Admin operations ===

    def add_book(self, isbn: str, title: str, author: str) -> Book:
        """Add a new book to the catalog. See ``BookRegistry.add``."""
        return self.books.add(isbn, title, author)

    def register_member(self, member_id: str, name: str) -> Member:
        """Register a new member. See ``MemberRegistry.register``."""
        return self.members.register(member_id, name)

    # === Fines ===

    def days_overdue(self, book: Book, on: date | None = None) -> int:
        """
        Number of full days a checked out book is past its due date.

        A book is overdue only when ``on`` is strictly after the due date.
        Available books are never overdue.
        """
        if book.due_date is None:
            return 0
        on = on or self.clock.today()
        return max(0, (on - book.due_date).days)

    def calculate_fine(self, book: Book, on: date | None = None) -> float:
        """
        Calculate the fine accrued by a book so far.

        Returns:
            ``days_overdue * fine_per_day``, or 0.0 when not overdue
        """
        return self.days_overdue(book, on) * self.config.fine_per_day

    # === Transactions ===

    def check_out(self, isbn: str, member_id: str) -> CheckoutReceipt:
        """
        Lend a book to a member.

        Raises:
            BookNotFoundError: If the ISBN is unknown
            MemberNotFoundError: If the member ID is unknown
            AlreadyCheckedOutError: If the book is not on the shelf
        """
        book = self.books.lookup(isbn)
        member = self.members.lookup(member_id)

        if not book.is_available:
            logger.debug("Checkout of %s by %s refused: already checked out", isbn, member_id)
            raise AlreadyCheckedOutError(book)

        today = self.clock.today()
        due_date = today + self.loan_period
        book.check_out(due_date)
        member.borrow(book.isbn)

        logger.info("%s checked out %s, due %s", member.member_id, book.isbn, due_date)
        return CheckoutReceipt(
            isbn=book.isbn,
            title=book.title,
            member_id=member.member_id,
            member_name=member.name,
            checkout_date=today,
            due_date=due_date,
        )

    def return_book(self, isbn: str, member_id: str) -> ReturnReceipt:
        """
        Take a book back from a member and assess any fine.

        The fine is computed before the book's due date is cleared.

        Raises:
            BookNotFoundError: If the ISBN is unknown
            MemberNotFoundError: If the member ID is unknown
            NotBorrowedByMemberError: If the member does not hold the book
        """
        book = self.books.lookup(isbn)
        member = self.members.lookup(member_id)

        if not member.has_borrowed(book.isbn) or book.due_date is None:
            logger.debug("Return of %s by %s refused: not borrowed", isbn, member_id)
            raise NotBorrowedByMemberError(book.isbn, member.member_id)

        today = self.clock.today()
        due_date = book.due_date
        late_days = self.days_overdue(book, today)
        fine_amount = self.calculate_fine(book, today)

        book.mark_returned()
        member.release(book.isbn)

        if fine_amount > 0:
            logger.info(
                "%s returned %s %d day(s) late, fine %.2f",
                member.member_id,
                book.isbn,
                late_days,
                fine_amount,
            )
        else:
            logger.info("%s returned %s on time", member.member_id, book.isbn)

        return ReturnReceipt(
            isbn=book.isbn,
            title=book.title,
            member_id=member.member_id,
            member_name=member.name,
            return_date=today,
            due_date=due_date,
            days_overdue=late_days,
            fine_amount=fine_amount,
        )

    # === Reporting ===

    def list_available(self) -> list[Book]:
        """All books currently on the shelf."""
        return self.books.list_available()

    def list_member_loans(self, member_id: str) -> tuple[Member, list[Loan]]:
        """
        List the books a member holds with their fines accrued so far.

        Returns:
            The member and one ``Loan`` per borrowed book, in checkout order

        Raises:
            MemberNotFoundError: If the member ID is unknown
        """
        member = self.members.lookup(member_id)
        today = self.clock.today()
        loans = []
        for isbn in member.borrowed_isbns:
            book = self.books.lookup(isbn)
            loans.append(
                Loan(
                    book=book,
                    days_overdue=self.days_overdue(book, today),
                    fine_amount=self.calculate_fine(book, today),
                )
            )
        return member, loans
