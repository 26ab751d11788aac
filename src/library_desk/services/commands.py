"""
Command dispatch for the Library Desk.

Every menu action is expressed as a validated command value and executed by
``dispatch``, which returns a structured ``CommandResult`` instead of
printing. This keeps text I/O out of the circulation desk:

1. INPUT: a command model validates and normalizes the raw fields
2. EXECUTION: the matching handler calls the desk
3. RESPONSE: success text plus a JSON-ready data payload, or an error
   result built from the desk's exception

No ``LibraryError`` escapes ``dispatch``; callers only have to look at
``CommandResult.is_error``.
"""

import logging
from collections.abc import Callable
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..observability import trace_command
from ..registry.repository import (
    BookNotFoundError,
    DuplicateError,
    LibraryError,
    MemberNotFoundError,
)
from .circulation import AlreadyCheckedOutError, CirculationDesk, NotBorrowedByMemberError

logger = logging.getLogger(__name__)


# =============================================================================
# COMMAND SCHEMAS
# =============================================================================


class _Command(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)


class ExitCommand(_Command):
    action: Literal["exit"] = "exit"


class ListAvailableCommand(_Command):
    action: Literal["list_available"] = "list_available"


class CheckOutCommand(_Command):
    action: Literal["check_out"] = "check_out"
    member_id: str = Field(..., min_length=1, description="Member borrowing the book")
    isbn: str = Field(..., min_length=1, description="ISBN of the book to check out")


class ReturnBookCommand(_Command):
    action: Literal["return_book"] = "return_book"
    member_id: str = Field(..., min_length=1, description="Member returning the book")
    isbn: str = Field(..., min_length=1, description="ISBN of the book being returned")


class ListLoansCommand(_Command):
    action: Literal["list_loans"] = "list_loans"
    member_id: str = Field(..., min_length=1, description="Member whose loans to list")


class AddBookCommand(_Command):
    action: Literal["add_book"] = "add_book"
    isbn: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    author: str = ""


class RegisterMemberCommand(_Command):
    action: Literal["register_member"] = "register_member"
    member_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


Command = Annotated[
    ExitCommand
    | ListAvailableCommand
    | CheckOutCommand
    | ReturnBookCommand
    | ListLoansCommand
    | AddBookCommand
    | RegisterMemberCommand,
    Field(discriminator="action"),
]

_command_adapter: TypeAdapter[Command] = TypeAdapter(Command)


def parse_command(data: dict[str, Any]) -> Command:
    """
    Build a command from raw field values.

    Raises:
        pydantic.ValidationError: If the action is unknown or a field is blank
    """
    return _command_adapter.validate_python(data)


# =============================================================================
# RESULTS
# =============================================================================


class CommandResult(BaseModel):
    """Outcome of a dispatched command."""

    action: str
    is_error: bool = False
    messages: list[str] = Field(default_factory=list)
    data: dict[str, Any] = Field(default_factory=dict)
    should_exit: bool = False

    @classmethod
    def error(cls, action: str, message: str) -> "CommandResult":
        return cls(action=action, is_error=True, messages=[message])


def describe_validation_error(exc: ValidationError) -> str:
    """Turn a pydantic validation error into a one-line message."""
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err["loc"]) or "input"
        parts.append(f"{field}: {err['msg']}")
    return "Error: Invalid input (" + "; ".join(parts) + ")."


def describe_error(exc: LibraryError) -> str:
    """Map a desk exception to the message shown at the counter."""
    if isinstance(exc, BookNotFoundError):
        return "Error: Book not found."
    if isinstance(exc, MemberNotFoundError):
        return "Error: Member not found."
    if isinstance(exc, DuplicateError):
        if exc.entity == "Book":
            return "Error: Book with this ISBN already exists."
        return "Error: Member with this ID already exists."
    if isinstance(exc, AlreadyCheckedOutError):
        return "Error: Book is already checked out."
    if isinstance(exc, NotBorrowedByMemberError):
        return "Error: This member did not borrow this book."
    return f"Error: {exc}"


# =============================================================================
# HANDLERS
# =============================================================================


def _handle_exit(desk: CirculationDesk, command: ExitCommand) -> CommandResult:  # noqa: ARG001
    return CommandResult(
        action=command.action, messages=["Exiting system. Goodbye!"], should_exit=True
    )


def _handle_list_available(
    desk: CirculationDesk, command: ListAvailableCommand
) -> CommandResult:
    books = desk.list_available()
    messages = ["--- Available Books ---"]
    if books:
        messages.extend(str(book) for book in books)
    else:
        messages.append("No books are currently available.")
    return CommandResult(
        action=command.action,
        messages=messages,
        data={"books": [book.model_dump(mode="json") for book in books]},
    )


def _handle_check_out(desk: CirculationDesk, command: CheckOutCommand) -> CommandResult:
    receipt = desk.check_out(command.isbn, command.member_id)
    return CommandResult(
        action=command.action,
        messages=[
            f"Success: {receipt.member_name} checked out '{receipt.title}'.",
            f"Due Date: {receipt.due_date.isoformat()}",
        ],
        data={"checkout": receipt.model_dump(mode="json")},
    )


def _handle_return_book(desk: CirculationDesk, command: ReturnBookCommand) -> CommandResult:
    receipt = desk.return_book(command.isbn, command.member_id)
    if receipt.fine_amount > 0:
        first = f"Book is overdue! Fine: {desk.config.format_amount(receipt.fine_amount)}"
    else:
        first = "Book returned on time."
    return CommandResult(
        action=command.action,
        messages=[first, f"Success: {receipt.member_name} returned '{receipt.title}'."],
        data={"return": receipt.model_dump(mode="json")},
    )


def _handle_list_loans(desk: CirculationDesk, command: ListLoansCommand) -> CommandResult:
    member, loans = desk.list_member_loans(command.member_id)
    messages = [f"--- Loans for {member.name} ---"]
    if not loans:
        messages.append("This member has no books checked out.")
    for loan in loans:
        messages.append(str(loan.book))
        if loan.fine_amount > 0:
            messages.append(f"  -> Current Fine: {desk.config.format_amount(loan.fine_amount)}")
    return CommandResult(
        action=command.action,
        messages=messages,
        data={
            "member_id": member.member_id,
            "loans": [loan.model_dump(mode="json") for loan in loans],
        },
    )


def _handle_add_book(desk: CirculationDesk, command: AddBookCommand) -> CommandResult:
    book = desk.add_book(command.isbn, command.title, command.author)
    return CommandResult(
        action=command.action,
        messages=[f"Book added: {book.title}"],
        data={"book": book.model_dump(mode="json")},
    )


def _handle_register_member(
    desk: CirculationDesk, command: RegisterMemberCommand
) -> CommandResult:
    member = desk.register_member(command.member_id, command.name)
    return CommandResult(
        action=command.action,
        messages=[f"Member registered: {member.name}"],
        data={"member": member.model_dump(mode="json")},
    )


_HANDLERS: dict[type[BaseModel], Callable[[CirculationDesk, Any], CommandResult]] = {
    ExitCommand: _handle_exit,
    ListAvailableCommand: _handle_list_available,
    CheckOutCommand: _handle_check_out,
    ReturnBookCommand: _handle_return_book,
    ListLoansCommand: _handle_list_loans,
    AddBookCommand: _handle_add_book,
    RegisterMemberCommand: _handle_register_member,
}


@trace_command
def dispatch(desk: CirculationDesk, command: Command) -> CommandResult:
    """
    Execute a command against the desk.

    Args:
        desk: The circulation desk to operate on
        command: A validated command value

    Returns:
        The structured result; failures are returned, not raised
    """
    handler = _HANDLERS[type(command)]
    try:
        return handler(desk, command)
    except LibraryError as e:
        logger.info("%s failed: %s", command.action, e)
        return CommandResult.error(command.action, describe_error(e))
    except ValidationError as e:
        logger.info("%s rejected invalid data: %s", command.action, e)
        return CommandResult.error(command.action, describe_validation_error(e))
