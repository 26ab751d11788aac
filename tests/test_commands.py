"""
Tests for command parsing and dispatch.

These tests demonstrate the dispatch contract:
1. Input validation through command schemas
2. Success results with text and structured data
3. Desk errors converted into error results, never raised
"""

import logging
from datetime import timedelta

import pytest
from pydantic import ValidationError

from library_desk.services.commands import (
    AddBookCommand,
    CheckOutCommand,
    ExitCommand,
    ListAvailableCommand,
    ListLoansCommand,
    RegisterMemberCommand,
    ReturnBookCommand,
    dispatch,
    parse_command,
)


class TestParseCommand:
    """Test building commands from raw field values."""

    def test_parse_check_out(self):
        command = parse_command({"action": "check_out", "member_id": " M1 ", "isbn": "X1 "})

        assert isinstance(command, CheckOutCommand)
        assert command.member_id == "M1"
        assert command.isbn == "X1"

    def test_parse_without_fields(self):
        assert isinstance(parse_command({"action": "list_available"}), ListAvailableCommand)
        assert isinstance(parse_command({"action": "exit"}), ExitCommand)

    def test_unknown_action_rejected(self):
        with pytest.raises(ValidationError):
            parse_command({"action": "renew"})

    def test_blank_field_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_command({"action": "return_book", "member_id": "   ", "isbn": "X1"})
        assert exc_info.value.errors()[0]["loc"][-1] == "member_id"

    def test_author_is_optional(self):
        command = parse_command({"action": "add_book", "isbn": "X9", "title": "Dune"})
        assert command.author == ""


class TestDispatchSuccess:
    """Test successful command results."""

    def test_add_book(self, desk):
        result = dispatch(desk, AddBookCommand(isbn="X1", title="Dune", author="Frank Herbert"))

        assert result.is_error is False
        assert result.messages == ["Book added: Dune"]
        assert result.data["book"]["isbn"] == "X1"
        assert "X1" in desk.books

    def test_register_member(self, desk):
        result = dispatch(desk, RegisterMemberCommand(member_id="M1", name="Alice"))

        assert result.messages == ["Member registered: Alice"]
        assert result.data["member"]["borrowed_isbns"] == []

    def test_check_out(self, stocked_desk, today):
        result = dispatch(stocked_desk, CheckOutCommand(member_id="M1", isbn="X1"))

        due = (today + timedelta(days=14)).isoformat()
        assert result.is_error is False
        assert result.messages == [
            "Success: Test Member checked out 'Test Book'.",
            f"Due Date: {due}",
        ]
        assert result.data["checkout"]["due_date"] == due

    def test_return_on_time(self, stocked_desk):
        dispatch(stocked_desk, CheckOutCommand(member_id="M1", isbn="X1"))

        result = dispatch(stocked_desk, ReturnBookCommand(member_id="M1", isbn="X1"))

        assert result.messages == [
            "Book returned on time.",
            "Success: Test Member returned 'Test Book'.",
        ]
        assert result.data["return"]["fine_amount"] == 0.0

    def test_return_overdue(self, stocked_desk, clock):
        dispatch(stocked_desk, CheckOutCommand(member_id="M1", isbn="X1"))
        clock.advance(17)

        result = dispatch(stocked_desk, ReturnBookCommand(member_id="M1", isbn="X1"))

        assert result.messages[0] == "Book is overdue! Fine: $1.50"
        assert result.data["return"]["days_overdue"] == 3

    def test_list_available(self, stocked_desk):
        result = dispatch(stocked_desk, ListAvailableCommand())

        assert result.messages == [
            "--- Available Books ---",
            "Book [ISBN: X1, Title: 'Test Book', Author: 'Test Author', Status: Available]",
        ]
        assert [book["isbn"] for book in result.data["books"]] == ["X1"]

    def test_list_available_when_none(self, stocked_desk):
        dispatch(stocked_desk, CheckOutCommand(member_id="M1", isbn="X1"))

        result = dispatch(stocked_desk, ListAvailableCommand())

        assert result.is_error is False
        assert result.messages == [
            "--- Available Books ---",
            "No books are currently available.",
        ]
        assert result.data["books"] == []

    def test_list_loans_with_fine(self, stocked_desk, clock):
        dispatch(stocked_desk, CheckOutCommand(member_id="M1", isbn="X1"))
        clock.advance(16)

        result = dispatch(stocked_desk, ListLoansCommand(member_id="M1"))

        assert result.messages[0] == "--- Loans for Test Member ---"
        assert result.messages[1].startswith("Book [ISBN: X1,")
        assert result.messages[2] == "  -> Current Fine: $1.00"
        assert result.data["loans"][0]["fine_amount"] == 1.0

    def test_list_loans_empty(self, stocked_desk):
        result = dispatch(stocked_desk, ListLoansCommand(member_id="M1"))

        assert result.messages == [
            "--- Loans for Test Member ---",
            "This member has no books checked out.",
        ]
        assert result.data["loans"] == []

    def test_exit(self, desk):
        result = dispatch(desk, ExitCommand())

        assert result.should_exit is True
        assert result.messages == ["Exiting system. Goodbye!"]


class TestDispatchErrors:
    """Test that desk failures become error results."""

    @pytest.mark.parametrize(
        ("command", "message"),
        [
            (CheckOutCommand(member_id="M1", isbn="NOPE"), "Error: Book not found."),
            (CheckOutCommand(member_id="M9", isbn="X1"), "Error: Member not found."),
            (
                ReturnBookCommand(member_id="M1", isbn="X1"),
                "Error: This member did not borrow this book.",
            ),
            (ListLoansCommand(member_id="M9"), "Error: Member not found."),
            (AddBookCommand(isbn="X1", title="Again"), "Error: Book with this ISBN already exists."),
            (
                RegisterMemberCommand(member_id="M1", name="Again"),
                "Error: Member with this ID already exists.",
            ),
        ],
    )
    def test_error_messages(self, stocked_desk, command, message):
        result = dispatch(stocked_desk, command)

        assert result.is_error is True
        assert result.messages == [message]
        assert result.should_exit is False

    def test_already_checked_out(self, stocked_desk):
        stocked_desk.register_member("M2", "Other")
        dispatch(stocked_desk, CheckOutCommand(member_id="M1", isbn="X1"))

        result = dispatch(stocked_desk, CheckOutCommand(member_id="M2", isbn="X1"))

        assert result.is_error is True
        assert result.messages == ["Error: Book is already checked out."]
        assert stocked_desk.members.lookup("M2").borrowed_isbns == []

    def test_model_validation_failure_is_reported(self, desk):
        result = dispatch(desk, AddBookCommand(isbn="X" * 40, title="Too Long"))

        assert result.is_error is True
        assert result.messages[0].startswith("Error: Invalid input (isbn:")
        assert len(desk.books) == 0

    def test_user_mistakes_stay_below_warning(self, stocked_desk, caplog):
        stocked_desk.register_member("M2", "Other")
        dispatch(stocked_desk, CheckOutCommand(member_id="M1", isbn="X1"))

        with caplog.at_level(logging.INFO):
            dispatch(stocked_desk, CheckOutCommand(member_id="M2", isbn="X1"))
            dispatch(stocked_desk, CheckOutCommand(member_id="M9", isbn="X1"))
            dispatch(stocked_desk, ReturnBookCommand(member_id="M2", isbn="X1"))

        failures = [r for r in caplog.records if "failed" in r.getMessage()]
        assert len(failures) == 3
        assert all(r.levelno < logging.WARNING for r in caplog.records)
