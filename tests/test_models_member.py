"""
Tests for the Member model.

These tests verify that the Member model correctly:
1. Validates identifiers and names
2. Keeps the borrowed set free of duplicates
3. Tracks borrow and release operations
"""

import pytest
from pydantic import ValidationError

from library_desk.models.member import Member


class TestMemberModel:
    """Test suite for the Member model."""

    def test_create_valid_member(self):
        member = Member(member_id="M001", name="Alice Smith")

        assert member.member_id == "M001"
        assert member.name == "Alice Smith"
        assert member.borrowed_isbns == []
        assert member.loan_count == 0

    @pytest.mark.parametrize("field", ["member_id", "name"])
    def test_blank_fields_rejected(self, field):
        data = {"member_id": "M001", "name": "Alice Smith"}
        data[field] = "  "

        with pytest.raises(ValidationError):
            Member(**data)

    def test_duplicate_isbns_removed_on_creation(self):
        member = Member(member_id="M001", name="Alice", borrowed_isbns=["X1", "X2", "X1"])
        assert member.borrowed_isbns == ["X1", "X2"]

    def test_string_representation(self):
        member = Member(member_id="M001", name="Alice Smith", borrowed_isbns=["X1"])
        assert str(member) == "Member [ID: M001, Name: 'Alice Smith', Books Borrowed: 1]"


class TestMemberBorrowing:
    """Test the borrowed set operations."""

    def test_borrow_adds_isbn(self):
        member = Member(member_id="M001", name="Alice")

        member.borrow("X1")
        member.borrow("X2")

        assert member.borrowed_isbns == ["X1", "X2"]
        assert member.has_borrowed("X1")
        assert member.loan_count == 2

    def test_borrow_same_isbn_twice_is_ignored(self):
        member = Member(member_id="M001", name="Alice")

        member.borrow("X1")
        member.borrow("X1")

        assert member.borrowed_isbns == ["X1"]

    def test_release_removes_isbn(self):
        member = Member(member_id="M001", name="Alice", borrowed_isbns=["X1", "X2"])

        member.release("X1")

        assert member.borrowed_isbns == ["X2"]
        assert not member.has_borrowed("X1")

    def test_release_unknown_isbn_is_ignored(self):
        member = Member(member_id="M001", name="Alice", borrowed_isbns=["X1"])

        member.release("X9")

        assert member.borrowed_isbns == ["X1"]
