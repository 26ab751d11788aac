"""
Library Desk Models.

Pydantic models for the entities the desk keeps track of:
- Book: catalog entries and their circulation state
- Member: registered borrowers and the books they hold
- Circulation: checkout and return receipts, current loans
"""

from .book import Book
from .circulation import CheckoutReceipt, Loan, ReturnReceipt
from .member import Member

__all__ = [
    "Book",
    "CheckoutReceipt",
    "Loan",
    "Member",
    "ReturnReceipt",
]
