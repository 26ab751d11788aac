"""
Registry package for the Library Desk.

This package provides the in-memory data stores behind the desk:
- BookRegistry: books keyed by ISBN (book_registry.py)
- MemberRegistry: members keyed by member ID (member_registry.py)
- The shared base class and error hierarchy (repository.py)
"""

from .book_registry import BookRegistry
from .member_registry import MemberRegistry
from .repository import (
    BaseRegistry,
    BookNotFoundError,
    DuplicateError,
    LibraryError,
    MemberNotFoundError,
    NotFoundError,
)

__all__ = [
    "BaseRegistry",
    "BookNotFoundError",
    "BookRegistry",
    "DuplicateError",
    "LibraryError",
    "MemberNotFoundError",
    "MemberRegistry",
    "NotFoundError",
]
