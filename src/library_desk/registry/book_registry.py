"""
Book registry for the Library Desk.

Maps ISBNs to ``Book`` records. New books always start on the shelf.
"""

import logging

from ..models.book import Book
from .repository import BaseRegistry, BookNotFoundError

logger = logging.getLogger(__name__)


class BookRegistry(BaseRegistry[Book]):
    """Registry of every book in the catalog, keyed by ISBN."""

    entity_name = "Book"

    def key_of(self, record: Book) -> str:
        return record.isbn

    def not_found(self, key: str) -> BookNotFoundError:
        return BookNotFoundError(key)

    def add(self, isbn: str, title: str, author: str) -> Book:
        """
        Add a new, available book to the catalog.

        Args:
            isbn: Unique book identifier
            title: Book title
            author: Book author

        Returns:
            The created book

        Raises:
            DuplicateError: If the ISBN is already in the catalog
            pydantic.ValidationError: If ISBN or title is blank
        """
        book = self._insert(Book(isbn=isbn, title=title, author=author))
        logger.info("Book added: %s (%s)", book.title, book.isbn)
        return book

    def list_available(self) -> list[Book]:
        """Books currently on the shelf, in catalog order."""
        return [book for book in self if book.is_available]
