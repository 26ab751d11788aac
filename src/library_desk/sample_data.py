"""
Sample catalog for the Library Desk.

Loaded at startup unless disabled, so the menu has something to work with
straight away.
"""

import logging

from .services.circulation import CirculationDesk

logger = logging.getLogger(__name__)

SAMPLE_BOOKS: list[tuple[str, str, str]] = [
    ("978-0321765723", "The Lord of the Rings", "J.R.R. Tolkien"),
    ("978-0743273565", "The Great Gatsby", "F. Scott Fitzgerald"),
    ("978-0451524935", "1984", "George Orwell"),
]

SAMPLE_MEMBERS: list[tuple[str, str]] = [
    ("M001", "Alice Smith"),
    ("M002", "Bob Johnson"),
]


def load_sample_data(desk: CirculationDesk) -> None:
    """Add the sample books and members to an empty desk."""
    for isbn, title, author in SAMPLE_BOOKS:
        desk.add_book(isbn, title, author)
    for member_id, name in SAMPLE_MEMBERS:
        desk.register_member(member_id, name)
    logger.info(
        "Loaded sample data: %d books, %d members", len(SAMPLE_BOOKS), len(SAMPLE_MEMBERS)
    )
