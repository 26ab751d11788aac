"""
Library Desk Package.

An in-memory library catalog and circulation desk operated through a text
menu. It tracks books, members, checkouts, returns and overdue fines.

Key Components:
- models: Pydantic models for books, members and circulation receipts
- registry: In-memory registries keyed by ISBN and member ID
- services: The circulation desk, command dispatch and clocks
- shell: The interactive rich console menu
- config: Configuration management with pydantic-settings
"""

__version__ = "0.1.0"

from .registry import LibraryError
from .services import CirculationDesk, dispatch

__all__ = [
    "CirculationDesk",
    "LibraryError",
    "__version__",
    "dispatch",
]
