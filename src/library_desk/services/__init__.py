"""
Services for the Library Desk.

- circulation: the CirculationDesk engine and its circulation errors
- commands: validated command values and the ``dispatch`` function
- clock: system and fixed clocks supplying "today"
"""

from .circulation import (
    AlreadyCheckedOutError,
    CirculationDesk,
    CirculationError,
    NotBorrowedByMemberError,
)
from .clock import Clock, FixedClock, SystemClock
from .commands import CommandResult, dispatch, parse_command

__all__ = [
    "AlreadyCheckedOutError",
    "CirculationDesk",
    "CirculationError",
    "Clock",
    "CommandResult",
    "FixedClock",
    "NotBorrowedByMemberError",
    "SystemClock",
    "dispatch",
    "parse_command",
]
