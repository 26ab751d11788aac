"""
Interactive menu for the Library Desk.

The shell is the only part of the system that talks to the terminal. It
reads a numbered choice, prompts for the fields that choice needs, turns
them into a command, dispatches it and prints the result. Bad input is
reported and the menu is shown again; nothing typed at the prompt ends the
loop except choice 0 (or end of input).
"""

import logging
from collections.abc import Callable

from pydantic import ValidationError
from rich.console import Console

from .registry.repository import LibraryError
from .services.circulation import CirculationDesk
from .services.commands import (
    CommandResult,
    describe_validation_error,
    dispatch,
    parse_command,
)

logger = logging.getLogger(__name__)

# Menu number -> (label, command action, [(prompt, field), ...])
MENU: dict[int, tuple[str, str, list[tuple[str, str]]]] = {
    1: ("List Available Books", "list_available", []),
    2: (
        "Check Out Book",
        "check_out",
        [("Enter Member ID: ", "member_id"), ("Enter Book ISBN: ", "isbn")],
    ),
    3: (
        "Return Book",
        "return_book",
        [("Enter Member ID: ", "member_id"), ("Enter Book ISBN: ", "isbn")],
    ),
    4: ("List Member's Loans", "list_loans", [("Enter Member ID to list loans: ", "member_id")]),
    5: (
        "Add New Book",
        "add_book",
        [
            ("Enter new Book ISBN: ", "isbn"),
            ("Enter Book Title: ", "title"),
            ("Enter Book Author: ", "author"),
        ],
    ),
    6: (
        "Register New Member",
        "register_member",
        [("Enter new Member ID: ", "member_id"), ("Enter Member Name: ", "name")],
    ),
    0: ("Exit", "exit", []),
}

INVALID_INPUT = "Invalid input. Please enter a number."
INVALID_CHOICE = "Invalid choice. Please try again."


class InvalidMenuInput(LibraryError):
    """Raised for a menu choice that is not a number or not on the menu."""


def parse_menu_choice(text: str) -> int:
    """
    Parse a menu selection.

    Raises:
        InvalidMenuInput: If ``text`` is not an integer or not a menu entry
    """
    try:
        choice = int(text.strip())
    except ValueError:
        raise InvalidMenuInput(INVALID_INPUT) from None
    if choice not in MENU:
        raise InvalidMenuInput(INVALID_CHOICE)
    return choice


class LibraryShell:
    """
    Text menu over a ``CirculationDesk``.

    Args:
        desk: The desk every command runs against
        console: Rich console for output; a default terminal console if omitted
        reader: Called with a prompt, returns one line of input and raises
            ``EOFError`` when input is exhausted. Defaults to ``console.input``.
    """

    def __init__(
        self,
        desk: CirculationDesk,
        console: Console | None = None,
        reader: Callable[[str], str] | None = None,
    ):
        self.desk = desk
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.reader = reader or self.console.input

    def print_menu(self) -> None:
        self.console.print("--- Library Menu ---", style="bold")
        for number in [*range(1, 7), 0]:
            self.console.print(f"{number}. {MENU[number][0]}", markup=False)

    def prompt_command(self, choice: int):
        """Ask for the fields a menu choice needs and build its command."""
        _, action, fields = MENU[choice]
        data = {"action": action}
        for prompt, field in fields:
            data[field] = self.reader(prompt)
        return parse_command(data)

    def render(self, result: CommandResult) -> None:
        for message in result.messages:
            if result.is_error:
                style = "bold red"
            elif message.startswith("---"):
                style = "bold cyan"
            else:
                style = None
            self.console.print(message, style=style, markup=False, highlight=False, soft_wrap=True)

    def handle(self, raw_choice: str) -> CommandResult:
        """
        Process one menu selection, prompting for its fields.

        Returns:
            The dispatched result, or an error result for bad input
        """
        try:
            choice = parse_menu_choice(raw_choice)
        except InvalidMenuInput as e:
            logger.debug("Rejected menu input %r", raw_choice)
            return CommandResult.error("menu", str(e))

        try:
            command = self.prompt_command(choice)
        except ValidationError as e:
            return CommandResult.error(MENU[choice][1], describe_validation_error(e))

        return dispatch(self.desk, command)

    def run(self) -> None:
        """Run the menu loop until the user exits or input ends."""
        while True:
            self.print_menu()
            try:
                result = self.handle(self.reader("Enter your choice: "))
            except EOFError:
                self.console.print()
                self.console.print("Exiting system. Goodbye!")
                return
            self.render(result)
            self.console.print()
            if result.should_exit:
                return
