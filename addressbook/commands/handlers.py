"""Command handlers for addressbook."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from addressbook.commands.parser import (
    ADD_COMMAND_ARGS,
    MissingFieldError,
    ParsedCommand,
    parse_add_args,
)
from addressbook.data.types import Argument, Person
from addressbook.logger import get_logger

log = get_logger()


@dataclass
class CommandResult:
    """Result of command execution."""

    success: bool
    message: str = ""
    action: str = ""  # Special action to take: "quit"
    data: Optional[dict] = None


@dataclass
class AddressBook:
    """In-memory list of contacts."""

    persons: List[Person] = field(default_factory=list)

    def add(self, person: Person) -> None:
        """Append a contact."""
        self.persons.append(person)

    def find(self, keyword: str) -> List[Person]:
        """Contacts whose name contains keyword, case-insensitively."""
        keyword = keyword.lower()
        return [p for p in self.persons if keyword in p.name.lower()]


HELP_TEXT = """
Commands:
  add NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]...  - Add a contact
  list, ls                                       - List contacts
  find KEYWORD                                   - Find contacts by name
  help, h                                        - Show this help
  quit, q                                        - Exit
"""


class CommandHandler:
    """Handles command execution."""

    def __init__(
        self,
        book: Optional[AddressBook] = None,
        add_arguments: Sequence[Argument] = ADD_COMMAND_ARGS,
    ) -> None:
        self.book = book if book is not None else AddressBook()
        self.add_arguments = list(add_arguments)

    def execute(self, cmd: ParsedCommand) -> CommandResult:
        """Execute a parsed command.

        Args:
            cmd: Parsed command

        Returns:
            CommandResult with status and message
        """
        if not cmd.name:
            return CommandResult(success=False, message="No command")

        # Dispatch to handler
        handler = getattr(self, f"_cmd_{cmd.name.replace('-', '_')}", None)
        log.debug("Dispatching {!r} to {}", cmd.name, handler.__name__ if handler else None)

        if handler:
            return handler(cmd)
        return CommandResult(success=False, message=f"Unknown command: {cmd.name}")

    def _cmd_add(self, cmd: ParsedCommand) -> CommandResult:
        """Handle add command."""
        try:
            person = parse_add_args(cmd.args, self.add_arguments)
        except MissingFieldError as e:
            log.info("Rejected add command: {}", e)
            return CommandResult(success=False, message=str(e))

        self.book.add(person)
        return CommandResult(
            success=True,
            message=f"New person added: {person}",
            data={"person": person},
        )

    def _cmd_list(self, cmd: ParsedCommand) -> CommandResult:
        """Handle list command."""
        return CommandResult(
            success=True,
            message=f"{len(self.book.persons)} persons listed",
            action="show_persons",
            data={"persons": list(self.book.persons)},
        )

    def _cmd_find(self, cmd: ParsedCommand) -> CommandResult:
        """Handle find command."""
        keyword = cmd.args.strip()
        if not keyword:
            return CommandResult(success=False, message="Usage: find KEYWORD")

        matches = self.book.find(keyword)
        return CommandResult(
            success=True,
            message=f"{len(matches)} persons listed",
            action="show_persons",
            data={"persons": matches},
        )

    def _cmd_help(self, cmd: ParsedCommand) -> CommandResult:
        """Handle help command."""
        return CommandResult(success=True, message=HELP_TEXT)

    def _cmd_quit(self, cmd: ParsedCommand) -> CommandResult:
        """Handle quit command."""
        return CommandResult(success=True, action="quit")
