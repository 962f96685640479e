"""Command parsing and handling for addressbook."""

from addressbook.commands.tokenizer import CommandTokenizer, ParsedArguments
from addressbook.commands.parser import parse_command, ParsedCommand
from addressbook.commands.handlers import CommandHandler, CommandResult

__all__ = [
    "CommandTokenizer",
    "ParsedArguments",
    "parse_command",
    "ParsedCommand",
    "CommandHandler",
    "CommandResult",
]
