"""Command parser for address book commands."""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from addressbook.commands.tokenizer import CommandTokenizer
from addressbook.data.types import (
    Argument,
    NonPrefixedArgument,
    NonRepeatableArgument,
    Person,
    RepeatableArgument,
)


@dataclass
class ParsedCommand:
    """A command word and its raw, untokenized argument string."""

    name: str
    args: str = ""
    raw: str = ""


class MissingFieldError(ValueError):
    """A required field was absent from the command arguments."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Missing required field: {field_name}")


# Command aliases
COMMAND_ALIASES: Dict[str, str] = {
    "a": "add",
    "ls": "list",
    "l": "list",
    "f": "find",
    "h": "help",
    "q": "quit",
    "exit": "quit",
}

NAME_ARG = NonPrefixedArgument("name")
PHONE_ARG = NonRepeatableArgument("phone", "p/")
EMAIL_ARG = NonRepeatableArgument("email", "e/")
ADDRESS_ARG = NonRepeatableArgument("address", "a/")
TAG_ARGS = RepeatableArgument("tag", "t/")

ADD_COMMAND_ARGS: Tuple[Argument, ...] = (NAME_ARG, PHONE_ARG, EMAIL_ARG, ADDRESS_ARG, TAG_ARGS)


def parse_command(command_str: str) -> ParsedCommand:
    """Split a command line into the command word and its arguments.

    The argument string is kept verbatim apart from surrounding whitespace,
    so it can be handed to a CommandTokenizer.

    Args:
        command_str: Raw command line

    Returns:
        ParsedCommand instance
    """
    command_str = command_str.strip()
    if not command_str:
        return ParsedCommand(name="", raw=command_str)

    parts = command_str.split(None, 1)
    name = parts[0].lower()
    name = COMMAND_ALIASES.get(name, name)
    args = parts[1] if len(parts) > 1 else ""

    return ParsedCommand(name=name, args=args, raw=command_str)


def parse_add_args(args: str, arguments: Sequence[Argument] = ADD_COMMAND_ARGS) -> Person:
    """Build a Person from add command arguments.

    Example: ``John Doe p/98765432 e/johnd@gmail.com a/John street t/friend``

    Args:
        args: Argument string after the command word
        arguments: Descriptor set; descriptors are matched to fields by name

    Returns:
        Person instance

    Raises:
        MissingFieldError: If name, phone, email or address is absent
    """
    by_name = {argument.name: argument for argument in arguments}
    parsed = CommandTokenizer(arguments).parse(args)

    name = parsed.get_non_prefixed()
    if name is None or not isinstance(by_name.get(NAME_ARG.name), NonPrefixedArgument):
        raise MissingFieldError(NAME_ARG.name)

    fields = {}
    for field_name in (PHONE_ARG.name, EMAIL_ARG.name, ADDRESS_ARG.name):
        argument = by_name.get(field_name)
        value = None
        if isinstance(argument, NonRepeatableArgument):
            value = parsed.get_non_repeatable(argument)
        if not value:
            raise MissingFieldError(field_name)
        fields[field_name] = value

    tags: Sequence[str] = ()
    tag_args = by_name.get(TAG_ARGS.name)
    if isinstance(tag_args, RepeatableArgument):
        tags = parsed.get_repeatable(tag_args) or ()

    return Person(
        name=name,
        phone=fields[PHONE_ARG.name],
        email=fields[EMAIL_ARG.name],
        address=fields[ADDRESS_ARG.name],
        tags=tuple(tag for tag in tags if tag),
    )


def get_command_names() -> List[str]:
    """Get list of available command names.

    Returns:
        List of command names for completion
    """
    return [
        "add",
        "list",
        "find",
        "help",
        "quit",
    ]
