"""Entry point for addressbook."""

import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from addressbook.commands.handlers import CommandHandler, CommandResult
from addressbook.commands.parser import parse_command
from addressbook.commands.tokenizer import InvalidArgumentsError
from addressbook.config import get_config
from addressbook.logger import setup_logger


def render_result(console: Console, result: CommandResult) -> None:
    """Print a command result."""
    if result.action == "show_persons" and result.data:
        table = Table(title=result.message)
        for column in ("#", "Name", "Phone", "Email", "Address", "Tags"):
            table.add_column(column)
        for index, person in enumerate(result.data["persons"], start=1):
            table.add_row(
                str(index),
                person.name,
                person.phone,
                person.email,
                person.address,
                ", ".join(person.tags),
            )
        console.print(table)
        return

    if result.message:
        style = "green" if result.success else "bold red"
        console.print(Text(result.message, style=style))


def main(argv: Optional[List[str]] = None) -> int:
    """Run one command from argv, or a prompt loop if none is given."""
    argv = sys.argv[1:] if argv is None else argv
    console = Console()
    config = get_config()
    setup_logger(log_level=config.log_level)

    try:
        handler = CommandHandler(add_arguments=config.add_command_args())
    except InvalidArgumentsError as e:
        console.print(Text(f"Invalid prefix configuration: {e}", style="bold red"))
        return 2

    if argv:
        result = handler.execute(parse_command(" ".join(argv)))
        render_result(console, result)
        return 0 if result.success else 1

    while True:
        try:
            line = console.input("[bold cyan]>[/] ")
        except (EOFError, KeyboardInterrupt):
            return 0
        if not line.strip():
            continue
        result = handler.execute(parse_command(line))
        if result.action == "quit":
            return 0
        render_result(console, result)


if __name__ == "__main__":
    sys.exit(main())
