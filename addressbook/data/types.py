"""Data types for addressbook."""

from dataclasses import dataclass
from typing import NamedTuple, Tuple, Union


@dataclass(frozen=True)
class NonPrefixedArgument:
    """The leading text before any recognised prefix."""

    name: str


@dataclass(frozen=True)
class RepeatableArgument:
    """A prefixed argument whose occurrences accumulate in source order."""

    name: str
    prefix: str


@dataclass(frozen=True)
class NonRepeatableArgument:
    """A prefixed argument where the last occurrence wins."""

    name: str
    prefix: str


PrefixedArgument = Union[RepeatableArgument, NonRepeatableArgument]
Argument = Union[NonPrefixedArgument, RepeatableArgument, NonRepeatableArgument]


class Occurrence(NamedTuple):
    """A prefix match found at a given offset during one parse."""

    argument: PrefixedArgument
    start: int

    @property
    def end(self) -> int:
        """Offset just past the prefix text."""
        return self.start + len(self.argument.prefix)


@dataclass(frozen=True)
class Person:
    """A contact built from the add command."""

    name: str
    phone: str
    email: str
    address: str
    tags: Tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return a one-line summary."""
        text = f"{self.name} p/{self.phone} e/{self.email} a/{self.address}"
        if self.tags:
            text += " " + " ".join(f"t/{tag}" for tag in self.tags)
        return text
