"""Argument descriptors and contact records."""

from addressbook.data.types import (
    Argument,
    NonPrefixedArgument,
    NonRepeatableArgument,
    Occurrence,
    Person,
    PrefixedArgument,
    RepeatableArgument,
)

__all__ = [
    "Argument",
    "NonPrefixedArgument",
    "NonRepeatableArgument",
    "Occurrence",
    "Person",
    "PrefixedArgument",
    "RepeatableArgument",
]
