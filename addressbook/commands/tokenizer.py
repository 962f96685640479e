"""Prefix-based tokenizer for command argument strings.

Parses argument strings of the form::

    non-prefixed text <prefix>value <prefix>value ...

A value is assumed not to contain any declared prefix, and leading or
trailing whitespace around it is discarded. Prefixed arguments are either
repeatable (values accumulate in source order) or non-repeatable (the last
value wins).

Every argument must have a unique name and prefix, and no prefix may be a
substring of another. Behaviour is undefined otherwise. ``parse`` does not
check this; call :func:`validate_arguments` during setup if needed.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from addressbook.data.types import (
    Argument,
    NonPrefixedArgument,
    NonRepeatableArgument,
    Occurrence,
    PrefixedArgument,
    RepeatableArgument,
)
from addressbook.logger import get_logger

log = get_logger()


class InvalidArgumentsError(ValueError):
    """Raised by validate_arguments for an inconsistent descriptor set."""

    def __init__(self, problems: Sequence[str]) -> None:
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class ParsedArguments:
    """Values extracted by one CommandTokenizer.parse call.

    Lookups are keyed by descriptor. Absent values are returned as None.
    """

    def __init__(self) -> None:
        self._non_prefixed: Optional[str] = None
        self._non_repeatable: Dict[str, str] = {}
        self._repeatable: Dict[str, List[str]] = {}

    def get_non_prefixed(self) -> Optional[str]:
        """Get the leading non-prefixed value, or None."""
        return self._non_prefixed

    def get_non_repeatable(self, argument: NonRepeatableArgument) -> Optional[str]:
        """Get the last value given for a non-repeatable argument, or None."""
        return self._non_repeatable.get(argument.name)

    def get_repeatable(self, argument: RepeatableArgument) -> Optional[Tuple[str, ...]]:
        """Get all values of a repeatable argument in source order, or None."""
        values = self._repeatable.get(argument.name)
        if values is None:
            return None
        return tuple(values)

    def _set_non_prefixed(self, value: str) -> None:
        if value:
            self._non_prefixed = value

    def _add(self, argument: Argument, value: str) -> None:
        if isinstance(argument, RepeatableArgument):
            self._repeatable.setdefault(argument.name, []).append(value)
        elif isinstance(argument, NonRepeatableArgument):
            self._non_repeatable[argument.name] = value

    def __bool__(self) -> bool:
        return bool(self._non_prefixed or self._non_repeatable or self._repeatable)

    def __repr__(self) -> str:
        return (
            f"ParsedArguments(non_prefixed={self._non_prefixed!r}, "
            f"non_repeatable={self._non_repeatable!r}, "
            f"repeatable={self._repeatable!r})"
        )


class CommandTokenizer:
    """Splits argument strings according to a fixed list of descriptors."""

    def __init__(self, arguments: Sequence[Argument]) -> None:
        self.arguments: Tuple[Argument, ...] = tuple(arguments)

    def parse(self, source: str) -> ParsedArguments:
        """Parse an argument string.

        Never raises for string input. Missing values are reported through
        the returned ParsedArguments.

        Args:
            source: Raw argument string (without the command word)

        Returns:
            A fresh ParsedArguments instance
        """
        occurrences: List[Occurrence] = []
        for argument in self.arguments:
            occurrences.extend(_find_occurrences(source, argument))
        # list.sort is stable, ties keep descriptor order
        occurrences.sort(key=lambda occ: occ.start)

        log.debug("Found {} prefix occurrences", len(occurrences))
        return _extract_values(source, occurrences)


def _find_occurrences(source: str, argument: Argument) -> List[Occurrence]:
    """Find every start offset of an argument's prefix in source."""
    if isinstance(argument, NonPrefixedArgument) or not argument.prefix:
        return []

    found: List[Occurrence] = []
    start = source.find(argument.prefix)
    while start != -1:
        found.append(Occurrence(argument, start))
        start = source.find(argument.prefix, start + 1)
    return found


def _extract_values(source: str, occurrences: Sequence[Occurrence]) -> ParsedArguments:
    """Carve values out of source between sorted occurrences."""
    parsed = ParsedArguments()
    if not occurrences:
        parsed._set_non_prefixed(source.strip())
        return parsed

    parsed._set_non_prefixed(source[: occurrences[0].start].strip())

    for current, following in zip(occurrences, occurrences[1:]):
        parsed._add(current.argument, source[current.end : following.start].strip())

    last = occurrences[-1]
    parsed._add(last.argument, source[last.end :].strip())
    return parsed


def find_prefix_conflicts(arguments: Sequence[Argument]) -> List[str]:
    """Check a descriptor set for the problems parse does not detect.

    Args:
        arguments: Descriptors as passed to CommandTokenizer

    Returns:
        Human-readable problem descriptions, empty if the set is valid
    """
    problems: List[str] = []

    seen_names = set()
    for argument in arguments:
        if argument.name in seen_names:
            problems.append(f"duplicate argument name: {argument.name!r}")
        seen_names.add(argument.name)

    non_prefixed = [a for a in arguments if isinstance(a, NonPrefixedArgument)]
    if len(non_prefixed) > 1:
        names = ", ".join(repr(a.name) for a in non_prefixed)
        problems.append(f"more than one non-prefixed argument: {names}")

    prefixed: List[PrefixedArgument] = []
    for argument in arguments:
        if isinstance(argument, NonPrefixedArgument):
            continue
        if not isinstance(argument.prefix, str):
            problems.append(
                f"prefix for argument {argument.name!r} is not a string: {argument.prefix!r}"
            )
        elif not argument.prefix:
            problems.append(f"empty prefix for argument {argument.name!r}")
        else:
            prefixed.append(argument)

    for i, first in enumerate(prefixed):
        for second in prefixed[i + 1 :]:
            if first.prefix == second.prefix:
                problems.append(
                    f"duplicate prefix {first.prefix!r} for {first.name!r} and {second.name!r}"
                )
            elif first.prefix in second.prefix or second.prefix in first.prefix:
                problems.append(
                    f"prefix {first.prefix!r} of {first.name!r} overlaps "
                    f"prefix {second.prefix!r} of {second.name!r}"
                )

    return problems


def validate_arguments(arguments: Sequence[Argument]) -> None:
    """Raise InvalidArgumentsError if the descriptor set is inconsistent."""
    problems = find_prefix_conflicts(arguments)
    if problems:
        raise InvalidArgumentsError(problems)
