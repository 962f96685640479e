"""Tests for command parsing and handling."""

import pytest

from addressbook.commands.handlers import AddressBook, CommandHandler
from addressbook.commands.parser import (
    ADD_COMMAND_ARGS,
    COMMAND_ALIASES,
    MissingFieldError,
    get_command_names,
    parse_add_args,
    parse_command,
)
from addressbook.data.types import Person


class TestParseCommand:
    """Test command word parsing."""

    def test_simple_command(self):
        """Simple command should parse."""
        cmd = parse_command("list")
        assert cmd.name == "list"
        assert cmd.args == ""

    def test_args_kept_verbatim(self):
        """The argument string should be passed through untouched."""
        cmd = parse_command("add  John Doe p/123  t/a")
        assert cmd.name == "add"
        assert cmd.args == "John Doe p/123  t/a"

    def test_command_alias(self):
        """Command aliases should resolve."""
        assert parse_command("q").name == "quit"
        assert parse_command("LS").name == "list"

    def test_empty_command(self):
        """Empty command should return empty name."""
        cmd = parse_command("   ")
        assert cmd.name == ""

    def test_aliases_target_known_commands(self):
        """Every alias should point at a real command."""
        names = get_command_names()
        for target in COMMAND_ALIASES.values():
            assert target in names


class TestParseAddArgs:
    """Test building a Person from add arguments."""

    def test_full_person(self):
        """All fields and tags should be filled in."""
        person = parse_add_args(
            "Betsy Crowe p/1234567 e/betsycrowe@gmail.com a/Newgate Prison t/criminal t/friend"
        )
        assert person == Person(
            name="Betsy Crowe",
            phone="1234567",
            email="betsycrowe@gmail.com",
            address="Newgate Prison",
            tags=("criminal", "friend"),
        )

    def test_no_tags(self):
        """Tags should default to empty."""
        person = parse_add_args("John Doe p/98765432 e/johnd@gmail.com a/John street")
        assert person.tags == ()

    @pytest.mark.parametrize(
        "args, missing",
        [
            ("p/1 e/x@y.z a/home", "name"),
            ("Ann e/x@y.z a/home", "phone"),
            ("Ann p/1 a/home", "email"),
            ("Ann p/1 e/x@y.z", "address"),
            ("Ann p/ e/x@y.z a/home", "phone"),
        ],
    )
    def test_missing_field(self, args, missing):
        """Missing required fields should raise MissingFieldError."""
        with pytest.raises(MissingFieldError) as excinfo:
            parse_add_args(args)
        assert excinfo.value.field_name == missing

    def test_default_descriptors(self):
        """The default descriptor set should have five arguments."""
        assert [a.name for a in ADD_COMMAND_ARGS] == ["name", "phone", "email", "address", "tag"]


class TestCommandHandler:
    """Test command execution."""

    def test_add_and_list(self):
        """Added persons should show up in list."""
        handler = CommandHandler()
        result = handler.execute(parse_command("add Amy p/1 e/amy@x.org a/Road 1 t/friend"))
        assert result.success
        assert "Amy" in result.message

        result = handler.execute(parse_command("list"))
        assert result.success
        assert result.action == "show_persons"
        assert [p.name for p in result.data["persons"]] == ["Amy"]

    def test_add_missing_field(self):
        """A missing field should fail without raising."""
        handler = CommandHandler()
        result = handler.execute(parse_command("add Amy e/amy@x.org a/Road 1"))
        assert not result.success
        assert "phone" in result.message
        assert handler.book.persons == []

    def test_find(self):
        """find should match names case-insensitively."""
        book = AddressBook()
        book.add(Person("Alice Tan", "1", "a@x.org", "Road"))
        book.add(Person("Bob Lim", "2", "b@x.org", "Road"))
        handler = CommandHandler(book)

        result = handler.execute(parse_command("find alice"))
        assert [p.name for p in result.data["persons"]] == ["Alice Tan"]

        result = handler.execute(parse_command("find"))
        assert not result.success

    def test_unknown_command(self):
        """Unknown commands should fail."""
        result = CommandHandler().execute(parse_command("frobnicate"))
        assert not result.success
        assert "frobnicate" in result.message

    def test_empty_command(self):
        """Empty command should fail."""
        assert not CommandHandler().execute(parse_command("")).success

    def test_quit_and_help(self):
        """quit and help should succeed."""
        handler = CommandHandler()
        assert handler.execute(parse_command("quit")).action == "quit"
        assert "add" in handler.execute(parse_command("help")).message


class TestAddDescriptorLookup:
    """Test that add fields are matched to descriptors by name."""

    def test_default_is_tuple(self):
        """The shared default descriptor set should be immutable."""
        assert isinstance(ADD_COMMAND_ARGS, tuple)

    def test_reordered_descriptors(self):
        """Reordering the descriptor set should not swap fields."""
        arguments = list(reversed(ADD_COMMAND_ARGS))
        person = parse_add_args("Amy p/1 e/amy@x.org a/Road t/friend", arguments)
        assert person == Person("Amy", "1", "amy@x.org", "Road", ("friend",))

    def test_undeclared_field(self):
        """A field without a descriptor should count as missing."""
        arguments = [a for a in ADD_COMMAND_ARGS if a.name != "email"]
        with pytest.raises(MissingFieldError) as excinfo:
            parse_add_args("Amy p/1 a/Road", arguments)
        assert excinfo.value.field_name == "email"

    def test_without_tag_descriptor(self):
        """Tags should be empty when the tag descriptor is left out."""
        arguments = [a for a in ADD_COMMAND_ARGS if a.name != "tag"]
        person = parse_add_args("Amy p/1 e/amy@x.org a/Road", arguments)
        assert person.tags == ()
