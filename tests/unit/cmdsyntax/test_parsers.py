"""Tests for typed argument parsers."""

from types import MappingProxyType

import pytest

from cmdsyntax.syntax.argument_types import SignatureDescriptor, TypeKind
from cmdsyntax.syntax.errors import INTERNAL_ERROR, PARSE_ERROR, CompilationError, ParseError
from cmdsyntax.syntax.parsers import (
    ArgumentParserFactory,
    BooleanArgumentParser,
    ChannelArgumentParser,
    EntityArgumentParser,
    NumberArgumentParser,
    StringArgumentParser,
    UserArgumentParser,
)


def descriptor(type_kind: TypeKind, name: str = "arg") -> SignatureDescriptor:
    return SignatureDescriptor(name=name, type=type_kind)


class TestStringArgumentParser:
    """Test StringArgumentParser."""

    def test_parse_string(self):
        """Test that the token is returned unchanged."""
        parser = StringArgumentParser(descriptor(TypeKind.STRING))

        assert parser.parse(None, None, "hello", 0) == "hello"

    def test_too_short(self):
        """Test the minimum length bound."""
        parser = StringArgumentParser(descriptor(TypeKind.STRING, "name"), min_length=3)

        with pytest.raises(ParseError) as exc_info:
            parser.parse(None, None, "ab", 2)

        error = exc_info.value
        assert error.kind == PARSE_ERROR
        assert error.index == 2
        assert error.token == "ab"
        assert error.reason == "too short"
        assert error.detail["argument"] == "name"
        assert error.detail["min_length"] == 3

    def test_too_long(self):
        """Test the maximum length bound."""
        parser = StringArgumentParser(descriptor(TypeKind.STRING), max_length=4)

        with pytest.raises(ParseError) as exc_info:
            parser.parse(None, None, "abcde", 0)

        assert exc_info.value.reason == "too long"
        assert exc_info.value.detail["max_length"] == 4

    def test_bounds_inclusive(self):
        """Test tokens exactly at the bounds."""
        parser = StringArgumentParser(descriptor(TypeKind.STRING), min_length=2, max_length=3)

        assert parser.parse(None, None, "ab", 0) == "ab"
        assert parser.parse(None, None, "abc", 0) == "abc"

    def test_invalid_bounds(self):
        """Test that inverted bounds are rejected as a compilation error."""
        with pytest.raises(CompilationError) as exc_info:
            StringArgumentParser(descriptor(TypeKind.STRING), min_length=5, max_length=2)

        assert exc_info.value.kind == INTERNAL_ERROR
        assert exc_info.value.detail == {
            "message": "Invalid string bounds",
            "argument": "arg",
            "min_length": 5,
            "max_length": 2,
        }

    def test_negative_min_length(self):
        with pytest.raises(CompilationError):
            StringArgumentParser(descriptor(TypeKind.STRING), min_length=-1)


class TestBooleanArgumentParser:
    """Test BooleanArgumentParser."""

    @pytest.mark.parametrize("token", ["true", "TRUE", "yes", "y", "on", "1"])
    def test_truthy(self, token):
        parser = BooleanArgumentParser(descriptor(TypeKind.BOOLEAN))

        assert parser.parse(None, None, token, 0) is True

    @pytest.mark.parametrize("token", ["false", "False", "no", "n", "off", "0"])
    def test_falsy(self, token):
        parser = BooleanArgumentParser(descriptor(TypeKind.BOOLEAN))

        assert parser.parse(None, None, token, 0) is False

    def test_unparseable(self):
        """Test a token that is not a boolean."""
        parser = BooleanArgumentParser(descriptor(TypeKind.BOOLEAN))

        with pytest.raises(ParseError) as exc_info:
            parser.parse(None, None, "maybe", 1)

        assert exc_info.value.detail == {
            "index": 1,
            "token": "maybe",
            "expected": "boolean",
            "reason": "unparseable token",
            "argument": "arg",
        }


class TestNumberArgumentParser:
    """Test NumberArgumentParser."""

    def test_parse_integer(self):
        parser = NumberArgumentParser(descriptor(TypeKind.NUMBER))

        result = parser.parse(None, None, "42", 0)

        assert result == 42
        assert isinstance(result, int)

    def test_parse_negative_integer(self):
        parser = NumberArgumentParser(descriptor(TypeKind.NUMBER))

        assert parser.parse(None, None, "-7", 0) == -7

    def test_parse_float(self):
        parser = NumberArgumentParser(descriptor(TypeKind.NUMBER))

        result = parser.parse(None, None, "2.5", 0)

        assert result == 2.5
        assert isinstance(result, float)

    @pytest.mark.parametrize("token", ["abc", "1.2.3", "nan", "inf", "-infinity", "0x10"])
    def test_unparseable(self, token):
        parser = NumberArgumentParser(descriptor(TypeKind.NUMBER))

        with pytest.raises(ParseError) as exc_info:
            parser.parse(None, None, token, 3)

        assert exc_info.value.index == 3
        assert exc_info.value.detail["expected"] == "number"


class TestEntityArgumentParsers:
    """Test the identity-parse policy of entity references."""

    @pytest.mark.parametrize(
        "type_kind",
        [TypeKind.CHANNEL, TypeKind.MEMBER, TypeKind.GUILD, TypeKind.ROLE, TypeKind.USER],
    )
    def test_token_returned_unchanged(self, type_kind, mock_bot):
        parser = ArgumentParserFactory.create(descriptor(type_kind))

        assert isinstance(parser, EntityArgumentParser)
        assert parser.parse(mock_bot, object(), "<@!123456789>", 0) == "<@!123456789>"

    def test_session_not_used(self, mock_bot):
        """Test that no lookup is made against the session."""
        parser = UserArgumentParser(descriptor(TypeKind.USER))

        parser.parse(mock_bot, None, "123456789", 0)

        mock_bot.hikari_bot.rest.fetch_user.assert_not_called()


class TestArgumentParserFactory:
    """Test the type registry."""

    def test_every_type_registered(self):
        assert ArgumentParserFactory.type_names() == [kind.value for kind in TypeKind]

    def test_get_parser_class(self):
        assert ArgumentParserFactory.get_parser_class(TypeKind.CHANNEL) is ChannelArgumentParser
        assert ArgumentParserFactory.get_parser_class("string") is StringArgumentParser

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            ArgumentParserFactory.get_parser_class("foobar")

    def test_table_is_read_only(self):
        assert isinstance(ArgumentParserFactory._parsers, MappingProxyType)
        with pytest.raises(TypeError):
            ArgumentParserFactory._parsers[TypeKind.STRING] = BooleanArgumentParser

    def test_options_ignored_by_other_types(self):
        """Test that string options do not break non-string parsers."""
        parser = ArgumentParserFactory.create(descriptor(TypeKind.NUMBER), max_length=10)

        assert isinstance(parser, NumberArgumentParser)
