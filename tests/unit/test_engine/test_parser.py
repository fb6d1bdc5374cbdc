"""Unit tests for CommandParser and DirectionParser.

Tests cover:
- Whitespace splitting into verb and arguments
- Empty input returns None
- Direction synonyms and case-insensitivity
- Unknown directions return None
"""

import pytest

from labyrinth.engine.parser import CommandParser, DirectionParser
from labyrinth.models.labyrinth import Movement


class TestCommandParser:
    """Tests for CommandParser splitting."""

    @pytest.fixture
    def parser(self) -> CommandParser:
        return CommandParser()

    def test_verb_only(self, parser) -> None:
        command = parser.parse("help")

        assert command is not None
        assert command.verb == "help"
        assert command.args == []

    def test_verb_and_arguments(self, parser) -> None:
        command = parser.parse("go left now")

        assert command.verb == "go"
        assert command.args == ["left", "now"]

    def test_repeated_whitespace(self, parser) -> None:
        """Runs of whitespace separate tokens like a single space."""
        command = parser.parse("  go    left ")

        assert command.verb == "go"
        assert command.args == ["left"]
        assert command.echo == "> go    left"

    @pytest.mark.parametrize("raw", ["", " ", "\n"])
    def test_empty_input(self, parser, raw) -> None:
        assert parser.parse(raw) is None

    def test_raw_input_preserved(self, parser) -> None:
        command = parser.parse(" Attack ")

        assert command.raw_input == " Attack "
        assert command.verb == "Attack"


class TestDirectionParser:
    """Tests for DirectionParser."""

    @pytest.fixture
    def parser(self) -> DirectionParser:
        return DirectionParser()

    @pytest.mark.parametrize("token", ["forward", "f", "fwd", "ahead", "straight"])
    def test_forward_synonyms(self, parser, token) -> None:
        assert parser.parse(token) == Movement.FORWARD

    @pytest.mark.parametrize("token", ["left", "l"])
    def test_left_synonyms(self, parser, token) -> None:
        assert parser.parse(token) == Movement.LEFT

    @pytest.mark.parametrize("token", ["right", "r"])
    def test_right_synonyms(self, parser, token) -> None:
        assert parser.parse(token) == Movement.RIGHT

    @pytest.mark.parametrize("token", ["FORWARD", "Left", "RiGhT", " left "])
    def test_case_and_whitespace_insensitive(self, parser, token) -> None:
        assert parser.parse(token) is not None

    @pytest.mark.parametrize("token", ["", "up", "north", "back", "lefty", "forwards"])
    def test_unknown_returns_none(self, parser, token) -> None:
        """Unknown tokens yield None rather than raising."""
        assert parser.parse(token) is None
