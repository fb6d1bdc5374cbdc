"""Unit tests for the help pages."""

import pytest

from labyrinth.engine.help import HELP_PAGES, display_help, parse_page_number


def test_page_one_lists_its_verbs() -> None:
    page = display_help(1)

    assert page.startswith("\nSHOWING 'Labyrinth' COMMANDS\n")
    assert [command for command, _ in HELP_PAGES[1]] == [
        "help", "clear", "tutorial", "go <direction>", "ragequit", "infos",
    ]
    assert page.rstrip().endswith("============(1/2)===========")


def test_page_two_lists_its_verbs() -> None:
    page = display_help(2)

    assert "- continue: to continue a story/speech" in page
    assert "- skip: skip this room to go to the next" in page
    assert "- attack: attacks the monster / NPC" in page
    assert "(2/2)" in page


def test_undefined_page_is_header_and_footer() -> None:
    page = display_help(0)

    assert page == (
        "\nSHOWING 'Labyrinth' COMMANDS\n"
        "============================\n\n"
        "\n============(0/2)===========\n"
    )


@pytest.mark.parametrize("raw,expected", [("1", 1), ("2", 2), ("17", 17), ("0", 0)])
def test_parse_page_number(raw, expected) -> None:
    assert parse_page_number(raw) == expected


@pytest.mark.parametrize("raw", ["", "two", "-3", "2.0", "1e2"])
def test_parse_page_number_rejects(raw) -> None:
    assert parse_page_number(raw) is None
