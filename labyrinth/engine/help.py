"""
Help pages for the labyrinth commands.

Two fixed pages, each closed by a `(n/2)` footer.
"""

from __future__ import annotations

HELP_PAGE_COUNT = 2

HELP_PAGES: dict[int, list[tuple[str, str]]] = {
    1: [
        ("help", "Displays this message"),
        ("clear", "Clears commands on the screen"),
        ("tutorial", "Show the tutorial for this game"),
        ("go <direction>", "Move the player to the next direction"),
        ("ragequit", "Leaves the game (you will lose your progress)"),
        ("infos", "Display informations about the place you stand"),
    ],
    2: [
        ("continue", "to continue a story/speech"),
        ("skip", "skip this room to go to the next"),
        ("attack", "attacks the monster / NPC"),
    ],
}

HELP_USAGE = f"Usage: help [page], valid pages: ({', '.join(str(p) for p in HELP_PAGES)})"


def display_help(page_number: int) -> str:
    """Render one help page.

    A page number without a defined page renders only the header and
    the footer.

    Args:
        page_number: The page to render

    Returns:
        The page as a single multi-line string
    """
    text = "\nSHOWING 'Labyrinth' COMMANDS\n"
    text += "============================\n\n"

    for command, description in HELP_PAGES.get(page_number, []):
        text += f"- {command}: {description}\n"

    text += f"\n============({page_number}/{HELP_PAGE_COUNT})===========\n"
    return text


def parse_page_number(raw: str) -> int | None:
    """Parse a help page argument.

    Returns:
        The page number, or None if the argument is not a non-negative integer
    """
    try:
        page_number = int(raw)
    except ValueError:
        return None
    if page_number < 0:
        return None
    return page_number
