"""Text processing utilities."""

import re

# Non-breaking spaces are content, not layout, so they are left alone
BLANKS = " \t"
WHITESPACE = " \t\r\n\f"

_WHITESPACE_RUN = re.compile(r"[ \t\r\n\f]+")


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single character.

    A run containing a line break becomes one newline; any other run of
    spaces and tabs becomes one space.

    Args:
        text: Raw text from a markup fragment

    Returns:
        Text in which no two whitespace characters are adjacent

    Example:
        collapse_whitespace("a  \\t b")   # "a b"
        collapse_whitespace("a \\n  b")   # "a\\nb"
    """

    def replace(match: re.Match) -> str:
        return "\n" if "\n" in match.group() else " "

    return _WHITESPACE_RUN.sub(replace, text)


def ends_with_blank(text: str) -> bool:
    """Check if text ends with a space or tab."""
    return bool(text) and text[-1] in BLANKS
