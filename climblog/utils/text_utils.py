"""
Text helpers for line-oriented user input.
"""


def clean_input(text: str) -> str:
    """Strip leading and trailing whitespace from a line of input."""
    return text.strip()


def equals_ignore_case(a: str, b: str) -> bool:
    """
    Compare two strings case-insensitively.

    Example:
        >>> equals_ignore_case("Midnight Lightning", "midnight lightning")
        True
    """
    return a.casefold() == b.casefold()


def is_integer(text: str) -> bool:
    """True for a non-empty string made only of decimal digits."""
    return bool(text) and text.isascii() and text.isdigit()
