"""Number, list, alphabet, and sort-clause format predicates."""

import re

# Signed decimal literal: 42, -3.5, +0.25, .5, 7.
_NUMBER_REGEX = re.compile(r"[+\-]?(?:(?:0|[1-9]\d*)(?:\.\d*)?|\.\d+)", re.ASCII)

_ALPHABET_REGEX = re.compile(r"[A-Za-z]+")

_SORT_CHARS_REGEX = re.compile(r"[a-zA-Z\t\n\f\r _]+")

_SORT_DIRECTIONS = frozenset({"asc", "desc"})


def _is_blank(s: str) -> bool:
    return not s or not s.strip()


def is_number(s: str) -> bool:
    """Check that ``s`` is a decimal literal with an optional sign."""
    if _is_blank(s):
        return False
    return _NUMBER_REGEX.fullmatch(s) is not None


def is_comma_separated_number(s: str) -> bool:
    """Check that every comma-separated segment of ``s`` is a number."""
    if _is_blank(s):
        return False

    for num_as_str in s.split(","):
        if not is_number(num_as_str):
            return False

    return True


def is_alphabet(s: str) -> bool:
    """Check that ``s`` holds ASCII letters only."""
    if _is_blank(s):
        return False
    return _ALPHABET_REGEX.fullmatch(s) is not None


def is_sort_format(s: str) -> bool:
    """
    Check that ``s`` is a sort clause: ``field`` or ``field asc|desc``.

    The direction is case-insensitive. Tokens are split on single spaces, so
    doubled or trailing spaces produce an empty token and fail.
    """
    if _is_blank(s):
        return False

    if _SORT_CHARS_REGEX.fullmatch(s) is None:
        return False

    sort_elements = s.split(" ")
    if len(sort_elements) > 2:
        return False

    if len(sort_elements) == 2 and sort_elements[1].lower() not in _SORT_DIRECTIONS:
        return False

    return True
