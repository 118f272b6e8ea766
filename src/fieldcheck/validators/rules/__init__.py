"""Built-in validation rules."""

from typing import Callable, Dict

from .format_rules import (
    is_alphabet,
    is_comma_separated_number,
    is_number,
    is_sort_format,
)


def get_all_default_rules() -> Dict[str, Callable[[str], bool]]:
    """Map every built-in rule name to its predicate."""
    return {
        "comma_separated_numbers": is_comma_separated_number,
        "number": is_number,
        "alphabet": is_alphabet,
        "sort_format": is_sort_format,
    }


__all__ = [
    "get_all_default_rules",
    "is_alphabet",
    "is_comma_separated_number",
    "is_number",
    "is_sort_format",
]
