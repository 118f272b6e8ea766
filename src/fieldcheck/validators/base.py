"""Base abstractions for rule predicates and describable records."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Tuple

# A rule predicate takes a field's string value and says whether it is valid.
Predicate = Callable[[str], bool]

# (field name, field value, rule name)
FieldTriple = Tuple[str, Any, str]


class Describable(ABC):
    """
    Record type that lists its own validated fields.

    Implement this when a record is neither a pydantic model nor a dataclass,
    or when rule names are computed rather than declared.
    """

    @abstractmethod
    def describe_fields(self, tag_name: str) -> Iterable[FieldTriple]:
        """
        List fields to validate, in declaration order.

        Args:
            tag_name: Annotation key being validated (e.g. "validation")

        Returns:
            Iterable of (name, value, rule) triples. Entries with an empty
            value or rule are dropped by the extractor.
        """
        ...
