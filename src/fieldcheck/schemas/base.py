"""Result types produced by field extraction and rule dispatch."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union


class UnknownRulePolicy(str, Enum):
    """How the dispatcher treats a field tagged with an unregistered rule."""

    LENIENT = "lenient"
    STRICT = "strict"

    @classmethod
    def parse(cls, value: Union[str, "UnknownRulePolicy"]) -> "UnknownRulePolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            available = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Unknown rule policy: {value!r}. Available: {available}"
            ) from None


@dataclass
class FieldDescriptor:
    """One annotated field pulled off a record, plus its check result."""

    name: str = ""
    value: str = ""
    rule: str = ""
    passed: bool = False

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.value or self.rule)


@dataclass
class ValidationOutcome:
    """
    Result of validating a record.

    On success ``failing_field`` is an empty descriptor. The outcome is truthy
    when validation passed and unpacks as ``(success, failing_field)``.
    """

    success: bool
    failing_field: FieldDescriptor = field(default_factory=FieldDescriptor)

    def __bool__(self) -> bool:
        return self.success

    def __iter__(self) -> Iterator:
        return iter((self.success, self.failing_field))
