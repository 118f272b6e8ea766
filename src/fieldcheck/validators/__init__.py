"""
Field validation against named rules.

Records declare a rule name per field; the engine runs each field's value
through the matching predicate and reports the first field that fails.
"""

from ..schemas.base import ValidationOutcome
from .base import Describable, Predicate
from .engine import ValidationEngine
from .extractor import extract, rule_field, rule_metadata
from .registry import BUILTIN_RULES, RuleSet, get_default_rules, register_rule


def validate(
    record, tag_name=None, rules=None, unknown_rules=None
) -> ValidationOutcome:
    """
    One-liner validation function.

    Args:
        record: pydantic model, dataclass instance, or Describable
        tag_name: Annotation key rules are read from (default: "validation")
        rules: Optional RuleSet (default: process-wide rule set)
        unknown_rules: "lenient" (default) or "strict"

    Returns:
        ValidationOutcome, unpackable as (success, failing_field)
    """
    engine = ValidationEngine(rules=rules, tag_name=tag_name, unknown_rules=unknown_rules)
    return engine.validate(record)


__all__ = [
    "BUILTIN_RULES",
    "Describable",
    "Predicate",
    "RuleSet",
    "ValidationEngine",
    "extract",
    "get_default_rules",
    "register_rule",
    "rule_field",
    "rule_metadata",
    "validate",
]
