"""
Configuration for fieldcheck.

Rules are read from the "validation" annotation key unless a caller passes
another tag name explicitly. The unknown-rule policy can be overridden
through the environment:
- FIELDCHECK_UNKNOWN_RULES: "lenient" (default) or "strict"
"""

import os

from .schemas.base import UnknownRulePolicy

DEFAULT_TAG_NAME = "validation"
DEFAULT_UNKNOWN_RULE_POLICY = UnknownRulePolicy.LENIENT

UNKNOWN_RULES_ENV = "FIELDCHECK_UNKNOWN_RULES"


def get_unknown_rule_policy() -> UnknownRulePolicy:
    """
    Policy for unregistered rule names, honouring FIELDCHECK_UNKNOWN_RULES.

    Raises:
        ValueError: If the environment holds an unrecognised policy
    """
    raw = os.getenv(UNKNOWN_RULES_ENV, "").strip()
    if not raw:
        return DEFAULT_UNKNOWN_RULE_POLICY
    return UnknownRulePolicy.parse(raw)


__all__ = [
    "DEFAULT_TAG_NAME",
    "DEFAULT_UNKNOWN_RULE_POLICY",
    "UNKNOWN_RULES_ENV",
    "get_unknown_rule_policy",
]
