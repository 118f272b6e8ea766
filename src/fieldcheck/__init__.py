"""
fieldcheck - Validate record fields against named rules

Declare a rule name on each field of a pydantic model or dataclass, then
validate the record to find the first field whose value breaks its rule.
"""

__version__ = "0.1.0"

import logging
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("fieldcheck requires Python 3.10 or higher")

from .config import DEFAULT_TAG_NAME
from .schemas.base import FieldDescriptor, UnknownRulePolicy, ValidationOutcome
from .validators import (
    BUILTIN_RULES,
    Describable,
    RuleSet,
    ValidationEngine,
    extract,
    get_default_rules,
    register_rule,
    rule_field,
    rule_metadata,
    validate,
)
from .validators.rules import (
    is_alphabet,
    is_comma_separated_number,
    is_number,
    is_sort_format,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Main API
    "validate",
    "register_rule",
    "extract",
    "ValidationEngine",
    # Rules
    "RuleSet",
    "BUILTIN_RULES",
    "get_default_rules",
    "is_number",
    "is_comma_separated_number",
    "is_alphabet",
    "is_sort_format",
    # Record declaration
    "Describable",
    "rule_field",
    "rule_metadata",
    # Result types
    "FieldDescriptor",
    "ValidationOutcome",
    "UnknownRulePolicy",
    # Config
    "DEFAULT_TAG_NAME",
]
