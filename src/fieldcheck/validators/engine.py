"""Validation engine that dispatches fields to rules and reports the first failure."""

import logging
from typing import Any, Iterable, Optional, Union

from ..config import DEFAULT_TAG_NAME, get_unknown_rule_policy
from ..schemas.base import FieldDescriptor, UnknownRulePolicy, ValidationOutcome
from .extractor import extract
from .registry import RuleSet, get_default_rules

logger = logging.getLogger(__name__)


class ValidationEngine:
    """
    Runs each tagged field of a record through its named rule.

    Fields are checked in declaration order and the first failure stops
    the run. Fields tagged with a rule the RuleSet does not know are skipped
    unless the engine is strict.

    Usage:
        engine = ValidationEngine()  # process-wide default rules
        ok, failing = engine.validate(params)

        # Own rules, fail on unknown names:
        engine = ValidationEngine(rules=RuleSet({"even": is_even}), unknown_rules="strict")
    """

    def __init__(
        self,
        rules: Optional[RuleSet] = None,
        tag_name: Optional[str] = None,
        unknown_rules: Optional[Union[str, UnknownRulePolicy]] = None,
    ):
        self._rules = rules
        self.tag_name = tag_name or DEFAULT_TAG_NAME
        if unknown_rules is None:
            self.unknown_rules = get_unknown_rule_policy()
        else:
            self.unknown_rules = UnknownRulePolicy.parse(unknown_rules)

    @property
    def rules(self) -> RuleSet:
        # Resolved per call so register_rule() is seen by existing engines.
        return self._rules if self._rules is not None else get_default_rules()

    def validate(self, record: Any) -> ValidationOutcome:
        """
        Validate ``record``'s tagged fields.

        Raises:
            TypeError: If ``record`` is not a supported record instance
        """
        return self.validate_fields(extract(record, self.tag_name))

    def validate_fields(self, descriptors: Iterable[FieldDescriptor]) -> ValidationOutcome:
        rules = self.rules
        for descriptor in descriptors:
            predicate = rules.get(descriptor.rule)
            if predicate is None:
                if self.unknown_rules is UnknownRulePolicy.STRICT:
                    logger.warning(
                        "Field %r uses unknown rule %r", descriptor.name, descriptor.rule
                    )
                    descriptor.passed = False
                    return ValidationOutcome(success=False, failing_field=descriptor)
                logger.debug(
                    "Skipping field %r: unknown rule %r", descriptor.name, descriptor.rule
                )
                continue

            descriptor.passed = bool(predicate(descriptor.value))
            if not descriptor.passed:
                logger.debug(
                    "Field %r failed rule %r", descriptor.name, descriptor.rule
                )
                return ValidationOutcome(success=False, failing_field=descriptor)

        return ValidationOutcome(success=True)
