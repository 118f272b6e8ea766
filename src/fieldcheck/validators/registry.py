"""Rule registry: named predicates consulted during dispatch."""

import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from .base import Predicate
from .rules import get_all_default_rules

logger = logging.getLogger(__name__)

# Read-only table of the built-in rules; every RuleSet starts from it.
BUILTIN_RULES: Mapping[str, Predicate] = MappingProxyType(get_all_default_rules())


class RuleSet:
    """
    Mapping from rule name to predicate.

    Registering a name that already exists replaces its predicate. There is no
    per-name removal; ``reset()`` restores the built-in table.

    Usage:
        rules = RuleSet()  # built-in rules
        rules.register("even", lambda s: s.isdigit() and int(s) % 2 == 0)

        # Custom rules only:
        rules = RuleSet({"even": is_even}, include_defaults=False)
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, Predicate]] = None,
        include_defaults: bool = True,
    ):
        self._lock = threading.RLock()
        self._include_defaults = include_defaults
        self._rules: Dict[str, Predicate] = {}
        if include_defaults:
            self._rules.update(BUILTIN_RULES)
        if overrides:
            self._rules.update(overrides)

    def register(self, name: str, predicate: Predicate) -> None:
        with self._lock:
            replaced = name in self._rules
            self._rules[name] = predicate
        logger.debug("%s rule %r", "Replaced" if replaced else "Registered", name)

    def get(self, name: str) -> Optional[Predicate]:
        with self._lock:
            return self._rules.get(name)

    def names(self) -> List[str]:
        with self._lock:
            return list(self._rules)

    def copy(self) -> "RuleSet":
        with self._lock:
            clone = RuleSet(include_defaults=self._include_defaults)
            clone._rules = dict(self._rules)
            return clone

    def with_overrides(self, overrides: Mapping[str, Predicate]) -> "RuleSet":
        """Return a new RuleSet with ``overrides`` layered on top of this one."""
        merged = self.copy()
        for name, predicate in overrides.items():
            merged.register(name, predicate)
        return merged

    def reset(self) -> None:
        """Drop every registration and restore the starting built-in table."""
        with self._lock:
            self._rules.clear()
            if self._include_defaults:
                self._rules.update(BUILTIN_RULES)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._rules

    def __len__(self) -> int:
        with self._lock:
            return len(self._rules)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        return f"RuleSet({sorted(self.names())!r})"


# Process-wide rule set used when callers do not pass their own.
_default_rules = RuleSet()


def get_default_rules() -> RuleSet:
    """Return the process-wide default rule set."""
    return _default_rules


def register_rule(name: str, predicate: Predicate) -> None:
    """Insert or replace ``name`` in the process-wide default rule set."""
    _default_rules.register(name, predicate)
