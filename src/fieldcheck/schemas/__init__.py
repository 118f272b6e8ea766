"""Data models for fieldcheck."""

from .base import FieldDescriptor, UnknownRulePolicy, ValidationOutcome

__all__ = [
    "FieldDescriptor",
    "UnknownRulePolicy",
    "ValidationOutcome",
]
