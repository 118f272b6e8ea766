"""
Field extraction: turn a record into the ordered list of fields to validate.

A field is kept only when it has both a non-blank value and a non-blank rule
annotation under the requested tag name. Supported records:

- pydantic models, rules in ``Field(json_schema_extra={tag: rule})``
- dataclass instances, rules in ``field(metadata={tag: rule})``
- ``Describable`` implementations, which list their own fields
"""

import dataclasses
import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from ..config import DEFAULT_TAG_NAME
from ..schemas.base import FieldDescriptor
from .base import Describable, FieldTriple

logger = logging.getLogger(__name__)


def rule_field(rule: str, *, tag_name: str = DEFAULT_TAG_NAME, **kwargs: Any) -> Any:
    """
    Declare a pydantic field validated by ``rule``.

    Example:
        class SearchParams(BaseModel):
            page: str = rule_field("number", default="")
    """
    extra = kwargs.pop("json_schema_extra", None) or {}
    return Field(json_schema_extra={**extra, tag_name: rule}, **kwargs)


def rule_metadata(rule: str, *, tag_name: str = DEFAULT_TAG_NAME) -> Dict[str, str]:
    """Metadata mapping for ``dataclasses.field(metadata=...)``."""
    return {tag_name: rule}


def _value_as_string(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    if not text.strip():
        return None
    return text


def _rule_as_string(rule: Any) -> Optional[str]:
    # Blank rules are skipped; others are kept as written, padding included.
    if not isinstance(rule, str) or not rule.strip():
        return None
    return rule


def _pydantic_triples(record: BaseModel, tag_name: str) -> Iterable[FieldTriple]:
    for name, info in type(record).model_fields.items():
        extra = info.json_schema_extra
        rule = extra.get(tag_name) if isinstance(extra, dict) else None
        yield name, getattr(record, name), rule


def _dataclass_triples(record: Any, tag_name: str) -> Iterable[FieldTriple]:
    for f in dataclasses.fields(record):
        yield f.name, getattr(record, f.name), f.metadata.get(tag_name)


def _triples_for(record: Any, tag_name: str) -> Iterable[FieldTriple]:
    if isinstance(record, type):
        raise TypeError(
            f"Expected a record instance, got the class {record.__name__}"
        )
    if isinstance(record, Describable):
        return record.describe_fields(tag_name)
    if isinstance(record, BaseModel):
        return _pydantic_triples(record, tag_name)
    if dataclasses.is_dataclass(record):
        return _dataclass_triples(record, tag_name)
    raise TypeError(
        f"Cannot extract fields from {type(record).__name__}: expected a "
        "pydantic model, a dataclass instance, or a Describable"
    )


def _build_descriptors(triples: Iterable[FieldTriple]) -> List[FieldDescriptor]:
    """Keep the triples with a non-blank value and rule, preserving order."""
    descriptors = []
    for name, value, rule in triples:
        value_str = _value_as_string(value)
        rule_str = _rule_as_string(rule)
        if not name or value_str is None or rule_str is None:
            continue
        descriptors.append(FieldDescriptor(name=name, value=value_str, rule=rule_str))
    return descriptors


def extract(record: Any, tag_name: str = DEFAULT_TAG_NAME) -> List[FieldDescriptor]:
    """
    List the validated fields of ``record`` in declaration order.

    Args:
        record: pydantic model, dataclass instance, or Describable
        tag_name: Annotation key rules are read from

    Returns:
        One FieldDescriptor per field with both a value and a rule

    Raises:
        TypeError: If ``record`` is not a supported record instance
    """
    descriptors = _build_descriptors(_triples_for(record, tag_name))
    logger.debug(
        "Extracted %d field(s) tagged %r from %s",
        len(descriptors),
        tag_name,
        type(record).__name__,
    )
    return descriptors
