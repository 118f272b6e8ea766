"""Pytest configuration and fixtures."""

from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel

from fieldcheck import rule_field, rule_metadata


class SearchParams(BaseModel):
    """Typical list-endpoint query parameters."""

    ids: str = rule_field("comma_separated_numbers", default="")
    page: str = rule_field("number", default="")
    name: str = rule_field("alphabet", default="")
    sort: str = rule_field("sort_format", default="")
    note: str = ""


@dataclass
class PriceFilter:
    """Dataclass record with rules in field metadata."""

    min_price: str = field(default="", metadata=rule_metadata("number"))
    max_price: str = field(default="", metadata=rule_metadata("number"))
    currency: str = field(default="", metadata=rule_metadata("alphabet"))


@pytest.fixture
def valid_search_params() -> SearchParams:
    """Search parameters where every tagged field passes its rule."""
    return SearchParams(ids="1,2,3", page="2", name="Alice", sort="name desc")


@pytest.fixture
def empty_search_params() -> SearchParams:
    """Search parameters with nothing filled in."""
    return SearchParams()


@pytest.fixture
def valid_price_filter() -> PriceFilter:
    return PriceFilter(min_price="10", max_price="99.5", currency="EUR")


@pytest.fixture(autouse=True)
def reset_default_rules():
    """Automatically restore the built-in rule set around each test."""
    from fieldcheck.validators.registry import get_default_rules

    get_default_rules().reset()
    yield
    get_default_rules().reset()


@pytest.fixture(autouse=True)
def clear_fieldcheck_env(monkeypatch):
    """Keep environment overrides from leaking into tests."""
    monkeypatch.delenv("FIELDCHECK_UNKNOWN_RULES", raising=False)
