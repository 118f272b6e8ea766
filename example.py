from dataclasses import dataclass, field

from dotenv import load_dotenv
from pydantic import BaseModel

from fieldcheck import RuleSet, register_rule, rule_field, rule_metadata, validate


# FIELDCHECK_UNKNOWN_RULES may be set in .env
load_dotenv()


class ListOrdersParams(BaseModel):
    """
    Query parameters for a list endpoint. Tag each field with a rule name.
    """

    ids: str = rule_field("comma_separated_numbers", default="")
    page: str = rule_field("number", default="")
    customer: str = rule_field("alphabet", default="")
    sort: str = rule_field("sort_format", default="")
    status: str = rule_field("order_status", default="")


@dataclass
class PriceRange:
    low: str = field(default="", metadata=rule_metadata("number"))
    high: str = field(default="", metadata=rule_metadata("number"))


ok, failing = validate(ListOrdersParams(ids="1,2,3", page="1", sort="created_at desc"))
print("valid:", ok)

ok, failing = validate(ListOrdersParams(page="first", customer="Bob1"))
print("valid:", ok, "| first failing field:", failing.name, repr(failing.value))

# Unknown rules are skipped until registered
register_rule("order_status", lambda s: s in {"open", "shipped", "closed"})
print("status check:", validate(ListOrdersParams(status="lost")))

# Per-call rule set that leaves the process-wide one alone
strict_numbers = RuleSet({"number": str.isdigit})
print("range:", validate(PriceRange(low="10", high="12.5"), rules=strict_numbers))
