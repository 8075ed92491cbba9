"""
Discount service - resolves user-entered codes against the discount table
"""
from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional, Union

DiscountTable = Union[Mapping[str, Any], Iterable[Dict[str, Any]]]


@dataclass(frozen=True)
class DiscountDescriptor:
    """A resolved discount code"""
    code: str
    percentage: float
    description: str = ""


def normalize_code(code: str) -> str:
    return code.strip().upper()


def is_valid_percentage(value: Any) -> bool:
    # A usable percentage is a real number in (0, 100]
    return isinstance(value, (int, float)) and not isinstance(value, bool) and 0 < value <= 100


def _descriptor(code: str, percentage: Any, description: str = "") -> Optional[DiscountDescriptor]:
    if not is_valid_percentage(percentage):
        return None
    return DiscountDescriptor(code, percentage, description)


def resolve_discount(code: str, table: DiscountTable) -> Optional[DiscountDescriptor]:
    """Look a code up in a discount table.

    ``table`` is either a mapping of code to percentage (or to a record with a
    ``discount`` field) or the data file's list of ``{"code", "discount"}``
    records. Matching ignores surrounding whitespace and case. Blank codes
    are not special-cased here; callers reject them before resolving.
    Entries whose percentage is not a number in (0, 100] never resolve.
    """
    wanted = normalize_code(code)

    if isinstance(table, Mapping):
        for key, value in table.items():
            if normalize_code(key) == wanted:
                if isinstance(value, Mapping):
                    return _descriptor(wanted, value.get("discount"), value.get("description", ""))
                return _descriptor(wanted, value)
        return None

    for record in table:
        if normalize_code(record.get("code", "")) == wanted:
            return _descriptor(wanted, record.get("discount"), record.get("description", ""))
    return None


class DiscountService:
    # Wraps the discount table from the data file

    def __init__(self, discount_codes: DiscountTable):
        self.discount_codes = discount_codes

    def validate_code(self, code: str) -> Optional[DiscountDescriptor]:
        return resolve_discount(code, self.discount_codes)
