"""The stock record and its JSON mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# JSON key -> (attribute name, expected Python type)
_JSON_FIELDS: dict[str, tuple[str, type]] = {
    "stockid": ("stock_id", int),
    "name": ("name", str),
    "price": ("price", int),
    "company": ("company", str),
}


def _check_value(json_key: str, expected: type, value: Any) -> Any:
    if expected is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"cannot use {value!r} as integer field {json_key!r}")
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"value {value} for {json_key!r} overflows a 64-bit integer")
        return value
    if not isinstance(value, str):
        raise ValueError(f"cannot use {value!r} as string field {json_key!r}")
    return value


@dataclass
class Stock:
    """One stock row: id, name, price and company."""

    stock_id: int = 0
    name: str = ""
    price: int = 0
    company: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the record keyed by its JSON field names."""
        return {
            "stockid": self.stock_id,
            "name": self.name,
            "price": self.price,
            "company": self.company,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Stock:
        """Build a stock from a decoded JSON object.

        Keys match case-insensitively, unknown keys are ignored and null
        values leave the field at its default. A value of the wrong type
        raises ValueError.
        """
        values: dict[str, Any] = {}
        for key, value in data.items():
            spec = _JSON_FIELDS.get(str(key).lower())
            if spec is None or value is None:
                continue
            attribute, expected = spec
            values[attribute] = _check_value(str(key).lower(), expected, value)
        return cls(**values)