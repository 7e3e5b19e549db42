"""Row types returned by the reports.

Field order is the report's column order; the CLI prints fields in
declaration order. Every column can be None because the reports are built
on outer joins and null-propagating aggregates.
"""

from dataclasses import astuple, dataclass, fields
from decimal import Decimal
from typing import Any, Sequence


def column_names(row_type: type) -> list[str]:
    return [f.name for f in fields(row_type)]


def as_tuple(row: Any) -> tuple:
    return astuple(row)


def from_rows(row_type: type, rows: Sequence[Sequence[Any]]) -> list:
    """Build row dataclasses from positional DB-API result tuples."""
    width = len(fields(row_type))
    out = []
    for row in rows:
        if len(row) != width:
            raise ValueError(
                f"{row_type.__name__} expects {width} columns, got {len(row)}"
            )
        out.append(row_type(*row))
    return out


@dataclass
class StoreManager:
    manager_first_name: str | None
    manager_last_name: str | None
    address: str | None
    district: str | None
    city: str | None
    country: str | None


@dataclass
class InventoryItem:
    store_id: int
    inventory_id: int
    title: str | None
    rating: str | None
    rental_rate: Decimal | None
    replacement_cost: Decimal | None


@dataclass
class RatingCount:
    store_id: int
    rating: str | None
    inventory_items: int


@dataclass
class CategoryRisk:
    store_id: int
    category: str | None
    films: int
    avg_replacement_cost: Decimal | None
    total_replacement_cost: Decimal | None


@dataclass
class CustomerAddress:
    first_name: str
    last_name: str
    store_id: int
    active: int | bool | None
    address: str | None
    city: str | None
    country: str | None


@dataclass
class CustomerPayments:
    """Rental/payment totals per customer *name* (namesakes are merged)."""

    first_name: str
    last_name: str
    total_rentals: int
    total_payment_amount: Decimal | None


@dataclass
class Stakeholder:
    type: str
    first_name: str | None
    last_name: str | None
    company_name: str | None


@dataclass
class AwardBucket:
    number_of_awards: str
    pct_w_one_film: Decimal | float | None
