"""
Catalog Kernel — Sort Comparator

Resolves a column to a per-record key and orders records by it.

  id        → product id (int)
  name      → product name
  category  → category title
  user      → owner name

Sorting is stable in both directions: records with equal keys keep their
input order. An unsorted spec (None, None) leaves the input order untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from catalog.kernel.types import (
    ORDER_DESC,
    SORT_CATEGORY,
    SORT_ID,
    SORT_NAME,
    SORT_USER,
    SortSpec,
    ViewRecord,
)

# ---------------------------------------------------------------------------
# Key resolution
# ---------------------------------------------------------------------------

_KEY_GETTERS: dict[str, Any] = {
    SORT_ID: lambda r: r.id,
    SORT_NAME: lambda r: r.name,
    SORT_CATEGORY: lambda r: r.category.title,
    SORT_USER: lambda r: r.owner.name,
}


def sort_key(record: ViewRecord, column: str) -> int | str:
    """Return the value a record is ordered by for the given column."""
    getter = _KEY_GETTERS.get(column)
    if getter is None:
        raise ValueError(f"Unknown sort column: {column!r}")
    return getter(record)


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


def compare(a: ViewRecord, b: ViewRecord, spec: SortSpec) -> int:
    """
    Three-way comparison of two records under a sort spec.
    Returns -1, 0 or 1; the sign is flipped for descending order.
    """
    if not spec.active:
        return 0

    ka = sort_key(a, spec.column)
    kb = sort_key(b, spec.column)
    if ka < kb:
        result = -1
    elif ka > kb:
        result = 1
    else:
        result = 0

    return -result if spec.order == ORDER_DESC else result


def sort_records(records: Iterable[ViewRecord], spec: SortSpec) -> list[ViewRecord]:
    """
    Return a new list of records ordered by `spec`.

    Uses sorted() with reverse=True for descending order; Python keeps equal
    elements in input order either way, which is the same result as sorting
    with the sign-flipped comparator.
    """
    if not spec.active:
        return list(records)

    getter = _KEY_GETTERS[spec.column]
    return sorted(records, key=getter, reverse=spec.order == ORDER_DESC)
