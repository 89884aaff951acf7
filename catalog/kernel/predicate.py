"""
Catalog Kernel — Predicate Evaluator

Pure function: (record, state) → bool

A record is included when it passes all three filters:
  search    — case-insensitive substring of the product name ("" matches all)
  owner     — no owner selected, or the category's owner is the selected one
  category  — no categories selected, or the record's category is among them
"""

from __future__ import annotations

from catalog.kernel.types import FilterState, ViewRecord


def matches(record: ViewRecord, state: FilterState) -> bool:
    """Return True if the record should be shown under the given filter state."""
    return (
        matches_search(record, state.search)
        and matches_owner(record, state.selected_user_id)
        and matches_categories(record, state.selected_category_ids)
    )


def matches_search(record: ViewRecord, search: str) -> bool:
    # Plain lower() on both sides, no trimming, no locale rules
    return search.lower() in record.name.lower()


def matches_owner(record: ViewRecord, user_id: int | None) -> bool:
    return user_id is None or record.owner.id == user_id


def matches_categories(record: ViewRecord, category_ids: tuple[int, ...]) -> bool:
    return not category_ids or record.category.id in category_ids
