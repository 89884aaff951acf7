"""
Catalog Kernel — Transitions

Factory functions for the six interactions, and structural validation.
Used by the query orchestrator and the CLI to build transitions before
feeding them to the reducer, and by tests to build them concisely.

Validation is structural (well-formed?) not semantic. Selecting an owner or
category id that does not exist is legal — it simply matches nothing.
"""

from __future__ import annotations

from typing import Any

from catalog.kernel.types import SORTABLE_COLUMNS, TRANSITION_TYPES, Transition

# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def set_search(text: str) -> Transition:
    return Transition(type="search.set", payload={"text": text})


def select_owner(user_id: int | None) -> Transition:
    """None selects "All" owners."""
    return Transition(type="owner.select", payload={"user_id": user_id})


def toggle_category(category_id: int) -> Transition:
    return Transition(type="category.toggle", payload={"category_id": category_id})


def clear_categories() -> Transition:
    return Transition(type="category.clear")


def cycle_sort(column: str) -> Transition:
    return Transition(type="sort.cycle", payload={"column": column})


def reset_all() -> Transition:
    return Transition(type="filters.reset")


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_transition(transition: Transition) -> list[str]:
    """
    Validate a transition's type and payload structure.
    Returns a list of error strings. Empty list = valid.
    """
    errors: list[str] = []

    if transition.type not in TRANSITION_TYPES:
        errors.append(f"Unknown transition type: {transition.type}")
        return errors

    if not isinstance(transition.payload, dict):
        errors.append("Payload must be a non-null object")
        return errors

    validator = _VALIDATORS.get(transition.type)
    if validator:
        errors.extend(validator(transition.payload))

    return errors


def _is_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_search_set(p: dict) -> list[str]:
    if "text" not in p:
        return ["search.set requires 'text'"]
    if not isinstance(p["text"], str):
        return ["search.set 'text' must be a string"]
    return []


def _validate_owner_select(p: dict) -> list[str]:
    if "user_id" not in p:
        return ["owner.select requires 'user_id'"]
    if p["user_id"] is not None and not _is_id(p["user_id"]):
        return [f"Invalid user id: {p['user_id']!r}"]
    return []


def _validate_category_toggle(p: dict) -> list[str]:
    if "category_id" not in p:
        return ["category.toggle requires 'category_id'"]
    if not _is_id(p["category_id"]):
        return [f"Invalid category id: {p['category_id']!r}"]
    return []


def _validate_sort_cycle(p: dict) -> list[str]:
    if "column" not in p:
        return ["sort.cycle requires 'column'"]
    if p["column"] not in SORTABLE_COLUMNS:
        return [f"Unknown sort column: {p['column']!r}"]
    return []


_VALIDATORS: dict[str, Any] = {
    "search.set": _validate_search_set,
    "owner.select": _validate_owner_select,
    "category.toggle": _validate_category_toggle,
    "sort.cycle": _validate_sort_cycle,
}
