"""
Catalog Kernel — Reducer

Pure function: (state, transition) → ReduceResult
No side effects. No IO. Deterministic.

Each handler replaces exactly the fields its interaction owns. Every
well-formed transition applies; malformed or unknown ones are reported
in the result rather than raised.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from catalog.kernel.transitions import validate_transition
from catalog.kernel.types import (
    ORDER_ASC,
    ORDER_DESC,
    FilterState,
    ReduceResult,
    SortSpec,
    Transition,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def empty_state() -> FilterState:
    """
    The initial filter state: no search, all owners, all categories, unsorted.
    """
    return FilterState()


def reduce(state: FilterState, transition: Transition) -> ReduceResult:
    """
    Apply one transition to the current filter state.
    Returns the new state + applied flag + error.

    Pure function. FilterState is frozen; handlers build a new one.
    """
    handler = _HANDLERS.get(transition.type)
    if handler is None:
        return ReduceResult(
            state=state,
            applied=False,
            error=f"UNKNOWN_TRANSITION: {transition.type}",
        )

    errors = validate_transition(transition)
    if errors:
        return _reject(state, "INVALID_PAYLOAD", "; ".join(errors))

    return handler(state, transition.payload)


def replay(transitions: Iterable[Transition], state: FilterState | None = None) -> FilterState:
    """
    Fold transitions over a starting state (empty_state() by default).
    Unapplied transitions are skipped.
    """
    current = state if state is not None else empty_state()
    for transition in transitions:
        result = reduce(current, transition)
        if result.applied:
            current = result.state
    return current


def next_sort(current: SortSpec, column: str) -> SortSpec:
    """
    The sort cycle for one header click.

    Same column:      asc → desc → unsorted
    Different column: always (column, asc)
    """
    if current.column == column and current.order == ORDER_ASC:
        return SortSpec(column, ORDER_DESC)
    if current.column == column and current.order == ORDER_DESC:
        return SortSpec()
    return SortSpec(column, ORDER_ASC)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _reject(state: FilterState, code: str, msg: str) -> ReduceResult:
    return ReduceResult(state=state, applied=False, error=f"{code}: {msg}")


def _ok(state: FilterState) -> ReduceResult:
    return ReduceResult(state=state, applied=True)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _handle_search_set(state: FilterState, p: dict[str, Any]) -> ReduceResult:
    # Verbatim: no trimming, no case folding
    return _ok(replace(state, search=p["text"]))


def _handle_owner_select(state: FilterState, p: dict[str, Any]) -> ReduceResult:
    return _ok(replace(state, selected_user_id=p["user_id"]))


def _handle_category_toggle(state: FilterState, p: dict[str, Any]) -> ReduceResult:
    category_id = p["category_id"]
    selected = state.selected_category_ids
    if category_id in selected:
        updated = tuple(c for c in selected if c != category_id)
    else:
        updated = (*selected, category_id)
    return _ok(replace(state, selected_category_ids=updated))


def _handle_category_clear(state: FilterState, p: dict[str, Any]) -> ReduceResult:
    return _ok(replace(state, selected_category_ids=()))


def _handle_sort_cycle(state: FilterState, p: dict[str, Any]) -> ReduceResult:
    return _ok(replace(state, sort=next_sort(state.sort, p["column"])))


def _handle_filters_reset(state: FilterState, p: dict[str, Any]) -> ReduceResult:
    return _ok(empty_state())


# ---------------------------------------------------------------------------
# Handler dispatch table
# ---------------------------------------------------------------------------

_HANDLERS: dict[str, Any] = {
    "search.set": _handle_search_set,
    "owner.select": _handle_owner_select,
    "category.toggle": _handle_category_toggle,
    "category.clear": _handle_category_clear,
    "sort.cycle": _handle_sort_cycle,
    "filters.reset": _handle_filters_reset,
}
