"""
Catalog Kernel — Query Orchestrator

Sits between the pure functions (join, predicate, sorting, reducer) and the
caller (CLI, renderer). Owns the single FilterState and keeps the visible
result in step with it.

  recompute(collections, state)  — full pipeline: join → filter → sort
  run_query(records, state)      — filter → sort over already-joined records
  ProductQuery                   — joins once, then re-runs filter + sort
                                   synchronously after every transition
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from catalog.kernel import transitions
from catalog.kernel.join import join_all
from catalog.kernel.predicate import matches
from catalog.kernel.reducer import empty_state, reduce
from catalog.kernel.sorting import sort_records
from catalog.kernel.types import (
    FilterState,
    QueryResult,
    RawCollections,
    ReduceResult,
    Transition,
    ViewRecord,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pure pipeline
# ---------------------------------------------------------------------------


def run_query(records: Iterable[ViewRecord], state: FilterState) -> list[ViewRecord]:
    """Keep the records that match `state`, then stable-sort them by `state.sort`."""
    survivors = [r for r in records if matches(r, state)]
    return sort_records(survivors, state.sort)


def recompute(collections: RawCollections, state: FilterState) -> list[ViewRecord]:
    """
    Run the whole pipeline from raw collections.
    Raises DataIntegrityError if the collections don't join.
    An empty list is a normal result.
    """
    records = join_all(collections.products, collections.categories, collections.users)
    return run_query(records, state)


# ---------------------------------------------------------------------------
# Stateful orchestrator
# ---------------------------------------------------------------------------


class ProductQuery:
    """
    The product list plus its filter state.

    The join runs once in the constructor (raw collections never change) and a
    DataIntegrityError there aborts construction. After that, every dispatch
    reduces the state and recomputes `results` before returning.
    """

    def __init__(self, collections: RawCollections, state: FilterState | None = None) -> None:
        self.collections = collections
        self._records: tuple[ViewRecord, ...] = tuple(
            join_all(collections.products, collections.categories, collections.users)
        )
        self._state = state if state is not None else empty_state()
        self._results = run_query(self._records, self._state)

    # -- read side ----------------------------------------------------------

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def records(self) -> tuple[ViewRecord, ...]:
        """The full join, in product order."""
        return self._records

    @property
    def results(self) -> list[ViewRecord]:
        """The filtered, sorted records for the current state."""
        return list(self._results)

    @property
    def is_empty(self) -> bool:
        return not self._results

    def snapshot(self) -> QueryResult:
        """Everything the renderer needs, frozen at the current state."""
        return QueryResult(
            state=self._state,
            records=list(self._results),
            users=self.collections.users,
            categories=self.collections.categories,
        )

    # -- write side ---------------------------------------------------------

    def dispatch(self, transition: Transition) -> ReduceResult:
        """Apply one transition and recompute the results."""
        result = reduce(self._state, transition)
        if not result.applied:
            logger.warning("ProductQuery: transition not applied: %s", result.error)
            return result

        self._state = result.state
        self._results = run_query(self._records, self._state)
        logger.debug(
            "ProductQuery: %s → %d of %d records",
            transition.type,
            len(self._results),
            len(self._records),
        )
        return result

    def set_search(self, text: str) -> ReduceResult:
        return self.dispatch(transitions.set_search(text))

    def select_owner(self, user_id: int | None) -> ReduceResult:
        return self.dispatch(transitions.select_owner(user_id))

    def toggle_category(self, category_id: int) -> ReduceResult:
        return self.dispatch(transitions.toggle_category(category_id))

    def clear_categories(self) -> ReduceResult:
        return self.dispatch(transitions.clear_categories())

    def cycle_sort(self, column: str) -> ReduceResult:
        return self.dispatch(transitions.cycle_sort(column))

    def reset_all(self) -> ReduceResult:
        return self.dispatch(transitions.reset_all())
