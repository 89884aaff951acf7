"""
Catalog Kernel — the pure product-list engine.

Five components:
  join       — (products, categories, users) → view records
  predicate  — (record, state) → included?
  sorting    — stable ordering by id / name / category / user
  reducer    — (state, transition) → state  (pure, deterministic)
  query      — joins once, re-runs filter + sort after every transition

Plus the loader (raw records → RawCollections) and the renderer
(query result → HTML / text).
"""

from catalog.kernel.errors import CatalogError, DataIntegrityError, RecordValidationError
from catalog.kernel.join import join_all, resolve_owners
from catalog.kernel.loader import (
    load_collections,
    load_collections_from_dir,
    load_sample_collections,
    load_transitions,
)
from catalog.kernel.predicate import matches
from catalog.kernel.query import ProductQuery, recompute, run_query
from catalog.kernel.reducer import empty_state, reduce, replay
from catalog.kernel.renderer import render
from catalog.kernel.sorting import sort_key, sort_records

__all__ = [
    "CatalogError",
    "DataIntegrityError",
    "RecordValidationError",
    "join_all",
    "resolve_owners",
    "matches",
    "sort_key",
    "sort_records",
    "reduce",
    "replay",
    "empty_state",
    "recompute",
    "run_query",
    "ProductQuery",
    "load_collections",
    "load_collections_from_dir",
    "load_sample_collections",
    "load_transitions",
    "render",
]
