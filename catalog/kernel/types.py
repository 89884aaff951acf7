"""
Catalog Kernel — Shared Types

Data classes used across join, predicate, sorting, reducer, query and renderer.
These are the contracts that bind the kernel together.

- RawCollections: the three immutable inputs, loaded once
- ViewRecord: a product with its category and owner embedded
- SortSpec / FilterState: the filter state machine's state
- Transition / ReduceResult: the reducer's input and output
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from catalog.kernel.models import Category, Product, User

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SORT_ID = "id"
SORT_NAME = "name"
SORT_CATEGORY = "category"
SORT_USER = "user"

# Column order is also the table's header order
SORTABLE_COLUMNS: tuple[str, ...] = (SORT_ID, SORT_NAME, SORT_CATEGORY, SORT_USER)

ORDER_ASC = "asc"
ORDER_DESC = "desc"

SORT_ORDERS: tuple[str, ...] = (ORDER_ASC, ORDER_DESC)

TRANSITION_TYPES: set[str] = {
    "search.set",
    "owner.select",
    "category.toggle",
    "category.clear",
    "sort.cycle",
    "filters.reset",
}


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RawCollections:
    """The three source collections. Never mutated after load."""

    users: tuple[User, ...] = ()
    categories: tuple[Category, ...] = ()
    products: tuple[Product, ...] = ()


@dataclass(frozen=True)
class ViewRecord:
    """
    A product enriched with its resolved category and that category's owner.
    Category and owner are shared immutable records, never back-references.
    """

    id: int
    name: str
    category_id: int
    category: Category
    owner: User

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "categoryId": self.category_id,
            "category": self.category.model_dump(by_alias=True),
            "owner": self.owner.model_dump(by_alias=True),
        }


@dataclass(frozen=True)
class SortSpec:
    """
    (column, order). Both set or both None — an unsorted spec is (None, None).
    """

    column: str | None = None
    order: str | None = None

    def __post_init__(self) -> None:
        if (self.column is None) != (self.order is None):
            raise ValueError(f"column and order must both be set or both be None, got ({self.column!r}, {self.order!r})")
        if self.column is not None and self.column not in SORTABLE_COLUMNS:
            raise ValueError(f"Unknown sort column: {self.column!r}")
        if self.order is not None and self.order not in SORT_ORDERS:
            raise ValueError(f"Unknown sort order: {self.order!r}")

    @property
    def active(self) -> bool:
        return self.column is not None

    def to_dict(self) -> dict[str, Any]:
        return {"column": self.column, "order": self.order}


@dataclass(frozen=True)
class FilterState:
    """
    The current search / owner / category / sort selection.

    selected_user_id None means "all owners".
    selected_category_ids empty means "all categories"; the tuple keeps the
    order in which categories were picked.
    """

    search: str = ""
    selected_user_id: int | None = None
    selected_category_ids: tuple[int, ...] = ()
    sort: SortSpec = field(default_factory=SortSpec)

    def to_dict(self) -> dict[str, Any]:
        return {
            "search": self.search,
            "selected_user_id": self.selected_user_id,
            "selected_category_ids": list(self.selected_category_ids),
            "sort": self.sort.to_dict(),
        }


@dataclass(frozen=True)
class Transition:
    """
    One user interaction. The reducer reads only `type` and `payload`.
    """

    type: str
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Transition:
        return cls(type=d["type"], payload=dict(d.get("payload", {})))


@dataclass
class ReduceResult:
    """
    Result of applying one transition to a FilterState.
    The reducer never throws — it always returns one of these.
    """

    state: FilterState
    applied: bool
    error: str | None = None


@dataclass
class QueryResult:
    """
    What the rendering collaborator receives: the ordered records plus
    everything needed to highlight the controls.
    """

    state: FilterState
    records: list[ViewRecord]
    users: tuple[User, ...]
    categories: tuple[Category, ...]

    @property
    def is_empty(self) -> bool:
        return not self.records


@dataclass
class RenderOptions:
    """Options controlling what the renderer outputs."""

    channel: str = "html"  # "html" or "text"
    title: str = "Product Categories"
