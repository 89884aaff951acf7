"""
Catalog Kernel — Join Layer

Pure function: (products, categories, users) → list[ViewRecord]
No side effects. No IO. Deterministic.

Each product gets its category and that category's owner embedded.
Output order is product input order. A dangling foreign key is fatal,
including a category owner that no product happens to reach.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from catalog.kernel.errors import DataIntegrityError
from catalog.kernel.models import Category, Product, User
from catalog.kernel.types import ViewRecord

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def join_all(
    products: Iterable[Product],
    categories: Sequence[Category],
    users: Sequence[User],
) -> list[ViewRecord]:
    """
    Build one ViewRecord per product, preserving product order.

    Raises DataIntegrityError if any category's owner or a product's category
    cannot be found. When ids repeat, the first match wins.
    """
    owners = resolve_owners(categories, users)
    categories_by_id = _index_first(categories)

    records: list[ViewRecord] = []
    for product in products:
        category = categories_by_id.get(product.category_id)
        if category is None:
            raise DataIntegrityError(
                "missing_category",
                f"Product {product.id} ({product.name!r}) references unknown category {product.category_id}",
                record_id=product.id,
                missing_id=product.category_id,
            )

        records.append(
            ViewRecord(
                id=product.id,
                name=product.name,
                category_id=product.category_id,
                category=category,
                owner=owners[category.id],
            )
        )

    return records


def resolve_owners(categories: Iterable[Category], users: Sequence[User]) -> dict[int, User]:
    """
    Map category id → owning User for every category.

    Raises DataIntegrityError ("missing_owner") on the first category whose
    owner id matches no user.
    """
    users_by_id = _index_first(users)
    owners: dict[int, User] = {}
    for category in categories:
        owner = users_by_id.get(category.owner_id)
        if owner is None:
            raise DataIntegrityError(
                "missing_owner",
                f"Category {category.id} ({category.title!r}) references unknown owner {category.owner_id}",
                record_id=category.id,
                missing_id=category.owner_id,
            )
        owners.setdefault(category.id, owner)
    return owners


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _index_first(items: Iterable[Any]) -> dict[int, Any]:
    """Map id → record, keeping the first record seen for each id."""
    index: dict[int, Any] = {}
    for item in items:
        index.setdefault(item.id, item)
    return index
