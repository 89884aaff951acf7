"""
Catalog kernel test configuration.

Shared fixtures: the bundled sample collections (9 products, 5 categories,
4 users) and a small builder for hand-made collections.

Sample data at a glance (product id, name, category, owner):
  1 Milk       Drinks       Roma
  2 Bread      Grocery      Anna
  3 Eggs       Grocery      Anna
  4 Jacket     Clothes      Max
  5 Sugar      Grocery      Anna
  6 Carrot     Grocery      Anna
  7 Ice cream  Grocery      Anna
  8 Apple      Fruits       Anna
  9 Laptop     Electronics  Roma
John (user 4) owns no category.
"""

import pytest

from catalog.kernel.loader import load_collections, load_sample_collections


@pytest.fixture
def sample():
    return load_sample_collections()


@pytest.fixture
def make_collections():
    """Build RawCollections from plain dicts, using the JSON wire names."""

    def _make(users=(), categories=(), products=()):
        return load_collections(users=users, categories=categories, products=products)

    return _make


@pytest.fixture
def fruit_collections(make_collections):
    """One product, one category, one user."""
    return make_collections(
        users=[{"id": 100, "name": "Max", "sex": "m"}],
        categories=[{"id": 10, "title": "Fruit", "icon": "🍎", "ownerId": 100}],
        products=[{"id": 1, "name": "Apple", "categoryId": 10}],
    )
