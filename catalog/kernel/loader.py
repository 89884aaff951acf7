"""
Catalog Kernel — Loader

Builds RawCollections from plain records: Python lists of dicts, a directory
of JSON files (users.json, categories.json, products.json), or the sample
data bundled with the package. Also reads session files (JSON lists of
transitions) back into Transition objects.

Records are validated with the pydantic models. A malformed record raises
RecordValidationError. A repeated id within one collection, or a category
whose owner is not among the users, raises DataIntegrityError. Product to
category links are checked by the join.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from catalog.kernel.errors import DataIntegrityError, RecordValidationError
from catalog.kernel.join import resolve_owners
from catalog.kernel.models import Category, Product, User
from catalog.kernel.types import RawCollections, Transition

logger = logging.getLogger(__name__)

COLLECTION_FILES: dict[str, str] = {
    "users": "users.json",
    "categories": "categories.json",
    "products": "products.json",
}

SAMPLE_PACKAGE = "catalog.data"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_collections(
    *,
    users: Iterable[dict[str, Any]],
    categories: Iterable[dict[str, Any]],
    products: Iterable[dict[str, Any]],
) -> RawCollections:
    """Validate raw records and freeze them into RawCollections."""
    collections = RawCollections(
        users=_parse_records("users", users, User),
        categories=_parse_records("categories", categories, Category),
        products=_parse_records("products", products, Product),
    )
    resolve_owners(collections.categories, collections.users)
    logger.info(
        "Loaded %d users, %d categories, %d products",
        len(collections.users),
        len(collections.categories),
        len(collections.products),
    )
    return collections


def load_collections_from_dir(path: str | Path) -> RawCollections:
    """Load users.json, categories.json and products.json from a directory."""
    base = Path(path)
    raw: dict[str, Any] = {}
    for name, filename in COLLECTION_FILES.items():
        with open(base / filename, encoding="utf-8") as f:
            raw[name] = json.load(f)
    return load_collections(**raw)


def load_sample_collections() -> RawCollections:
    """The small dataset shipped in catalog/data."""
    raw: dict[str, Any] = {}
    for name, filename in COLLECTION_FILES.items():
        text = resources.files(SAMPLE_PACKAGE).joinpath(filename).read_text(encoding="utf-8")
        raw[name] = json.loads(text)
    return load_collections(**raw)


def load_transitions(path: str | Path) -> list[Transition]:
    """
    Read a session file: a JSON list of {"type": ..., "payload": {...}}.

    Only the envelope is checked here. Payloads are validated by the reducer
    when the transitions are dispatched.
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise RecordValidationError("transitions", 0, "expected a JSON list")

    result = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict) or not isinstance(item.get("type"), str):
            raise RecordValidationError("transitions", index, "type: must be a string")
        if not isinstance(item.get("payload", {}), dict):
            raise RecordValidationError("transitions", index, "payload: must be an object")
        result.append(Transition.from_dict(item))
    logger.info("Loaded %d transitions from %s", len(result), path)
    return result


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_records(collection: str, items: Iterable[dict[str, Any]], model: type[BaseModel]) -> tuple:
    records = []
    seen: set[int] = set()
    for index, item in enumerate(items):
        if isinstance(item, model):
            record = item
        else:
            try:
                record = model.model_validate(item)
            except ValidationError as e:
                raise RecordValidationError(collection, index, _summarize(e)) from e

        if record.id in seen:
            raise DataIntegrityError(
                "duplicate_id",
                f"Duplicate id {record.id} in {collection}",
                record_id=record.id,
            )
        seen.add(record.id)
        records.append(record)
    return tuple(records)


def _summarize(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) or "record"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
