"""
Catalog Kernel — Exceptions

Load-time failures. Everything after a successful join (filtering, sorting,
transitions) is total and never raises.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog load errors."""
    pass


class DataIntegrityError(CatalogError):
    """
    A raw collection is inconsistent: a product points at a missing category,
    a category points at a missing owner, or an id appears twice.
    Fatal: no view can be built from the dataset.
    """

    def __init__(self, kind: str, message: str, record_id: int | None = None, missing_id: int | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.record_id = record_id
        self.missing_id = missing_id


class RecordValidationError(CatalogError):
    """A raw record is malformed (missing field, wrong type, unknown value)."""

    def __init__(self, collection: str, index: int, detail: str) -> None:
        super().__init__(f"{collection}[{index}]: {detail}")
        self.collection = collection
        self.index = index
        self.detail = detail
