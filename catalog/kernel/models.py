"""Raw record models: users, categories, products as loaded from the server fixtures."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class User(BaseModel):
    """A user that owns categories. `sex` only drives display styling."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: int
    name: str
    sex: Literal["m", "f"]


class Category(BaseModel):
    """A product category owned by exactly one user."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: int
    title: str
    icon: str
    owner_id: int = Field(alias="ownerId")


class Product(BaseModel):
    """A product in exactly one category."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: int
    name: str
    category_id: int = Field(alias="categoryId")
