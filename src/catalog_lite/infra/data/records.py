"""Pydantic models describing one element of the catalog JSON file.

These are infrastructure rows, not domain entities: the loader validates the
file against them and then converts each row into a domain ``Item``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CategoryRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    name: str | None = None


class SellerRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    name: str | None = None
    reputation: float | None = Field(default=None, ge=0, le=5)


class ItemRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    title: str | None = None
    price: Decimal = Field(ge=0)
    description: str | None = None
    image: str | None = None
    stock: int | None = Field(default=None, ge=0)
    condition: Literal["NEW", "USED"] | None = None
    category: CategoryRecord | None = None
    seller: SellerRecord | None = None
