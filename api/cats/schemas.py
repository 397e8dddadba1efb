"""
Cat documents and response shapes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.documents import Document


class Cat(Document):
    name: str = Field(..., min_length=1)
    beds_owned: int = Field(default=0, ge=0)


class CatResponse(BaseModel):
    name: str
    beds: int


def placeholder_cat() -> Cat:
    # Stands in until the first cat is created; never saved unless incremented.
    return Cat(name="unknown", beds_owned=0)


def to_response(cat: Cat) -> CatResponse:
    return CatResponse(name=cat.name, beds=cat.beds_owned)
