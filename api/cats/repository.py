"""
Cat persistence.
"""

from __future__ import annotations

from core.documents import Collection

from .schemas import Cat

collection: Collection[Cat] = Collection("cats", Cat)


async def list_cats() -> list[Cat]:
    return await collection.find({})


async def create_cat(*, name: str, beds_owned: object) -> Cat:
    # beds_owned may still be raw request input; the collection validates it.
    return await collection.insert({"name": name, "beds_owned": beds_owned})


async def get_cat_by_name(name: str) -> Cat | None:
    return await collection.find_one({"name": name})


async def save_cat(cat: Cat) -> Cat:
    return await collection.save(cat)
