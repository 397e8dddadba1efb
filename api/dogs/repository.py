"""
Dog persistence.
"""

from __future__ import annotations

from core.documents import Collection

from .schemas import Dog

collection: Collection[Dog] = Collection("dogs", Dog)


async def list_dogs() -> list[Dog]:
    return await collection.find({})


async def create_dog(*, name: object, breed: object, age: object) -> Dog:
    return await collection.insert({"name": name, "breed": breed, "age": age})


async def get_dog_by_name(name: str) -> Dog | None:
    return await collection.find_one({"name": name})


async def save_dog(dog: Dog) -> Dog:
    return await collection.save(dog)
