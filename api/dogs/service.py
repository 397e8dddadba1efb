"""
Dog business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from core.documents import StoreError
from core.errors import ApiError, bad_request
from core.payload import is_missing
from core.recent import RecentRecord

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_dogs() -> list[dict[str, Any]]:
    try:
        dogs = await repository.list_dogs()
    except StoreError as exc:
        logger.exception("list_dogs_failed")
        raise ApiError("failed to find dogs") from exc
    return [dog.model_dump() for dog in dogs]


async def create_dog(payload: dict[str, Any], *, recent: RecentRecord[schemas.Dog]) -> dict[str, Any]:
    name = payload.get("name")
    breed = payload.get("breed")
    age = payload.get("age")
    if is_missing(name) or is_missing(breed) or is_missing(age):
        raise bad_request("You need a name, breed, and age")

    try:
        dog = await repository.create_dog(name=name, breed=breed, age=age)
    except StoreError as exc:
        logger.exception("create_dog_failed")
        raise ApiError("Cannot create dog") from exc

    recent.set(dog)
    logger.info("dog_created id=%s", dog.id)
    return schemas.to_response(dog).model_dump()


async def increment_age_by_name(name: str | None) -> dict[str, Any]:
    if is_missing(name):
        raise bad_request("Name is required to perform a search")

    try:
        dog = await repository.get_dog_by_name(name)
        if dog is None:
            return {"error": "No dogs found"}

        dog.age += 1
        dog = await repository.save_dog(dog)
    except StoreError as exc:
        logger.exception("increment_dog_age_failed")
        raise ApiError("Something went wrong") from exc

    return schemas.to_response(dog).model_dump()
