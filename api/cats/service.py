"""
Cat business logic.

Store failures are logged here and turned into generic 500 errors; the
underlying error never reaches the client.
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


async def list_cats() -> list[dict[str, Any]]:
    try:
        cats = await repository.list_cats()
    except StoreError as exc:
        logger.exception("list_cats_failed")
        raise ApiError("failed to find cats") from exc
    return [cat.model_dump() for cat in cats]


async def create_cat(payload: dict[str, Any], *, recent: RecentRecord[schemas.Cat]) -> dict[str, Any]:
    firstname = payload.get("firstname")
    lastname = payload.get("lastname")
    beds = payload.get("beds")
    if is_missing(firstname) or is_missing(lastname) or is_missing(beds):
        raise bad_request("firstname, lastname and beds are all required")

    try:
        cat = await repository.create_cat(name=f"{firstname} {lastname}", beds_owned=beds)
    except StoreError as exc:
        logger.exception("create_cat_failed")
        raise ApiError("failed to create cat") from exc

    recent.set(cat)
    logger.info("cat_created id=%s", cat.id)
    return schemas.to_response(cat).model_dump()


async def search_by_name(name: str | None) -> dict[str, Any]:
    if is_missing(name):
        raise bad_request("Name is required to perform a search")

    try:
        cat = await repository.get_cat_by_name(name)
    except StoreError as exc:
        logger.exception("search_cat_failed")
        raise ApiError("Something went wrong") from exc

    # No match is reported in the body, not as a 404.
    if cat is None:
        return {"error": "No cats found"}
    return schemas.to_response(cat).model_dump()


async def _add_bed(cat: schemas.Cat) -> schemas.Cat:
    updated = cat.model_copy(update={"beds_owned": cat.beds_owned + 1})
    return await repository.save_cat(updated)


async def increment_last_beds(*, recent: RecentRecord[schemas.Cat]) -> dict[str, Any]:
    """
    Give the most recently created cat one more bed and persist it.

    A placeholder cat that was never saved gets inserted here.
    """
    try:
        cat = await recent.update(_add_bed)
    except StoreError as exc:
        logger.exception("increment_beds_failed")
        raise ApiError("Something went wrong") from exc
    return schemas.to_response(cat).model_dump()
