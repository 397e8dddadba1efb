"""
Dog pages and JSON endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from core import views
from core.payload import read_payload
from core.recent import RecentRecord

from . import schemas, service
from .dependencies import get_recent_dog

router = APIRouter()


@router.get("/page4")
async def page4(request: Request):
    dogs = await service.list_dogs()
    return views.render(request, "page4.html", {"dogs": dogs})


@router.get("/getDogName")
async def get_dog_name(recent: RecentRecord[schemas.Dog] = Depends(get_recent_dog)) -> dict:
    return {"name": recent.get().name}


@router.post("/setDogName")
async def set_dog_name(
    payload: dict[str, Any] = Depends(read_payload),
    recent: RecentRecord[schemas.Dog] = Depends(get_recent_dog),
) -> dict:
    return await service.create_dog(payload, recent=recent)


@router.get("/updateDogAge")
async def update_dog_age(name: str | None = Query(default=None)) -> dict:
    return await service.increment_age_by_name(name)
