"""
Cat pages and JSON endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from core import views
from core.payload import read_payload
from core.recent import RecentRecord

from . import schemas, service
from .dependencies import get_recent_cat

router = APIRouter()


@router.get("/page1")
async def page1(request: Request):
    cats = await service.list_cats()
    return views.render(request, "page1.html", {"cats": cats})


@router.get("/getName")
async def get_name(recent: RecentRecord[schemas.Cat] = Depends(get_recent_cat)) -> dict:
    return {"name": recent.get().name}


@router.post("/setName")
async def set_name(
    payload: dict[str, Any] = Depends(read_payload),
    recent: RecentRecord[schemas.Cat] = Depends(get_recent_cat),
) -> dict:
    return await service.create_cat(payload, recent=recent)


@router.get("/searchName")
async def search_name(name: str | None = Query(default=None)) -> dict:
    return await service.search_by_name(name)


@router.get("/updateLast")
async def update_last(recent: RecentRecord[schemas.Cat] = Depends(get_recent_cat)) -> dict:
    return await service.increment_last_beds(recent=recent)
