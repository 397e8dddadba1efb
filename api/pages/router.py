"""
Home page and the untemplated pages.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from cats import schemas as cat_schemas
from cats.dependencies import get_recent_cat
from core import views
from core.recent import RecentRecord

router = APIRouter()


@router.get("/")
async def index(request: Request, recent: RecentRecord[cat_schemas.Cat] = Depends(get_recent_cat)):
    return views.render(
        request,
        "index.html",
        {
            "current_name": recent.get().name,
            "title": "Home",
            "page_name": "Home Page",
        },
    )


@router.get("/page2")
async def page2(request: Request):
    return views.render(request, "page2.html")


@router.get("/page3")
async def page3(request: Request):
    return views.render(request, "page3.html")
