from __future__ import annotations

from fastapi import Request

from core.recent import RecentRecord

from .schemas import Cat


def get_recent_cat(request: Request) -> RecentRecord[Cat]:
    return request.app.state.recent_cat
