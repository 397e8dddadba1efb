from __future__ import annotations

from fastapi import Request

from core.recent import RecentRecord

from .schemas import Dog


def get_recent_dog(request: Request) -> RecentRecord[Dog]:
    return request.app.state.recent_dog
