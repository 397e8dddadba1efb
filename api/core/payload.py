"""
Request body reading for routes that accept either JSON or HTML form posts.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import Request
from starlette.datastructures import UploadFile

logger = logging.getLogger(__name__)

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_payload(request: Request) -> dict[str, Any]:
    """
    Return the request body as a flat dict.

    Bodies that cannot be parsed come back empty, which the callers' required
    field checks then reject.
    """
    content_type = (request.headers.get("content-type") or "").split(";", 1)[0].strip().lower()

    if content_type in FORM_TYPES:
        form = await request.form()
        return {key: value for key, value in form.items() if not isinstance(value, UploadFile)}

    body = await request.body()
    if not body.strip():
        return {}
    try:
        data = json.loads(body)
    except ValueError:
        logger.info("unparseable_body content_type=%s bytes=%s", content_type or "-", len(body))
        return {}
    return data if isinstance(data, dict) else {}


def is_missing(value: Any) -> bool:
    if isinstance(value, str):
        return not value.strip()
    return value is None or value is False or value == 0
