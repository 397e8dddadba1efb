"""
Server-side page rendering (Jinja2 templates).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def templates_dir() -> str:
    return os.environ.get("TEMPLATES_DIR", "").strip() or str(DEFAULT_TEMPLATES_DIR)


templates = Jinja2Templates(directory=templates_dir())


def render(request: Request, name: str, context: dict[str, Any] | None = None, *, status_code: int = 200):
    return templates.TemplateResponse(
        request,
        name,
        context or {},
        status_code=status_code,
    )
