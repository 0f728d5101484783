# -*- coding: utf-8 -*-
"""CSV export — API endpoint."""

from __future__ import annotations

from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from ..deps import Services, get_services

router = APIRouter(prefix="/api/export", tags=["Export"])


def _content_disposition(filename: str) -> str:
    # Header values must be latin-1; non-ASCII user names go in filename*.
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "_")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


@router.get("/{user}", summary="Download records and comments as CSV")
def export_csv(user: str, services: Services = Depends(get_services)):
    export = services.exporter.export(user)
    return Response(
        content=export.data,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": _content_disposition(export.filename)},
    )
