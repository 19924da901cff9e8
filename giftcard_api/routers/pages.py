from __future__ import annotations

import os

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, JSONResponse

router = APIRouter(prefix="", tags=["pages"])


def _page(request: Request, filename: str):
    static_dir = request.app.state.settings.static_dir
    path = os.path.join(static_dir, filename)
    if not os.path.isfile(path):
        return JSONResponse({"success": False, "message": "Endpoint not found"}, status_code=404)
    return FileResponse(path, media_type="text/html")


@router.get("/", include_in_schema=False)
def customer_page(request: Request):
    return _page(request, "index.html")


@router.get("/admin", include_in_schema=False)
def admin_page(request: Request):
    return _page(request, "admin.html")
