"""
Information endpoint for API v1.

Returns the service name, version and the active store backend so
operators can confirm which deployment they are talking to.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def get_info(request: Request) -> Dict[str, Any]:
    """Return general information about the running service."""
    settings = request.app.state.settings
    return {
        "name": settings.project_name,
        "version": settings.api_version,
        "store_backend": type(request.app.state.employee_store).__name__,
    }
