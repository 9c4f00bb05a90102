"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root(request: Request) -> dict:
    """Report liveness along with the size of the loaded registry and store."""
    service = request.app.state.distributor_service
    return {
        "status": "ok",
        "countries": len(service.registry),
        "distributors": len(service.store),
    }
