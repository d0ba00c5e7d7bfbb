from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health() -> dict[str, str]:
    """Liveness probe; never calls the search provider."""
    return {"status": "awake", "message": "Idea Scout is ready"}
