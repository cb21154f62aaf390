"""Liveness probe."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health() -> dict:
    """Return a constant status payload; the store is not consulted."""
    return {"status": "OK"}
