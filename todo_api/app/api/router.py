"""
Top‑level router for the API.

This router aggregates the domain routers under a unified prefix.  The
application mounts it at ``/api``.
"""

from fastapi import APIRouter

from .endpoints import health, todos

router = APIRouter()

router.include_router(todos.router, prefix="/todos", tags=["todos"])
# The health router defines its own "/health" path internally.
router.include_router(health.router, tags=["health"])
