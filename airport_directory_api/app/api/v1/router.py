"""
Top‑level router for version 1 of the API.

When new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import airports

router = APIRouter()

router.include_router(airports.router, prefix="/airports", tags=["airports"])
