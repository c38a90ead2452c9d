"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, update this file to include them.
"""

from fastapi import APIRouter

from .endpoints import health, vehicles

router = APIRouter()

router.include_router(vehicles.router, prefix="/vehicles", tags=["vehicles"])
router.include_router(health.router, prefix="/health", tags=["health"])
