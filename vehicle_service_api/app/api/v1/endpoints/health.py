"""Liveness endpoint.  Does not contact the customer service."""

from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/", response_model=Dict[str, str])
async def health() -> Dict[str, str]:
    return {"status": "ok"}
