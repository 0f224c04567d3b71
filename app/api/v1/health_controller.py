# External package imports
from fastapi import APIRouter


router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    """Liveness probe; does not touch the database"""
    return {"status": "healthy"}
