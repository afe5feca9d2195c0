"""
Health router.
"""

from fastapi import APIRouter

from mtg_lore.schemas.lore import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint / 健康检查"""
    return HealthResponse(status="ok")
