"""
Health check endpoint
"""
from fastapi import APIRouter, Request

from paintmap.services.templates import known_types


router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    state = request.app.state.paintmap
    return {
        "status": "ok",
        "message": "Paint Map Server",
        "version": "1.0.0",
        "accounts": state.accounts.count(),
        "maps": len(state.maps),
        "map_types": known_types(),
    }
