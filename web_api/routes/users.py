"""
User profile routes.

Endpoints:
- GET /api/users/me/rewards - Current user's points and badges
"""

from typing import Any

from fastapi import APIRouter, Depends

from core.database import get_connection
from core.practice import get_rewards
from web_api.auth import get_current_user

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me/rewards")
async def get_my_rewards(user: dict = Depends(get_current_user)) -> dict[str, Any]:
    """Get the current user's point total and earned badges."""
    async with get_connection() as conn:
        return await get_rewards(conn, user["sub"])
