"""
Lesson progress routes.

Endpoints:
- POST /api/lessons/{lesson_id}/complete - Mark a lesson completed for the current user
"""

import logging

import sentry_sdk
from fastapi import APIRouter, Depends, HTTPException

from core.database import get_transaction
from core.practice import complete_lesson
from web_api.auth import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/lessons", tags=["lessons"])


@router.post("/{lesson_id}/complete")
async def mark_lesson_completed(lesson_id: str, user: dict = Depends(get_current_user)):
    """
    Record that the current user finished a lesson.

    Points are awarded on the first completion only; repeats report
    alreadyCompleted.
    """
    try:
        async with get_transaction() as conn:
            return await complete_lesson(conn, user["sub"], lesson_id)
    except Exception as e:
        logger.error(
            "Failed to mark lesson %s completed for user %s: %s",
            lesson_id,
            user["sub"],
            e,
        )
        sentry_sdk.capture_exception(e)
        raise HTTPException(500, f"Failed to mark lesson as completed: {e}")
