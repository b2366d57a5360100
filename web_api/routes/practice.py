"""
Prompt practice API routes.

Endpoints:
- POST /api/practice/score - Score a prompt and award points to signed-in users
"""

import logging

import sentry_sdk
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from core.database import get_transaction
from core.practice import award_submission, score_prompt
from web_api.auth import get_optional_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/practice", tags=["practice"])


class ScoreRequest(BaseModel):
    """Request body for prompt scoring."""

    prompt: str


@router.post("/score")
async def score(request: ScoreRequest, user: dict | None = Depends(get_optional_user)):
    """
    Score a practice prompt.

    Anonymous users get the score and feedback only. Signed-in users also
    earn submission points, plus the Prompt Master badge for a high score.
    """
    if not request.prompt.strip():
        raise HTTPException(400, "Please enter a prompt.")

    result = score_prompt(request.prompt)
    body = result.to_dict()
    body["reward"] = None

    if user is not None:
        try:
            async with get_transaction() as conn:
                body["reward"] = await award_submission(conn, user["sub"], result.total)
        except Exception as e:
            logger.error("Failed to update points for user %s: %s", user["sub"], e)
            sentry_sdk.capture_exception(e)
            raise HTTPException(500, f"Failed to update points: {e}")

    return body
