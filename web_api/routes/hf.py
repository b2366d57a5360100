"""
Hosted model proxy route.

Endpoints:
- POST /api/hf - Forward a prompt to the hosted model
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from core.practice import InferenceError, query_model

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["inference"])


class ProxyRequest(BaseModel):
    """Request body for the model proxy."""

    prompt: str | None = None


@router.post("/hf")
async def proxy_prompt(request: ProxyRequest):
    """Forward the prompt and return the provider's JSON response as-is."""
    if not request.prompt:
        return JSONResponse(status_code=400, content={"error": "Prompt is required"})

    try:
        data = await query_model(request.prompt)
    except InferenceError as e:
        logger.error("Hosted model error: %s", e.details)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch AI response", "details": e.details},
        )

    return JSONResponse(status_code=200, content=data)
