"""
Hosted inference proxy.

Forwards a practice prompt to a hosted text-generation model and returns
the provider's JSON unchanged. The API token stays server-side.
"""

import logging
import os
from typing import Any

import httpx

logger = logging.getLogger(__name__)

HF_API_URL = os.environ.get(
    "HF_API_URL", "https://api-inference.huggingface.co/models"
)
HF_MODEL = os.environ.get("HF_MODEL", "distilgpt2")
HF_TIMEOUT = float(os.environ.get("HF_TIMEOUT", "30"))


class InferenceError(Exception):
    """Raised when the hosted model can't produce a response."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details if details is not None else message


def _model_url(model: str) -> str:
    return f"{HF_API_URL.rstrip('/')}/{model}"


def _error_details(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


async def query_model(
    prompt: str,
    *,
    model: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """
    Send a prompt to the hosted model.

    Args:
        prompt: Text to forward as the model's input.
        model: Model id. If None, uses HF_MODEL.
        client: Optional client to reuse (tests pass one with a mock transport).

    Returns:
        The decoded JSON body from the provider.

    Raises:
        InferenceError: If no token is configured, the request fails, or the
                        provider answers with an error status.
    """
    token = os.environ.get("HF_API_TOKEN")
    if not token:
        raise InferenceError("HF_API_TOKEN is not configured")

    url = _model_url(model or HF_MODEL)
    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=HF_TIMEOUT)

    try:
        response = await client.post(url, json={"inputs": prompt}, headers=headers)
    except httpx.HTTPError as e:
        logger.error("Inference request to %s failed: %s", url, e)
        raise InferenceError(f"Inference request failed: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    if response.is_error:
        details = _error_details(response)
        logger.error(
            "Inference provider returned %d: %s", response.status_code, details
        )
        raise InferenceError(
            f"Inference provider returned {response.status_code}", details
        )

    try:
        return response.json()
    except ValueError as e:
        raise InferenceError("Inference provider returned invalid JSON", response.text) from e
