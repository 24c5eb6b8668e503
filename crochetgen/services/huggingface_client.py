"""
Hugging Face Client: text generation through the hosted Inference API.

Each model is addressed as {api_url}/{model_id} and authenticated with a
bearer token (HUGGING_FACE_ACCESS_TOKEN).
"""
from __future__ import annotations

from typing import Any

import httpx

from ..config import DEFAULT_HF_API_URL

GENERATION_PARAMETERS = {
    "max_new_tokens": 1500,
    "temperature": 0.7,
    "do_sample": True,
    "return_full_text": False,
}


async def generate_text(
    model: str,
    prompt: str,
    api_token: str,
    api_url: str = DEFAULT_HF_API_URL,
    timeout: float = 20.0,
) -> str:
    """
    Run one text-generation call against a hosted model.
    Raises httpx errors on transport failure or non-2xx status.
    """
    payload = {"inputs": prompt, "parameters": dict(GENERATION_PARAMETERS)}
    headers = {
        "Authorization": f"Bearer {api_token}",
        "Content-Type": "application/json",
    }
    async with httpx.AsyncClient(timeout=timeout) as client:
        resp = await client.post(f"{api_url}/{model}", json=payload, headers=headers)
        resp.raise_for_status()
        return extract_generated_text(resp.json())


def extract_generated_text(data: Any) -> str:
    # The API answers either [{"generated_text": ...}] or {"generated_text": ...}
    if isinstance(data, list) and data:
        data = data[0]
    if not isinstance(data, dict):
        return ""
    for key in ("generated_text", "text"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return ""
