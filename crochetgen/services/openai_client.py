"""
OpenAI Client: chat completions over plain HTTP.

Only the single-turn case is needed: one system message, one user prompt.
"""
from __future__ import annotations

from typing import Any

import httpx

from ..config import DEFAULT_OPENAI_API_URL, DEFAULT_OPENAI_MODEL

SYSTEM_PROMPT = (
    "You are an expert crochet designer who writes clear, accurate patterns "
    "using standard US crochet abbreviations."
)
MAX_TOKENS = 1500
TEMPERATURE = 0.7


async def chat_completion(
    prompt: str,
    api_key: str,
    model: str = DEFAULT_OPENAI_MODEL,
    api_url: str = DEFAULT_OPENAI_API_URL,
    timeout: float = 20.0,
) -> str:
    payload = {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
    }
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    async with httpx.AsyncClient(timeout=timeout) as client:
        resp = await client.post(f"{api_url}/chat/completions", json=payload, headers=headers)
        resp.raise_for_status()
        return extract_message_content(resp.json())


def extract_message_content(data: Any) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""
