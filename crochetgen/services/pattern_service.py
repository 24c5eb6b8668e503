"""
Pattern Service: PatternRequest -> PatternResult.

Flow:
  1. Build one prompt from the five request fields
  2. Try each provider in order, stopping at the first non-empty text
  3. Otherwise fill the fallback template for the request's skill level

Providers are awaited one at a time; a failing provider is logged and skipped.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..config import load_settings
from ..models.pattern import FALLBACK_MODEL, PatternResult
from ..models.requests import PatternRequest
from . import fallback
from .prompt_builder import build_prompt
from .providers import Provider, build_providers

logger = logging.getLogger(__name__)

FALLBACK_ERROR = "Used fallback pattern due to API issues"


async def generate_pattern(
    req: PatternRequest,
    providers: Optional[Sequence[Provider]] = None,
) -> PatternResult:
    if providers is None:
        providers = build_providers(load_settings())

    logger.info(
        f"Generating pattern: project={req.project_type!r} level={req.skill_level.value} "
        f"yarn={req.yarn_weight!r} size={req.size!r}"
    )

    if not providers:
        logger.warning("No provider API key configured, using fallback pattern")
    else:
        prompt = build_prompt(req)
        text, model_used = await _first_successful(providers, prompt)
        if text:
            logger.info(f"Pattern generated using {model_used}")
            return PatternResult(pattern=text, model_used=model_used)
        logger.warning("All providers failed, using fallback pattern")

    return PatternResult(pattern=fallback.fallback_pattern(req), model_used=FALLBACK_MODEL)


async def _first_successful(providers: Sequence[Provider], prompt: str) -> tuple[str, Optional[str]]:
    for provider in providers:
        logger.info(f"Trying provider: {provider.name}")
        try:
            text = await provider(prompt)
            if not isinstance(text, str):
                raise TypeError(f"expected text, got {type(text).__name__}")
            text = text.strip()
        except Exception as e:
            logger.warning(f"Provider {provider.name} failed: {e!r}")
            continue

        if text:
            return text, provider.name
        logger.warning(f"Provider {provider.name} returned empty text")

    return "", None


def error_result(reason: str = FALLBACK_ERROR) -> PatternResult:
    """Generic fallback for failures outside the provider loop."""
    return PatternResult(
        pattern=fallback.GENERIC_FALLBACK,
        model_used=FALLBACK_MODEL,
        error=reason,
    )
