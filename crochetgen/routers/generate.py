"""POST /generate: crochet request → pattern text."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Response

from ..models.requests import PatternRequest
from ..services import pattern_service

router = APIRouter()
logger = logging.getLogger(__name__)

GENERATE_PATHS = ("/generate", "/api/generate")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


@router.options("/generate")
@router.options("/api/generate", include_in_schema=False)
async def generate_preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("/generate")
@router.post("/api/generate", include_in_schema=False)
async def generate_pattern(req: PatternRequest) -> dict[str, Any]:
    """
    Generate a crochet pattern.

    Always answers 200 with usable pattern text: provider output when one
    succeeds, otherwise a fallback (annotated with `error` on unexpected failure).
    """
    try:
        result = await pattern_service.generate_pattern(req)
    except Exception:
        logger.exception("Error generating pattern")
        result = pattern_service.error_result()
    return result.to_response()
