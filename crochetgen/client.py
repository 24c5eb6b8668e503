"""
Pattern Form: client side of the generate flow.

Mirrors what the web form does: check the required fields, flip a loading
flag, make one POST to the service, keep the returned pattern and record a
notification for the user. Failures are reported after a short hold so an
error does not flash up the instant the button is pressed.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import httpx
from pydantic import ValidationError

from .models.pattern import PatternResult

logger = logging.getLogger(__name__)

DEFAULT_SERVICE_URL = "http://localhost:8000/generate"
DEFAULT_FAILURE_DELAY = 3.0
REQUIRED_FIELDS = ("projectType", "skillLevel", "description")
FORM_FIELDS = ("projectType", "skillLevel", "yarnWeight", "size", "description")


@dataclass
class Notification:
    kind: str  # "success" | "error"
    title: str
    description: str


@dataclass
class PatternForm:
    service_url: str = DEFAULT_SERVICE_URL
    failure_delay: float = DEFAULT_FAILURE_DELAY
    timeout: float = 120.0
    generating: bool = False
    result: Optional[PatternResult] = None
    notifications: list[Notification] = field(default_factory=list)

    def missing_fields(self, fields: Mapping[str, Any]) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not str(fields.get(name) or "").strip()]

    async def submit(self, fields: Mapping[str, Any]) -> None:
        missing = self.missing_fields(fields)
        if missing:
            self._notify(
                "error",
                "Missing information",
                "Please fill in project type, skill level, and description.",
            )
            return

        payload = {name: str(fields.get(name) or "") for name in FORM_FIELDS}
        self.generating = True
        try:
            try:
                result = await self._request(payload)
            except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
                logger.warning(f"Pattern generation request failed: {e!r}")
                if self.failure_delay > 0:
                    await asyncio.sleep(self.failure_delay)
                self._notify(
                    "error",
                    "Generation failed",
                    "Failed to generate pattern. Please try again.",
                )
                return
            self.result = result
            self._notify("success", "Pattern Generated!", "Your custom crochet pattern is ready.")
        finally:
            self.generating = False

    async def _request(self, payload: dict[str, str]) -> PatternResult:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.post(self.service_url, json=payload)
            resp.raise_for_status()
            data = resp.json()
        try:
            return PatternResult.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Malformed pattern response: {e}") from e

    def _notify(self, kind: str, title: str, description: str) -> None:
        self.notifications.append(Notification(kind=kind, title=title, description=description))
