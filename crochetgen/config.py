"""
Settings for the pattern generation service.

Everything comes from the environment (optionally seeded from a .env file).
Call load_settings() at the edge of a request instead of reading os.environ
deeper in the call graph.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_HF_MODELS = (
    "microsoft/DialoGPT-medium",
    "facebook/blenderbot-400M-distill",
    "EleutherAI/gpt-neo-125M",
)
DEFAULT_HF_API_URL = "https://api-inference.huggingface.co/models"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_OPENAI_API_URL = "https://api.openai.com/v1"
DEFAULT_PROVIDER_TIMEOUT = 20.0


@dataclass(frozen=True)
class Settings:
    huggingface_token: str | None = None
    huggingface_models: tuple[str, ...] = field(default=DEFAULT_HF_MODELS)
    huggingface_api_url: str = DEFAULT_HF_API_URL
    openai_api_key: str | None = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    openai_api_url: str = DEFAULT_OPENAI_API_URL
    provider_timeout: float = DEFAULT_PROVIDER_TIMEOUT

    @property
    def has_provider_key(self) -> bool:
        return bool(self.huggingface_token or self.openai_api_key)


def _get_secret(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


def _parse_models(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_HF_MODELS
    models = tuple(m.strip() for m in raw.split(",") if m.strip())
    return models or DEFAULT_HF_MODELS


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_PROVIDER_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Invalid PROVIDER_TIMEOUT_SECONDS={raw!r}, using {DEFAULT_PROVIDER_TIMEOUT}")
        return DEFAULT_PROVIDER_TIMEOUT
    if value <= 0:
        logger.warning(f"PROVIDER_TIMEOUT_SECONDS must be positive, using {DEFAULT_PROVIDER_TIMEOUT}")
        return DEFAULT_PROVIDER_TIMEOUT
    return value


def load_settings() -> Settings:
    """Read provider credentials and tuning knobs from the environment."""
    load_dotenv()
    return Settings(
        huggingface_token=_get_secret("HUGGING_FACE_ACCESS_TOKEN"),
        huggingface_models=_parse_models(os.getenv("HUGGING_FACE_MODELS")),
        huggingface_api_url=os.getenv("HUGGING_FACE_API_URL", DEFAULT_HF_API_URL).rstrip("/"),
        openai_api_key=_get_secret("OPENAI_API_KEY"),
        openai_model=os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
        openai_api_url=os.getenv("OPENAI_API_URL", DEFAULT_OPENAI_API_URL).rstrip("/"),
        provider_timeout=_parse_timeout(os.getenv("PROVIDER_TIMEOUT_SECONDS")),
    )
