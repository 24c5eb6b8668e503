"""
Providers: the ordered list of text-generation candidates for a request.

A Provider is just a name plus an async callable taking the prompt. Order
matters: the pattern service stops at the first one that returns text.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Awaitable, Callable

from ..config import Settings
from . import huggingface_client, openai_client

GenerateFn = Callable[[str], Awaitable[str]]


@dataclass(frozen=True)
class Provider:
    name: str
    generate: GenerateFn

    async def __call__(self, prompt: str) -> str:
        return await self.generate(prompt)


def build_providers(settings: Settings) -> list[Provider]:
    """Hugging Face models first (in configured order), then OpenAI."""
    providers: list[Provider] = []

    if settings.huggingface_token:
        for model in settings.huggingface_models:
            providers.append(Provider(
                name=model,
                generate=partial(
                    _call_huggingface,
                    model=model,
                    api_token=settings.huggingface_token,
                    api_url=settings.huggingface_api_url,
                    timeout=settings.provider_timeout,
                ),
            ))

    if settings.openai_api_key:
        providers.append(Provider(
            name=f"openai/{settings.openai_model}",
            generate=partial(
                _call_openai,
                api_key=settings.openai_api_key,
                model=settings.openai_model,
                api_url=settings.openai_api_url,
                timeout=settings.provider_timeout,
            ),
        ))

    return providers


async def _call_huggingface(prompt: str, *, model: str, api_token: str, api_url: str, timeout: float) -> str:
    return await huggingface_client.generate_text(
        model=model, prompt=prompt, api_token=api_token, api_url=api_url, timeout=timeout,
    )


async def _call_openai(prompt: str, *, api_key: str, model: str, api_url: str, timeout: float) -> str:
    return await openai_client.chat_completion(
        prompt=prompt, api_key=api_key, model=model, api_url=api_url, timeout=timeout,
    )
