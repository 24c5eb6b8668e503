"""Unit tests for huggingface_client.py: Inference API wrapper."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from unittest.mock import patch, AsyncMock

import pytest
import httpx

from crochetgen.services.huggingface_client import (
    GENERATION_PARAMETERS,
    extract_generated_text,
    generate_text,
)

API_URL = "https://api-inference.huggingface.co/models"


def _mock_client(mock_post):
    instance = AsyncMock()
    instance.post = mock_post
    instance.__aenter__ = AsyncMock(return_value=instance)
    instance.__aexit__ = AsyncMock(return_value=False)
    return instance


# ─────────────────────────────────────────────────────────────────────────────
# Tests: extract_generated_text
# ─────────────────────────────────────────────────────────────────────────────

class TestExtractGeneratedText:
    def test_list_with_generated_text(self):
        assert extract_generated_text([{"generated_text": "Row 1"}]) == "Row 1"

    def test_list_with_text_key(self):
        assert extract_generated_text([{"text": "Row 2"}]) == "Row 2"

    def test_dict_response(self):
        assert extract_generated_text({"generated_text": "Row 3"}) == "Row 3"

    def test_empty_list(self):
        assert extract_generated_text([]) == ""

    def test_error_payload(self):
        assert extract_generated_text({"error": "Model is loading"}) == ""

    def test_unexpected_shape(self):
        assert extract_generated_text("plain string") == ""
        assert extract_generated_text(["not a dict"]) == ""

    def test_non_string_generated_text(self):
        assert extract_generated_text({"generated_text": ["odd"]}) == ""
        assert extract_generated_text([{"generated_text": {"nested": 1}}]) == ""

    def test_falls_through_to_text_key(self):
        assert extract_generated_text([{"generated_text": None, "text": "Row 4"}]) == "Row 4"


# ─────────────────────────────────────────────────────────────────────────────
# Tests: generate_text
# ─────────────────────────────────────────────────────────────────────────────

class TestGenerateText:
    @pytest.mark.asyncio
    async def test_sends_correct_payload(self):
        captured = {}

        async def mock_post(url, json=None, headers=None, **kwargs):
            captured["url"] = url
            captured["json"] = json
            captured["headers"] = headers
            return httpx.Response(
                status_code=200,
                json=[{"generated_text": "Ch 25."}],
                request=httpx.Request("POST", url),
            )

        with patch("crochetgen.services.huggingface_client.httpx.AsyncClient") as MockClient:
            MockClient.return_value = _mock_client(mock_post)
            result = await generate_text("gpt2", "make a hat", "hf_secret", api_url=API_URL)

        assert result == "Ch 25."
        assert captured["url"] == f"{API_URL}/gpt2"
        assert captured["json"]["inputs"] == "make a hat"
        assert captured["json"]["parameters"] == GENERATION_PARAMETERS
        assert captured["headers"]["Authorization"] == "Bearer hf_secret"

    def test_generation_parameters(self):
        assert GENERATION_PARAMETERS["max_new_tokens"] == 1500
        assert GENERATION_PARAMETERS["temperature"] == 0.7
        assert GENERATION_PARAMETERS["do_sample"] is True

    @pytest.mark.asyncio
    async def test_passes_timeout(self):
        async def mock_post(url, **kwargs):
            return httpx.Response(200, json=[], request=httpx.Request("POST", url))

        with patch("crochetgen.services.huggingface_client.httpx.AsyncClient") as MockClient:
            MockClient.return_value = _mock_client(mock_post)
            await generate_text("gpt2", "p", "t", timeout=7.5)

        assert MockClient.call_args.kwargs["timeout"] == 7.5

    @pytest.mark.asyncio
    async def test_raises_on_http_error(self):
        async def mock_post(url, **kwargs):
            return httpx.Response(
                status_code=503, text="Model is loading",
                request=httpx.Request("POST", url),
            )

        with patch("crochetgen.services.huggingface_client.httpx.AsyncClient") as MockClient:
            MockClient.return_value = _mock_client(mock_post)
            with pytest.raises(httpx.HTTPStatusError):
                await generate_text("gpt2", "p", "t")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
