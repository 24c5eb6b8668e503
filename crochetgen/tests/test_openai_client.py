"""Unit tests for openai_client.py: chat completions wrapper."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from unittest.mock import patch, AsyncMock

import pytest
import httpx

from crochetgen.services.openai_client import (
    MAX_TOKENS,
    chat_completion,
    extract_message_content,
)


def _mock_client(mock_post):
    instance = AsyncMock()
    instance.post = mock_post
    instance.__aenter__ = AsyncMock(return_value=instance)
    instance.__aexit__ = AsyncMock(return_value=False)
    return instance


def _completion(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class TestExtractMessageContent:
    def test_returns_content(self):
        assert extract_message_content(_completion("Row 1: sc")) == "Row 1: sc"

    def test_null_content(self):
        assert extract_message_content(_completion(None)) == ""

    def test_no_choices(self):
        assert extract_message_content({"choices": []}) == ""

    def test_error_body(self):
        assert extract_message_content({"error": {"message": "quota"}}) == ""

    def test_non_string_content(self):
        assert extract_message_content(_completion(["Row 1"])) == ""


class TestChatCompletion:
    @pytest.mark.asyncio
    async def test_sends_correct_payload(self):
        captured = {}

        async def mock_post(url, json=None, headers=None, **kwargs):
            captured["url"] = url
            captured["json"] = json
            captured["headers"] = headers
            return httpx.Response(
                status_code=200,
                json=_completion("AMIGURUMI BEAR PATTERN"),
                request=httpx.Request("POST", url),
            )

        with patch("crochetgen.services.openai_client.httpx.AsyncClient") as MockClient:
            MockClient.return_value = _mock_client(mock_post)
            result = await chat_completion(
                "make a bear", "sk-test", model="gpt-4o-mini", api_url="https://api.openai.com/v1",
            )

        assert result == "AMIGURUMI BEAR PATTERN"
        assert captured["url"] == "https://api.openai.com/v1/chat/completions"
        assert captured["json"]["model"] == "gpt-4o-mini"
        assert captured["json"]["max_tokens"] == MAX_TOKENS
        assert captured["json"]["messages"][0]["role"] == "system"
        assert captured["json"]["messages"][1] == {"role": "user", "content": "make a bear"}
        assert captured["headers"]["Authorization"] == "Bearer sk-test"

    @pytest.mark.asyncio
    async def test_raises_on_http_error(self):
        async def mock_post(url, **kwargs):
            return httpx.Response(
                status_code=401, json={"error": {"message": "bad key"}},
                request=httpx.Request("POST", url),
            )

        with patch("crochetgen.services.openai_client.httpx.AsyncClient") as MockClient:
            MockClient.return_value = _mock_client(mock_post)
            with pytest.raises(httpx.HTTPStatusError):
                await chat_completion("p", "sk-bad")

    @pytest.mark.asyncio
    async def test_propagates_connection_error(self):
        async def mock_post(url, **kwargs):
            raise httpx.ConnectError("Connection refused")

        with patch("crochetgen.services.openai_client.httpx.AsyncClient") as MockClient:
            MockClient.return_value = _mock_client(mock_post)
            with pytest.raises(httpx.ConnectError):
                await chat_completion("p", "sk-test")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
