"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from savefarm.adapters.huggingface_client import HttpxHuggingFaceClient
from savefarm.adapters.mealdb_client import HttpxMealDbClient


def test_mealdb_client_builds_query_urls() -> None:
    seen: list[tuple[str, dict[str, str]]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.url.path, dict(request.url.params)))
        return httpx.Response(200, json={"meals": [{"idMeal": "1"}]})

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxMealDbClient(
        base_url="https://mealdb.test/api/json/v1/1", http_client=async_client
    )

    asyncio.run(client.filter_by_category("Vegan"))
    asyncio.run(client.lookup("52771"))
    result = asyncio.run(client.search("curry"))

    assert result == {"meals": [{"idMeal": "1"}]}
    assert seen == [
        ("/api/json/v1/1/filter.php", {"c": "Vegan"}),
        ("/api/json/v1/1/lookup.php", {"i": "52771"}),
        ("/api/json/v1/1/search.php", {"s": "curry"}),
    ]


def test_mealdb_client_raises_on_server_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxMealDbClient(base_url="https://mealdb.test", http_client=async_client)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.lookup("1"))


def test_huggingface_client_posts_prompt_with_token() -> None:
    captured: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["path"] = request.url.path
        captured["auth"] = request.headers.get("Authorization")
        captured["payload"] = json.loads(request.content.decode())
        return httpx.Response(200, json=[{"generated_text": "tofu"}])

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxHuggingFaceClient(
        token="hf_secret",
        base_url="https://inference.test/models",
        http_client=async_client,
    )

    reply = asyncio.run(client.generate("distilgpt2", "Recipe: soup"))

    assert reply.ok
    assert reply.json() == [{"generated_text": "tofu"}]
    assert captured == {
        "path": "/models/distilgpt2",
        "auth": "Bearer hf_secret",
        "payload": {"inputs": "Recipe: soup"},
    }


def test_huggingface_client_returns_error_replies() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="Model not found")

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxHuggingFaceClient(
        token="hf_secret", base_url="https://inference.test", http_client=async_client
    )

    reply = asyncio.run(client.generate("missing/model", "prompt"))

    assert not reply.ok
    assert reply.status_code == 404
    assert reply.text == "Model not found"
