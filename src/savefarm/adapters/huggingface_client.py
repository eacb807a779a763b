"""Hugging Face hosted inference client."""

import json
from dataclasses import dataclass
from typing import Protocol

import httpx


@dataclass(frozen=True)
class InferenceReply:
    """Raw status and body of an inference call."""

    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> object:
        return json.loads(self.text)


class InferenceClient(Protocol):
    """Interface for text-generation inference."""

    async def generate(self, model: str, prompt: str) -> InferenceReply:
        """Run the prompt through a hosted model."""


@dataclass
class HttpxHuggingFaceClient(InferenceClient):
    """HTTPX-backed Hugging Face inference API client."""

    token: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, token: str, base_url: str) -> "HttpxHuggingFaceClient":
        """Create a client with a managed httpx session."""
        return cls(token=token, base_url=base_url, http_client=httpx.AsyncClient())

    async def generate(self, model: str, prompt: str) -> InferenceReply:
        """POST the prompt to the model endpoint."""
        response = await self.http_client.post(
            f"{self.base_url}/{model}",
            headers={"Authorization": f"Bearer {self.token}"},
            json={"inputs": prompt},
            timeout=30,
        )
        return InferenceReply(status_code=response.status_code, text=response.text)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
