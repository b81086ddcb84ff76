"""OpenAI-compatible structured generation using httpx.

Covers OpenAI itself and every vendor that exposes the
``/chat/completions`` endpoint with JSON-schema response formats.
"""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

REQUEST_TIMEOUT = 120.0


class OpenAICompatibleModel:
    """Model handle for an OpenAI-compatible endpoint."""

    def __init__(self, provider: OpenAICompatibleProvider, model_id: str) -> None:
        self._provider = provider
        self.model_id = model_id

    async def generate_object(self, prompt: str, schema: type[SchemaT]) -> SchemaT:
        payload: dict = {
            "model": self.model_id,
            "messages": [{"role": "user", "content": prompt}],
            "response_format": {
                "type": "json_schema",
                "json_schema": {
                    "name": schema.__name__,
                    "schema": schema.model_json_schema(),
                    "strict": True,
                },
            },
        }

        logger.debug(
            "Requesting %s from %s model %s",
            schema.__name__, self._provider.name, self.model_id,
        )
        async with self._provider.client() as client:
            response = await client.post("/chat/completions", json=payload)
            response.raise_for_status()
            data = response.json()

        content = data["choices"][0]["message"].get("content") or ""
        return schema.model_validate_json(content)


class OpenAICompatibleProvider:
    """Model factory for an OpenAI-compatible vendor, differing only by name and URL."""

    def __init__(self, name: str, api_key: str, base_url: str) -> None:
        self.name = name
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            timeout=REQUEST_TIMEOUT,
        )

    def __call__(self, model_id: str) -> OpenAICompatibleModel:
        return OpenAICompatibleModel(self, model_id)
