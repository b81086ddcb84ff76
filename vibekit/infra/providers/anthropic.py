"""Anthropic structured generation using the anthropic SDK."""

from __future__ import annotations

import logging
from typing import TypeVar

import anthropic
from pydantic import BaseModel

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

MAX_TOKENS = 4096
TOOL_NAME = "emit_object"


class AnthropicModel:
    """Anthropic model handle.

    Structured output is obtained by forcing a single tool call whose input
    schema is the requested pydantic schema.
    """

    def __init__(self, client: anthropic.AsyncAnthropic, model_id: str) -> None:
        self._client = client
        self.model_id = model_id

    async def generate_object(self, prompt: str, schema: type[SchemaT]) -> SchemaT:
        tool = {
            "name": TOOL_NAME,
            "description": schema.__doc__ or f"Return a {schema.__name__} object",
            "input_schema": schema.model_json_schema(),
        }
        logger.debug("Requesting %s from anthropic model %s", schema.__name__, self.model_id)
        response = await self._client.messages.create(
            model=self.model_id,
            max_tokens=MAX_TOKENS,
            messages=[{"role": "user", "content": prompt}],
            tools=[tool],
            tool_choice={"type": "tool", "name": TOOL_NAME},
        )

        for block in response.content:
            if block.type == "tool_use" and block.name == TOOL_NAME:
                return schema.model_validate(block.input)
        # No tool call means no object; validating nothing reports the missing fields.
        return schema.model_validate({})


class AnthropicProvider:
    """Model factory for the Anthropic API."""

    name = "anthropic"

    def __init__(self, api_key: str = "") -> None:
        self._client = anthropic.AsyncAnthropic(api_key=api_key or None)

    def __call__(self, model_id: str) -> AnthropicModel:
        return AnthropicModel(self._client, model_id)
