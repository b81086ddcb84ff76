"""Pull request metadata generation from a patch and the task that produced it."""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import BaseModel

from vibekit.config import ModelConfig
from vibekit.infra.providers.registry import create_provider, get_default_model
from vibekit.models.provider import CommitMessage, ModelProvider, PRMetadata

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

PR_INSTRUCTION = (
    "You are tasked to create title and body for a pull request based on the following task:"
)
COMMIT_INSTRUCTION = (
    "You are tasked to create a commit message based on the following task:"
)


def build_prompt(instruction: str, task: str, patch: str) -> str:
    return f"{instruction}\n{task}\n\npatch:\n\n{patch}"


async def _generate(
    instruction: str,
    patch: str,
    model_config: ModelConfig,
    prompt: str,
    schema: type[SchemaT],
) -> SchemaT:
    vendor = model_config.provider or ModelProvider.OPENAI
    provider = create_provider(vendor, model_config.api_key, model_config.base_url or None)
    model_id = model_config.name or get_default_model(vendor)

    logger.debug("Generating %s with %s/%s", schema.__name__, provider.name, model_id)
    return await provider(model_id).generate_object(
        build_prompt(instruction, prompt, patch), schema
    )


async def generate_pr_metadata(
    patch: str, model_config: ModelConfig, prompt: str
) -> PRMetadata:
    """Suggest title, body, branch name and commit message for ``patch``.

    Provider configuration errors and schema validation errors propagate.
    """
    return await _generate(PR_INSTRUCTION, patch, model_config, prompt, PRMetadata)


async def generate_commit_message(
    patch: str, model_config: ModelConfig, prompt: str
) -> CommitMessage:
    """Suggest a commit message for ``patch``."""
    return await _generate(COMMIT_INSTRUCTION, patch, model_config, prompt, CommitMessage)
