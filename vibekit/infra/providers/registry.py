"""Model provider factory/registry."""

from __future__ import annotations

import logging

from vibekit.errors import MissingRequiredOptionError, UnsupportedProviderError
from vibekit.infra.providers.anthropic import AnthropicProvider
from vibekit.infra.providers.base import ModelFactory
from vibekit.infra.providers.openai_compatible import OpenAICompatibleProvider
from vibekit.models.provider import ModelProvider

logger = logging.getLogger(__name__)

OLLAMA_BASE_URL = "http://localhost:11434/v1"
OLLAMA_PLACEHOLDER_KEY = "ollama"

# Vendors that differ only by name and a fixed endpoint.
_COMPATIBLE_BASE_URLS: dict[ModelProvider, str] = {
    ModelProvider.OPENAI: "https://api.openai.com/v1",
    ModelProvider.OPENROUTER: "https://openrouter.ai/api/v1",
    ModelProvider.GEMINI: "https://generativelanguage.googleapis.com/v1beta/openai/",
    ModelProvider.MISTRAL: "https://api.mistral.ai/v1",
    ModelProvider.DEEPSEEK: "https://api.deepseek.com/v1",
    ModelProvider.XAI: "https://api.x.ai/v1",
    ModelProvider.GROQ: "https://api.groq.com/openai/v1",
    ModelProvider.ARCEEAI: "https://api.arcee.ai/v1",
}

_DEFAULT_MODELS: dict[ModelProvider, str] = {
    ModelProvider.ANTHROPIC: "claude-sonnet-4-20250514",
    ModelProvider.OPENAI: "gpt-4o-mini",
    ModelProvider.OPENROUTER: "anthropic/claude-sonnet-4",
    ModelProvider.AZURE: "gpt-4",  # usually the deployment name
    ModelProvider.GEMINI: "gemini-2.5-pro",
    ModelProvider.OLLAMA: "llama3.1",
    ModelProvider.MISTRAL: "mistral-large-latest",
    ModelProvider.DEEPSEEK: "deepseek-chat",
    ModelProvider.XAI: "grok-3",
    ModelProvider.GROQ: "llama-3.3-70b-versatile",
    ModelProvider.ARCEEAI: "arcee-lite",
}

FALLBACK_MODEL = "gpt-4o-mini"


def _coerce(provider: ModelProvider | str) -> ModelProvider:
    try:
        return ModelProvider(provider)
    except ValueError:
        raise UnsupportedProviderError(provider) from None


def create_provider(
    provider: ModelProvider | str,
    api_key: str,
    base_url: str | None = None,
) -> ModelFactory:
    """Build a model factory for ``provider``.

    Raises configuration errors immediately, before any network call.
    """
    provider = _coerce(provider)

    if provider == ModelProvider.ANTHROPIC:
        return AnthropicProvider(api_key=api_key)
    elif provider == ModelProvider.AZURE:
        if not base_url:
            raise MissingRequiredOptionError("baseUrl is required for Azure provider")
        return OpenAICompatibleProvider("azure", api_key, base_url)
    elif provider == ModelProvider.OLLAMA:
        # Local ollama servers usually run without authentication.
        return OpenAICompatibleProvider(
            "ollama",
            api_key or OLLAMA_PLACEHOLDER_KEY,
            base_url or OLLAMA_BASE_URL,
        )
    elif provider in _COMPATIBLE_BASE_URLS:
        return OpenAICompatibleProvider(
            provider.value, api_key, _COMPATIBLE_BASE_URLS[provider]
        )
    else:
        raise UnsupportedProviderError(provider.value)


def get_default_model(provider: ModelProvider | str) -> str:
    """Return a sensible model id for ``provider``, or a generic fallback."""
    try:
        provider = ModelProvider(provider)
    except ValueError:
        logger.debug("No default model for %s, using %s", provider, FALLBACK_MODEL)
        return FALLBACK_MODEL
    return _DEFAULT_MODELS.get(provider, FALLBACK_MODEL)
