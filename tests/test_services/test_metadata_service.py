"""Tests for PR metadata and commit message generation."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from vibekit.config import ModelConfig
from vibekit.errors import MissingRequiredOptionError, UnsupportedProviderError
from vibekit.models.provider import CommitMessage, ModelProvider, PRMetadata
from vibekit.services.metadata_service import (
    COMMIT_INSTRUCTION,
    PR_INSTRUCTION,
    build_prompt,
    generate_commit_message,
    generate_pr_metadata,
)


@pytest.fixture
def provider_factory():
    model = MagicMock()
    model.generate_object = AsyncMock()
    provider = MagicMock(return_value=model)
    provider.name = "fake"
    with patch(
        "vibekit.services.metadata_service.create_provider", return_value=provider
    ) as create:
        yield create, provider, model


class TestBuildPrompt:
    def test_layout(self):
        assert build_prompt("Do it:", "task", "diff") == "Do it:\ntask\n\npatch:\n\ndiff"


class TestGeneratePRMetadata:
    @pytest.mark.asyncio
    async def test_uses_configured_vendor_and_model(self, provider_factory):
        create, provider, model = provider_factory
        expected = PRMetadata(title="T", body="B", branchName="b", commitMessage="c")
        model.generate_object.return_value = expected

        result = await generate_pr_metadata(
            "diff --git", ModelConfig(api_key="k", name="claude-x", provider="anthropic"), "task",
        )

        assert result is expected
        create.assert_called_once_with("anthropic", "k", None)
        provider.assert_called_once_with("claude-x")
        prompt, schema = model.generate_object.await_args.args
        assert prompt == build_prompt(PR_INSTRUCTION, "task", "diff --git")
        assert schema is PRMetadata

    @pytest.mark.asyncio
    async def test_defaults_to_openai(self, provider_factory):
        create, provider, model = provider_factory
        await generate_pr_metadata("diff", ModelConfig(api_key="k"), "task")
        create.assert_called_once_with(ModelProvider.OPENAI, "k", None)
        provider.assert_called_once_with("gpt-4o-mini")

    @pytest.mark.asyncio
    async def test_base_url_forwarded(self, provider_factory):
        create, _, _ = provider_factory
        config = ModelConfig(api_key="k", name="dep", provider="azure", base_url="https://az")
        await generate_pr_metadata("diff", config, "task")
        create.assert_called_once_with("azure", "k", "https://az")

    @pytest.mark.asyncio
    async def test_provider_errors_propagate(self):
        with pytest.raises(UnsupportedProviderError):
            await generate_pr_metadata("diff", ModelConfig(api_key="k", provider="cohere"), "t")
        with pytest.raises(MissingRequiredOptionError):
            await generate_pr_metadata("diff", ModelConfig(api_key="k", provider="azure"), "t")


class TestGenerateCommitMessage:
    @pytest.mark.asyncio
    async def test_generate(self, provider_factory):
        _, _, model = provider_factory
        model.generate_object.return_value = CommitMessage(commitMessage="fix: x")

        result = await generate_commit_message("diff", ModelConfig(api_key="k"), "task")

        assert result.commit_message == "fix: x"
        prompt, schema = model.generate_object.await_args.args
        assert prompt.startswith(COMMIT_INSTRUCTION)
        assert schema is CommitMessage
