"""Model vendor domain models and structured-generation schemas."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ModelProvider(str, Enum):
    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    OPENROUTER = "openrouter"
    AZURE = "azure"
    GEMINI = "gemini"
    OLLAMA = "ollama"
    MISTRAL = "mistral"
    DEEPSEEK = "deepseek"
    XAI = "xai"
    GROQ = "groq"
    ARCEEAI = "arceeai"


class PRMetadata(BaseModel):
    """Pull request metadata suggested by a model for a patch."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str = Field(description="Suggested title for the pull request")
    body: str = Field(description="Suggested body for the pull request")
    branch_name: str = Field(
        alias="branchName",
        description="Suggested branch name, should be unique and descriptive",
    )
    commit_message: str = Field(
        alias="commitMessage",
        description="Suggested commit message for the pull request",
    )


class CommitMessage(BaseModel):
    """Commit message suggested by a model for a patch."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    commit_message: str = Field(
        alias="commitMessage",
        description="Suggested commit message for the changes",
    )
