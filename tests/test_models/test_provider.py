"""Tests for Provider models."""

import pytest
from pydantic import ValidationError

from vibekit.models.provider import CommitMessage, ModelProvider, PRMetadata
from vibekit.models.sandbox import CommandResult


class TestPRMetadata:
    def test_validate_from_aliases(self):
        metadata = PRMetadata.model_validate({
            "title": "Add x", "body": "Adds x", "branchName": "add-x", "commitMessage": "feat: x",
        })
        assert metadata.branch_name == "add-x"
        assert metadata.commit_message == "feat: x"

    def test_populate_by_name(self):
        metadata = PRMetadata(title="t", body="b", branch_name="br", commit_message="c")
        assert metadata.model_dump(by_alias=True)["branchName"] == "br"

    def test_missing_field(self):
        with pytest.raises(ValidationError):
            PRMetadata.model_validate({"title": "t", "body": "b", "branchName": "br"})

    def test_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            CommitMessage.model_validate({"commitMessage": "c", "extra": 1})

    def test_json_schema_uses_aliases(self):
        schema = PRMetadata.model_json_schema()
        assert set(schema["required"]) == {"title", "body", "branchName", "commitMessage"}


class TestModelProvider:
    def test_values(self):
        assert ModelProvider("arceeai") is ModelProvider.ARCEEAI
        assert len(ModelProvider) == 11


class TestCommandResult:
    def test_ok(self):
        assert CommandResult(exit_code=0, stdout="", stderr="").ok
        assert not CommandResult(exit_code=3, stdout="", stderr="").ok
