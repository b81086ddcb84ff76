"""Tests for Agent models."""

from vibekit.models.agent import (
    AgentMode,
    AgentType,
    ClaudeResponse,
    CommandSpec,
    ConversationTurn,
    ExecuteCommandOptions,
    StartParams,
)


class TestCommandSpec:
    def test_full_command(self):
        spec = CommandSpec(program="codex", args=("exec", "--model", "gpt-4o", "do stuff"))
        assert spec.full_command == "codex exec --model gpt-4o 'do stuff'"

    def test_full_command_no_args(self):
        spec = CommandSpec(program="claude")
        assert spec.full_command == "claude"

    def test_quotes_shell_metacharacters(self):
        spec = CommandSpec(program="opencode", args=("run", "rm -rf /; echo $HOME"))
        assert spec.full_command == "opencode run 'rm -rf /; echo $HOME'"


class TestStartParams:
    def test_defaults(self):
        params = StartParams()
        assert params.prompt == ""
        assert params.model == ""
        assert params.env_vars is None


class TestEnums:
    def test_agent_type_values(self):
        assert [t.value for t in AgentType] == ["codex", "claude", "opencode"]

    def test_agent_mode_from_string(self):
        assert AgentMode("ask") is AgentMode.ASK
        assert AgentMode.CODE == "code"


class TestConversationTurn:
    def test_to_dict(self):
        assert ConversationTurn(role="user", content="hi").to_dict() == {
            "role": "user", "content": "hi",
        }


class TestResponses:
    def test_response_fields(self):
        response = ClaudeResponse(exit_code=1, stdout="", stderr="err", sandbox_id="s")
        assert response.exit_code == 1
        assert response.stderr == "err"

    def test_execute_command_defaults(self):
        options = ExecuteCommandOptions()
        assert options.timeout_ms is None
        assert options.background is False
        assert options.use_repo_context is True
