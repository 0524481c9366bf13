"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

import cli as cli_module
from shared.config import get_settings


@pytest.fixture
def env(monkeypatch):
    """Clean provider environment and no logging reconfiguration."""
    for name in (
        "OPENAI_API_KEY",
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
        "MCP_MODE",
        "PORT",
        "OPENAI_DEFAULT_MODELS",
        "GEMINI_DEFAULT_MODELS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(cli_module, "configure_logging", lambda level="INFO": None)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def runner():
    return CliRunner()


# ---------------------------------------------------------------------------
# tools / models
# ---------------------------------------------------------------------------


def test_tools_needs_no_api_key(env, runner):
    result = runner.invoke(cli_module.cli, ["tools", "openai"])

    assert result.exit_code == 0
    listing = json.loads(result.output)
    assert listing["tools"][0]["name"] == "chat_completion"
    assert "inputSchema" in listing["tools"][0]


def test_tools_reflects_default_override(env, runner):
    env.setenv("GEMINI_DEFAULT_MODELS", "chat=gemini-2.5-flash")

    result = runner.invoke(cli_module.cli, ["tools", "gemini"])

    assert result.exit_code == 0
    assert "Always use gemini-2.5-flash" in result.output


def test_unknown_server_rejected(env, runner):
    result = runner.invoke(cli_module.cli, ["tools", "anthropic"])
    assert result.exit_code == 2


def test_models_lists_categories(env, runner):
    result = runner.invoke(cli_module.cli, ["models", "openai"])

    assert result.exit_code == 0
    assert "image (default: gpt-image-1)" in result.output
    assert "sora-2-pro" in result.output


def test_models_single_category(env, runner):
    result = runner.invoke(cli_module.cli, ["models", "gemini", "--category", "video"])

    assert result.exit_code == 0
    assert result.output.startswith("video (default: veo-3.0-generate-001)")
    assert "gemini-2.5-pro" not in result.output


def test_models_unknown_category(env, runner):
    result = runner.invoke(cli_module.cli, ["models", "gemini", "--category", "music"])

    assert result.exit_code == 1
    assert "Unknown category 'music'" in result.output


# ---------------------------------------------------------------------------
# call
# ---------------------------------------------------------------------------


def test_call_gated_tool(env, runner):
    env.setenv("OPENAI_API_KEY", "sk-test")

    result = runner.invoke(
        cli_module.cli, ["call", "openai", "create_video", "--args", '{"prompt": "waves"}']
    )

    assert result.exit_code == 0
    assert '"model": "sora-2"' in result.output
    assert '"seconds": 10' in result.output


def test_call_unknown_tool_exits_nonzero(env, runner):
    env.setenv("GEMINI_API_KEY", "gm-test")

    result = runner.invoke(cli_module.cli, ["call", "gemini", "nonexistent_tool"])

    assert result.exit_code == 1
    assert "Unknown tool: nonexistent_tool" in result.output


def test_call_rejects_bad_json(env, runner):
    result = runner.invoke(cli_module.cli, ["call", "openai", "create_video", "--args", "{nope"])

    assert result.exit_code == 1
    assert "--args is not valid JSON" in result.output


def test_call_without_api_key(env, runner):
    result = runner.invoke(
        cli_module.cli, ["call", "openai", "create_video", "--args", '{"prompt": "x"}']
    )

    assert result.exit_code == 1
    assert "OPENAI_API_KEY environment variable is required" in result.output


# ---------------------------------------------------------------------------
# serve
# ---------------------------------------------------------------------------


def test_serve_applies_overrides(env, runner):
    env.setenv("GEMINI_API_KEY", "gm-test")
    started = {}

    def fake_run_server(server, settings):
        started["server"] = server.name
        started["mode"] = settings.mcp_mode
        started["port"] = settings.port_for(server.name)

    env.setattr("core.server.run_server", fake_run_server)

    result = runner.invoke(cli_module.cli, ["serve", "gemini", "--mode", "http", "--port", "9100"])

    assert result.exit_code == 0
    assert started == {"server": "gemini-mcp", "mode": "http", "port": 9100}
