"""Tests for configuration loading and validation."""
from __future__ import annotations

import pytest

from droplet_mcp_server.config import Config


class TestFromEnv:
    def test_defaults(self):
        config = Config.from_env({})

        assert config.api_token == ""
        assert config.api_url == "https://api.digitalocean.com"
        assert config.api_timeout == 30.0
        assert config.mode == "stdio"
        assert (config.http_host, config.http_port, config.http_path) == ("127.0.0.1", 8080, "/mcp")
        assert config.log_level == "INFO"

    def test_overrides(self):
        config = Config.from_env(
            {
                "DIGITALOCEAN_API_TOKEN": " secret \n",
                "DIGITALOCEAN_API_URL": "http://localhost:9000",
                "DIGITALOCEAN_TIMEOUT": "5",
                "MCP_TRANSPORT": "HTTP",
                "MCP_HTTP_HOST": "0.0.0.0",
                "MCP_HTTP_PORT": "3000",
                "MCP_HTTP_PATH": "/do",
                "LOG_LEVEL": "debug",
            }
        )

        assert config.api_token == "secret"
        assert config.api_url == "http://localhost:9000"
        assert config.api_timeout == 5.0
        assert config.mode == "http"
        assert config.http_host == "0.0.0.0"
        assert config.http_port == 3000
        assert config.http_path == "/do"
        assert config.log_level == "DEBUG"

    def test_bad_port(self):
        with pytest.raises(ValueError):
            Config.from_env({"MCP_HTTP_PORT": "eighty"})


class TestValidation:
    def test_stdio_is_valid(self):
        assert Config().is_valid_for_mode() == (True, "")

    def test_http_port_range(self):
        assert Config(mode="http", http_port=80).is_valid_for_mode() == (True, "")
        assert Config(mode="http", http_port=70000).is_valid_for_mode() == (False, "Port must be between 1 and 65535")

    def test_http_path(self):
        valid, error = Config(mode="http", http_path="mcp").is_valid_for_mode()
        assert not valid
        assert "must start with '/'" in error

    def test_unknown_mode(self):
        assert Config(mode="websocket").is_valid_for_mode() == (False, "Unknown mode: websocket")

    def test_timeout(self):
        assert Config(api_timeout=0).is_valid_for_mode() == (False, "Timeout must be positive")


class TestDictRoundTrip:
    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"http_port": 9000, "unknown_field": "ignored"})
        assert config.http_port == 9000
        assert "unknown_field" not in config.to_dict()


class TestEndToEndGate:
    def test_every_e2e_module_is_gated(self):
        from tests.e2e import helpers, test_read_only_tools, test_tool_discovery

        for module in (test_read_only_tools, test_tool_discovery):
            assert module.pytestmark is helpers.requires_server
        assert helpers.requires_server.args == (not helpers.ENABLED,)

