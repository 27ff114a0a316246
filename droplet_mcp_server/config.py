"""Configuration for the droplet MCP server.

Settings come from environment variables (see ``Config.from_env``). Every
field has a sensible default, so the server starts without any
configuration; only the API token is needed before tools can reach
DigitalOcean, and even that can be supplied per request instead.
"""

import os
from dataclasses import asdict, dataclass
from typing import Literal, Mapping, Optional

from .digitalocean.client import DEFAULT_BASE_URL


@dataclass
class Config:
    """
    Server configuration.

    All fields have sensible defaults. ``from_env`` overrides them from the
    process environment.
    """

    # DigitalOcean API
    api_token: str = ""
    api_url: str = DEFAULT_BASE_URL
    api_timeout: float = 30.0

    # Transport: "stdio" for local clients, "http" for streamable HTTP
    mode: Literal["http", "stdio"] = "stdio"

    # HTTP settings
    http_host: str = "127.0.0.1"
    http_port: int = 8080
    http_path: str = "/mcp"

    log_level: str = "INFO"

    def is_valid_for_mode(self) -> tuple[bool, str]:
        """
        Check if config is valid for current mode.

        Returns:
            Tuple of (is_valid, error_message). If valid, error_message is empty string.

        Examples:
            >>> Config(mode="http", http_port=80).is_valid_for_mode()
            (True, '')

            >>> Config(mode="http", http_port=70000).is_valid_for_mode()
            (False, 'Port must be between 1 and 65535')
        """
        if self.api_timeout <= 0:
            return False, "Timeout must be positive"
        if self.mode == "stdio":
            return True, ""
        if self.mode == "http":
            if not (1 <= self.http_port <= 65535):
                return False, "Port must be between 1 and 65535"
            if not self.http_path.startswith("/"):
                return False, "HTTP path must start with '/'"
            return True, ""
        return False, f"Unknown mode: {self.mode}"

    def to_dict(self) -> dict:
        """Convert to a plain dict (the token is included as-is)."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """
        Create from dict, using defaults for missing keys.

        Keys that are not dataclass fields are ignored.

        Examples:
            >>> Config.from_dict({"http_port": 9000}).http_port
            9000
        """
        return cls(
            **{k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Create from environment variables.

        Variables:
            DIGITALOCEAN_API_TOKEN, DIGITALOCEAN_API_URL, DIGITALOCEAN_TIMEOUT,
            MCP_TRANSPORT, MCP_HTTP_HOST, MCP_HTTP_PORT, MCP_HTTP_PATH, LOG_LEVEL

        Raises:
            ValueError: If DIGITALOCEAN_TIMEOUT or MCP_HTTP_PORT is not a number
        """
        env = os.environ if environ is None else environ
        data: dict = {}

        if "DIGITALOCEAN_API_TOKEN" in env:
            data["api_token"] = env["DIGITALOCEAN_API_TOKEN"].strip()
        if env.get("DIGITALOCEAN_API_URL"):
            data["api_url"] = env["DIGITALOCEAN_API_URL"]
        if env.get("DIGITALOCEAN_TIMEOUT"):
            data["api_timeout"] = float(env["DIGITALOCEAN_TIMEOUT"])
        if env.get("MCP_TRANSPORT"):
            data["mode"] = env["MCP_TRANSPORT"].strip().lower()
        if env.get("MCP_HTTP_HOST"):
            data["http_host"] = env["MCP_HTTP_HOST"]
        if env.get("MCP_HTTP_PORT"):
            data["http_port"] = int(env["MCP_HTTP_PORT"])
        if env.get("MCP_HTTP_PATH"):
            data["http_path"] = env["MCP_HTTP_PATH"]
        if env.get("LOG_LEVEL"):
            data["log_level"] = env["LOG_LEVEL"].upper()

        return cls.from_dict(data)
