"""Per-invocation DigitalOcean client factory."""

import logging
from typing import Any, Optional

import httpx

from .client import DigitalOceanClient

logger = logging.getLogger(__name__)


def _bearer_token(ctx: Any) -> Optional[str]:
    """Extract a bearer token from the inbound HTTP request, if any.

    ``ctx`` is the MCP request context. Over streamable HTTP its ``request``
    attribute is the starlette Request; over stdio there is none.
    """
    request = getattr(ctx, "request", None)
    headers = getattr(request, "headers", None)
    if headers is None:
        return None

    auth = headers.get("authorization", "")
    scheme, _, token = auth.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


class DigitalOceanClientFactory:
    """Produce an authenticated DigitalOcean client for each tool call.

    All produced clients share one httpx.AsyncClient. The token comes from
    the caller's ``Authorization: Bearer`` header when present, otherwise
    from the configured API token.
    """

    def __init__(self, config: Any, http: Optional[httpx.AsyncClient] = None) -> None:
        self._config = config
        self._http = http or httpx.AsyncClient(timeout=config.api_timeout)

    async def __call__(self, ctx: Any) -> DigitalOceanClient:
        token = _bearer_token(ctx) or self._config.api_token
        if not token:
            raise ValueError(
                "no DigitalOcean API token: set DIGITALOCEAN_API_TOKEN or send an Authorization header"
            )
        return DigitalOceanClient(self._http, token, self._config.api_url)

    async def aclose(self) -> None:
        await self._http.aclose()
        logger.debug("DigitalOcean HTTP client closed")
