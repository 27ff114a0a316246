"""Async client for the DigitalOcean API v2.

The client issues exactly one HTTP request per method call and never
retries. All services share the httpx.AsyncClient passed in, which is safe
to use from concurrent tasks.

Authentication: Personal Access Token (Bearer token), supplied per client.
"""

import logging
from typing import Any, Optional

import httpx

from .errors import DigitalOceanAPIError, UntrustedURLError
from .services import DropletActionsService, DropletsService, ImageActionsService, ImagesService

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.digitalocean.com"


class DigitalOceanClient:
    """Authenticated DigitalOcean API client.

    Attributes:
        droplets: Droplet CRUD, listings and per-droplet resources
        droplet_actions: Power, snapshot, backup and rebuild actions
        images: Image listing and management
        image_actions: Image transfer and conversion
    """

    def __init__(self, http: httpx.AsyncClient, token: str, base_url: str = DEFAULT_BASE_URL) -> None:
        self._http = http
        self._token = token
        self._base_url = base_url.rstrip("/")

        self.droplets = DropletsService(self)
        self.droplet_actions = DropletActionsService(self)
        self.images = ImagesService(self)
        self.image_actions = ImageActionsService(self)

    def _url(self, path: str) -> str:
        """Resolve an API path against the base URL.

        Absolute URLs are accepted only when their scheme and host match the
        base URL, since every request carries the bearer token.

        Raises:
            UntrustedURLError: For an absolute URL on another host or scheme
        """
        if "://" in path or path.startswith("//"):
            target = httpx.URL(path)
            base = httpx.URL(self._base_url)
            if (target.scheme, target.host, target.port) != (base.scheme, base.host, base.port):
                raise UntrustedURLError(f"refusing to send credentials to {target.scheme}://{target.host}")
            return path
        if not path.startswith("/"):
            path = "/" + path
        if not path.startswith("/v2/"):
            path = "/v2" + path
        return f"{self._base_url}{path}"

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json_body: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Make one API request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: API path, with or without the "/v2" prefix, or an absolute
                URL on the API host
            params: Query parameters
            json_body: Request body

        Returns:
            Decoded JSON body, or None for 204 No Content

        Raises:
            DigitalOceanAPIError: On any 4xx/5xx response
            UntrustedURLError: If path is an absolute URL on another host
            httpx.HTTPError: On transport failures and timeouts
        """
        url = self._url(path)
        logger.debug("%s %s params=%s", method, url, params)

        response = await self._http.request(
            method,
            url,
            params=params,
            json=json_body,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )

        if response.status_code >= 400:
            raise _api_error(response)

        if response.status_code == 204 or not response.content:
            return None

        return response.json()


def _api_error(response: httpx.Response) -> DigitalOceanAPIError:
    try:
        data = response.json()
    except ValueError:
        data = None

    if not isinstance(data, dict):
        return DigitalOceanAPIError(response.status_code, "unknown_error", response.text or response.reason_phrase)

    return DigitalOceanAPIError(
        response.status_code,
        data.get("id", "unknown_error"),
        data.get("message", response.text),
        data.get("request_id") or None,
    )
