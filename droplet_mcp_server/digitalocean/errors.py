"""Errors raised by the DigitalOcean API client."""
from typing import Optional


class DigitalOceanAPIError(Exception):
    """The DigitalOcean API answered with a non-2xx status.

    Attributes:
        status_code: HTTP status of the response
        error_id: Machine-readable error id from the body (e.g. "not_found")
        message: Human-readable message from the body
        request_id: DigitalOcean request id, useful for support tickets
    """

    def __init__(
        self,
        status_code: int,
        error_id: str,
        message: str,
        request_id: Optional[str] = None,
    ):
        self.status_code = status_code
        self.error_id = error_id
        self.message = message
        self.request_id = request_id
        text = f"DigitalOcean API error ({status_code}, {error_id}): {message}"
        if request_id:
            text += f" [request_id: {request_id}]"
        super().__init__(text)


class UntrustedURLError(ValueError):
    """An absolute URL does not point at the configured API host.

    Raised before any request is made, so the API token never leaves for
    another host.
    """
