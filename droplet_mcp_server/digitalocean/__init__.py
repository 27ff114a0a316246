"""DigitalOcean API v2 client used by the tool handlers."""

from .client import DEFAULT_BASE_URL, DigitalOceanClient
from .errors import DigitalOceanAPIError, UntrustedURLError
from .factory import DigitalOceanClientFactory
from .models import (
    BackupPolicyRequest,
    CustomImageCreateRequest,
    DropletCreateRequest,
    DropletCreateVolume,
    DropletMultiCreateRequest,
    ImageUpdateRequest,
    ListOptions,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DigitalOceanClient",
    "DigitalOceanAPIError",
    "UntrustedURLError",
    "DigitalOceanClientFactory",
    "BackupPolicyRequest",
    "CustomImageCreateRequest",
    "DropletCreateRequest",
    "DropletCreateVolume",
    "DropletMultiCreateRequest",
    "ImageUpdateRequest",
    "ListOptions",
]
