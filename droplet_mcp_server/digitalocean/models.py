"""Pydantic models for DigitalOcean request bodies."""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ListOptions(BaseModel):
    """Pagination query parameters."""
    page: int = Field(default=1, description="Page number (1-based)")
    per_page: int = Field(default=50, description="Items per page")

    def to_params(self) -> dict[str, int]:
        return {"page": self.page, "per_page": self.per_page}


class BackupPolicyRequest(BaseModel):
    """Backup policy for a droplet.

    Accepted as JSON by tools, so unknown keys are ignored rather than
    rejected.
    """
    model_config = ConfigDict(extra="ignore")

    plan: Optional[str] = Field(default=None, description="'daily' or 'weekly'")
    weekday: Optional[str] = Field(default=None, description="Day of the week for weekly backups")
    hour: Optional[int] = Field(default=None, description="Hour of the day the backup window starts")


class DropletCreateVolume(BaseModel):
    id: str


class _DropletCreateBase(BaseModel):
    region: str
    size: str
    # Image ID (int) or slug (str)
    image: Union[int, str]
    ssh_keys: Optional[list[Union[int, str]]] = None
    backups: bool = False
    ipv6: bool = False
    monitoring: bool = False
    vpc_uuid: Optional[str] = None
    user_data: Optional[str] = None
    volumes: Optional[list[DropletCreateVolume]] = None
    tags: Optional[list[str]] = None
    with_droplet_agent: Optional[bool] = None
    backup_policy: Optional[BackupPolicyRequest] = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class DropletCreateRequest(_DropletCreateBase):
    name: str


class DropletMultiCreateRequest(_DropletCreateBase):
    names: list[str]


class CustomImageCreateRequest(BaseModel):
    name: str
    url: str
    region: str
    distribution: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ImageUpdateRequest(BaseModel):
    name: str
