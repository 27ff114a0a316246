"""Helpers shared by tool handlers: argument parsing and result shaping."""

import json
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..digitalocean.models import BackupPolicyRequest, ListOptions
from ..handler_wrappers import HandlerError
from ..tool_config import (
    PAGINATION_DEFAULTS,
    get_argument_float,
    get_argument_number,
    get_argument_string,
)

DROPLET_SUMMARY_FIELDS = (
    "id",
    "name",
    "memory",
    "vcpus",
    "disk",
    "region",
    "image",
    "size",
    "size_slug",
    "backup_ids",
    "next_backup_window",
    "snapshot_ids",
    "features",
    "locked",
    "status",
    "networks",
    "created_at",
    "kernel",
    "tags",
    "volume_ids",
    "vpc_uuid",
)

IMAGE_SUMMARY_FIELDS = (
    "id",
    "name",
    "slug",
    "distribution",
    "type",
    "public",
    "regions",
    "created_at",
    "min_disk_size",
)


def list_options(args: dict[str, Any]) -> ListOptions:
    """Page/PerPage arguments as ListOptions, falling back to the defaults."""
    page = get_argument_float(args, "Page", PAGINATION_DEFAULTS.page)
    per_page = get_argument_float(args, "PerPage", PAGINATION_DEFAULTS.per_page)
    return ListOptions(page=int(page), per_page=int(per_page))


def require_id(args: dict[str, Any], name: str, label: str) -> int:
    """Return a positive integer ID argument.

    Raises:
        HandlerError: "<label> is required" when the value is missing, zero,
            negative or not a number
    """
    value = get_argument_number(args, name)
    if value <= 0:
        raise HandlerError(f"{label} is required", hint=f"Pass a positive number as {name}")
    return value


def require_string(args: dict[str, Any], name: str) -> str:
    value = get_argument_string(args, name)
    if not value:
        raise HandlerError(f"{name} is required", hint=f"Pass a non-empty string as {name}")
    return value


def parse_ssh_keys(raw: Optional[list[Any]]) -> list[Union[int, str]]:
    """SSH key references: numbers are key IDs, strings are fingerprints."""
    keys: list[Union[int, str]] = []
    for item in raw or []:
        if isinstance(item, bool):
            continue
        if isinstance(item, (int, float)):
            keys.append(int(item))
        elif isinstance(item, str) and item:
            keys.append(item)
    return keys


def parse_tags(raw: Optional[list[Any]]) -> list[str]:
    return [tag for tag in raw or [] if isinstance(tag, str) and tag]


def parse_string_array(raw: Any, name: str) -> list[str]:
    """A non-empty list of strings; empty strings are dropped.

    Raises:
        HandlerError: If raw is not a list of strings, or nothing is left
            once empty strings are dropped
    """
    if isinstance(raw, list) and all(isinstance(item, str) for item in raw):
        values = [item for item in raw if item]
        if values:
            return values
    raise HandlerError(f"{name} must be a non-empty array of strings", **{name: raw})


def parse_backup_policy(raw_json: str, label: str) -> Optional[BackupPolicyRequest]:
    """Decode a JSON-encoded backup policy.

    Returns None for an empty string.

    Raises:
        HandlerError: If the text is not a JSON object describing a policy
    """
    if not raw_json:
        return None

    hint = f'{label} must be a JSON object such as {{"plan": "weekly", "weekday": "SUN", "hour": 4}}'
    try:
        data = json.loads(raw_json)
    except json.JSONDecodeError as e:
        raise HandlerError(f"invalid backup policy json: {e}", hint=hint) from e

    if not isinstance(data, dict):
        raise HandlerError("invalid backup policy json: expected an object", hint=hint)

    try:
        return BackupPolicyRequest.model_validate(data)
    except ValidationError as e:
        raise HandlerError(f"invalid backup policy json: {e.errors()[0]['msg']}", hint=hint) from e


def _project(item: dict[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    return {key: item.get(key) for key in fields}


def format_droplet_summaries(droplets: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [_project(d, DROPLET_SUMMARY_FIELDS) for d in droplets]


def format_image_summaries(images: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [_project(i, IMAGE_SUMMARY_FIELDS) for i in images]
