"""Droplet tools: create, get, list and delete droplets."""
from typing import Any
import logging

from ...digitalocean.models import DropletCreateRequest, DropletCreateVolume, DropletMultiCreateRequest
from ...tool_config import (
    get_argument_array,
    get_argument_boolean,
    get_argument_number,
    get_argument_optional_boolean,
    get_argument_string,
)
from ...tool_decorator import Array, Boolean, Number, String, Tool, pagination_arguments
from .._helpers import (
    format_droplet_summaries,
    list_options,
    parse_backup_policy,
    parse_ssh_keys,
    parse_string_array,
    parse_tags,
    require_id,
    require_string,
)

logger = logging.getLogger(__name__)


# Optional arguments shared by droplet-create and droplet-create-multiple
_CREATE_OPTIONS = [
    Boolean("Backup", "Whether to enable backups", default=False),
    Boolean("Monitoring", "Whether to enable monitoring", default=False),
    Boolean("IPv6", "Enable IPv6 networking", default=False),
    String("VPCUUID", "VPC UUID to place the droplet into"),
    String("UserData", "Cloud-init user data to pass to droplet"),
    Array("Volumes", "Array of volume IDs to attach to the droplet"),
    Boolean("WithDropletAgent", "Whether to enable the droplet agent", default=False),
    String("BackupPolicy", "JSON encoded backup policy, e.g. {\"plan\": \"weekly\", \"weekday\": \"SUN\", \"hour\": 4}"),
    Array("SSHKeys", "Array of SSH key IDs (numbers) or fingerprints (strings) to add to the droplet"),
    Array("Tags", "Array of tag names to apply to the droplet"),
]


def _create_fields(args: dict[str, Any]) -> dict[str, Any]:
    """Request fields common to single and multi create.

    Raises:
        HandlerError: If BackupPolicy is not valid JSON
    """
    volumes = parse_tags(get_argument_array(args, "Volumes"))
    vpc_uuid = get_argument_string(args, "VPCUUID")
    user_data = get_argument_string(args, "UserData")

    return {
        "size": get_argument_string(args, "Size"),
        "image": get_argument_number(args, "ImageID"),
        "region": get_argument_string(args, "Region"),
        "backups": get_argument_boolean(args, "Backup"),
        "monitoring": get_argument_boolean(args, "Monitoring"),
        "ipv6": get_argument_boolean(args, "IPv6"),
        "vpc_uuid": vpc_uuid or None,
        "user_data": user_data or None,
        "volumes": [DropletCreateVolume(id=v) for v in volumes] or None,
        "with_droplet_agent": get_argument_optional_boolean(args, "WithDropletAgent"),
        "backup_policy": parse_backup_policy(get_argument_string(args, "BackupPolicy"), "BackupPolicy"),
        "ssh_keys": parse_ssh_keys(get_argument_array(args, "SSHKeys")) or None,
        "tags": parse_tags(get_argument_array(args, "Tags")) or None,
    }


@Tool(
    "droplet-create",
    "Create a new droplet",
    arguments=[
        String("Name", "Name of the droplet", required=True),
        String("Size", "Slug of the droplet size (e.g., s-1vcpu-1gb)", required=True),
        Number("ImageID", "ID of the image to use", required=True),
        String("Region", "Slug of the region (e.g., nyc3)", required=True),
        *_CREATE_OPTIONS,
    ],
)
async def droplet_create(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    request = DropletCreateRequest(name=get_argument_string(args, "Name"), **_create_fields(args))
    droplet = await client.droplets.create(request)
    logger.info("Created droplet %s", droplet.get("id") if isinstance(droplet, dict) else droplet)
    return droplet


@Tool(
    "droplet-create-multiple",
    "Create multiple droplets with the same configuration",
    arguments=[
        Array("Names", "Names of the droplets to create", required=True),
        String("Size", "Slug of the droplet size (e.g., s-1vcpu-1gb)", required=True),
        Number("ImageID", "ID of the image to use", required=True),
        String("Region", "Slug of the region (e.g., nyc3)", required=True),
        *_CREATE_OPTIONS,
    ],
)
async def droplet_create_multiple(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    names = parse_string_array(args.get("Names"), "Names")
    request = DropletMultiCreateRequest(names=names, **_create_fields(args))
    droplets = await client.droplets.create_multiple(request)
    return format_droplet_summaries(droplets)


@Tool(
    "droplet-get",
    "Get a droplet by its ID",
    arguments=[Number("ID", "ID of the droplet", required=True)],
)
async def droplet_get(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplets.get(require_id(args, "ID", "Droplet ID"))


@Tool(
    "droplet-list",
    "List droplets with pagination",
    arguments=pagination_arguments(),
)
async def droplet_list(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    droplets = await client.droplets.list(list_options(args))
    return format_droplet_summaries(droplets)


@Tool(
    "droplet-list-gpus",
    "List GPU droplets with pagination",
    arguments=pagination_arguments(),
)
async def droplet_list_gpus(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    droplets = await client.droplets.list_with_gpus(list_options(args))
    return format_droplet_summaries(droplets)


@Tool(
    "droplet-list-by-name",
    "List droplets with an exact name",
    arguments=[String("Name", "Name of the droplets", required=True), *pagination_arguments()],
)
async def droplet_list_by_name(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    droplets = await client.droplets.list_by_name(require_string(args, "Name"), list_options(args))
    return format_droplet_summaries(droplets)


@Tool(
    "droplet-list-by-tag",
    "List droplets carrying a tag",
    arguments=[String("Tag", "Tag name", required=True), *pagination_arguments()],
)
async def droplet_list_by_tag(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    droplets = await client.droplets.list_by_tag(require_string(args, "Tag"), list_options(args))
    return format_droplet_summaries(droplets)


@Tool(
    "droplet-delete",
    "Delete a droplet",
    arguments=[Number("ID", "ID of the droplet to delete", required=True)],
    destructive=True,
)
async def droplet_delete(ctx: Any, client: Any, args: dict[str, Any]) -> str:
    droplet_id = require_id(args, "ID", "Droplet ID")
    await client.droplets.delete(droplet_id)
    logger.info("Deleted droplet %d", droplet_id)
    return "Droplet deleted successfully"


@Tool(
    "droplet-delete-by-tag",
    "Delete every droplet carrying a tag",
    arguments=[String("Tag", "Tag of the droplets to delete", required=True)],
    destructive=True,
)
async def droplet_delete_by_tag(ctx: Any, client: Any, args: dict[str, Any]) -> str:
    tag = require_string(args, "Tag")
    await client.droplets.delete_by_tag(tag)
    logger.info("Deleted droplets tagged %r", tag)
    return f'Droplets with tag "{tag}" deleted successfully'
