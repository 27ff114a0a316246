"""Droplet action tools.

Each tool triggers one action on a droplet (or on every droplet carrying a
tag) and returns the resulting action object(s). Actions are asynchronous on
the DigitalOcean side: the returned action starts "in-progress" and can be
polled with droplet-action or get-droplet-action-by-uri.
"""
from typing import Any

from ...digitalocean.models import BackupPolicyRequest
from ...tool_config import HandlerFunc, get_argument_boolean, get_argument_string
from ...tool_decorator import Boolean, Number, String, Tool
from .._helpers import parse_backup_policy, require_id, require_string


def _droplet_id(args: dict[str, Any]) -> int:
    return require_id(args, "ID", "Droplet ID")


# ------------------------------------------------------------------------------
# Single-droplet actions that take nothing but the droplet ID
# ------------------------------------------------------------------------------
# (tool name, description, DropletActionsService method)
_SIMPLE_ACTIONS = [
    ("reboot-droplet", "Reboot a droplet", "reboot"),
    ("power-cycle-droplet", "Power cycle a droplet (power off then on)", "power_cycle"),
    ("power-on-droplet", "Power on a droplet", "power_on"),
    ("power-off-droplet", "Power off a droplet (hard shutdown)", "power_off"),
    ("shutdown-droplet", "Gracefully shut down a droplet", "shutdown"),
    ("password-reset-droplet", "Reset the root password of a droplet", "password_reset"),
    ("enable-ipv6-droplet", "Enable IPv6 networking on a droplet", "enable_ipv6"),
    ("enable-backups-droplet", "Enable backups on a droplet", "enable_backups"),
    ("disable-backups-droplet", "Disable backups on a droplet", "disable_backups"),
]


def _simple_action(method: str) -> HandlerFunc:
    async def handler(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
        return await getattr(client.droplet_actions, method)(_droplet_id(args))

    return handler


for _name, _description, _method in _SIMPLE_ACTIONS:
    Tool(
        _name,
        _description,
        _simple_action(_method),
        arguments=[Number("ID", "ID of the droplet", required=True)],
    )


# ------------------------------------------------------------------------------
# Actions on every droplet carrying a tag
# ------------------------------------------------------------------------------
_TAG_ACTIONS = [
    ("power-cycle-droplets-by-tag", "Power cycle all droplets with a tag", "power_cycle_by_tag"),
    ("power-on-droplets-by-tag", "Power on all droplets with a tag", "power_on_by_tag"),
    ("power-off-droplets-by-tag", "Power off all droplets with a tag", "power_off_by_tag"),
    ("shutdown-droplets-by-tag", "Shut down all droplets with a tag", "shutdown_by_tag"),
    ("enable-backups-by-tag", "Enable backups on all droplets with a tag", "enable_backups_by_tag"),
    ("disable-backups-by-tag", "Disable backups on all droplets with a tag", "disable_backups_by_tag"),
    ("enable-ipv6-by-tag", "Enable IPv6 on all droplets with a tag", "enable_ipv6_by_tag"),
    ("enable-private-net-by-tag", "Enable private networking on all droplets with a tag", "enable_private_networking_by_tag"),
]


def _tag_action(method: str) -> HandlerFunc:
    async def handler(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
        return await getattr(client.droplet_actions, method)(require_string(args, "Tag"))

    return handler


for _name, _description, _method in _TAG_ACTIONS:
    Tool(
        _name,
        _description,
        _tag_action(_method),
        arguments=[String("Tag", "Tag of the droplets", required=True)],
    )


# ------------------------------------------------------------------------------
# Actions with extra arguments
# ------------------------------------------------------------------------------

@Tool(
    "snapshot-droplet",
    "Take a snapshot of a droplet",
    arguments=[
        Number("ID", "ID of the droplet", required=True),
        String("Name", "Name of the snapshot", required=True),
    ],
)
async def snapshot_droplet(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplet_actions.snapshot(_droplet_id(args), get_argument_string(args, "Name"))


@Tool(
    "snapshot-droplets-by-tag",
    "Take a snapshot of every droplet with a tag",
    arguments=[
        String("Tag", "Tag of the droplets", required=True),
        String("Name", "Name of the snapshots", required=True),
    ],
)
async def snapshot_droplets_by_tag(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    tag = require_string(args, "Tag")
    return await client.droplet_actions.snapshot_by_tag(tag, get_argument_string(args, "Name"))


@Tool(
    "restore-droplet",
    "Restore a droplet from a backup or snapshot image",
    arguments=[
        Number("ID", "ID of the droplet", required=True),
        Number("ImageID", "ID of the backup or snapshot image", required=True),
    ],
)
async def restore_droplet(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    image_id = require_id(args, "ImageID", "Image ID")
    return await client.droplet_actions.restore(_droplet_id(args), image_id)


@Tool(
    "resize-droplet",
    "Resize a droplet. The droplet must be powered off",
    arguments=[
        Number("ID", "ID of the droplet", required=True),
        String("Size", "Slug of the new size (e.g., s-2vcpu-4gb)", required=True),
        Boolean("ResizeDisk", "Whether to resize the disk too (irreversible)", default=False),
    ],
)
async def resize_droplet(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplet_actions.resize(
        _droplet_id(args),
        get_argument_string(args, "Size"),
        get_argument_boolean(args, "ResizeDisk"),
    )


@Tool(
    "rename-droplet",
    "Rename a droplet",
    arguments=[
        Number("ID", "ID of the droplet", required=True),
        String("Name", "New name of the droplet", required=True),
    ],
)
async def rename_droplet(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplet_actions.rename(_droplet_id(args), get_argument_string(args, "Name"))


@Tool(
    "rebuild-droplet-by-image-id",
    "Rebuild a droplet from an image ID",
    arguments=[
        Number("ID", "ID of the droplet", required=True),
        Number("ImageID", "ID of the image", required=True),
    ],
)
async def rebuild_droplet_by_image_id(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    image_id = require_id(args, "ImageID", "Image ID")
    return await client.droplet_actions.rebuild_by_image_id(_droplet_id(args), image_id)


@Tool(
    "rebuild-droplet-by-slug",
    "Rebuild a droplet from an image slug",
    arguments=[
        Number("ID", "ID of the droplet", required=True),
        String("ImageSlug", "Slug of the image (e.g., ubuntu-24-04-x64)", required=True),
    ],
)
async def rebuild_droplet_by_slug(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    slug = require_string(args, "ImageSlug")
    return await client.droplet_actions.rebuild_by_image_slug(_droplet_id(args), slug)


@Tool(
    "change-kernel-droplet",
    "Change the kernel of a droplet",
    arguments=[
        Number("ID", "ID of the droplet", required=True),
        Number("KernelID", "ID of the kernel", required=True),
    ],
)
async def change_kernel_droplet(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    kernel_id = require_id(args, "KernelID", "Kernel ID")
    return await client.droplet_actions.change_kernel(_droplet_id(args), kernel_id)


@Tool(
    "enable-backups-with-policy",
    "Enable backups on a droplet with a backup policy",
    arguments=[
        Number("ID", "ID of the droplet", required=True),
        String("PolicyJSON", "JSON encoded backup policy, e.g. {\"plan\": \"daily\", \"hour\": 8}", required=True),
    ],
)
async def enable_backups_with_policy(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    droplet_id = _droplet_id(args)
    policy = _require_policy(args)
    return await client.droplet_actions.enable_backups_with_policy(droplet_id, policy)


@Tool(
    "change-backup-policy",
    "Change the backup policy of a droplet",
    arguments=[
        Number("ID", "ID of the droplet", required=True),
        String("PolicyJSON", "JSON encoded backup policy, e.g. {\"plan\": \"weekly\", \"weekday\": \"SUN\", \"hour\": 4}", required=True),
    ],
)
async def change_backup_policy(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    droplet_id = _droplet_id(args)
    policy = _require_policy(args)
    return await client.droplet_actions.change_backup_policy(droplet_id, policy)


def _require_policy(args: dict[str, Any]) -> BackupPolicyRequest:
    return parse_backup_policy(require_string(args, "PolicyJSON"), "PolicyJSON")


@Tool(
    "get-droplet-action-by-uri",
    "Get a droplet action from its API URI (as found in an action's links)",
    arguments=[String("URI", "Action URI, e.g. https://api.digitalocean.com/v2/droplets/1/actions/2", required=True)],
)
async def get_droplet_action_by_uri(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplet_actions.get_by_uri(require_string(args, "URI"))
