"""Read-only views of a droplet's related resources, plus private networking."""
from typing import Any

from ...digitalocean.models import ListOptions
from ...tool_decorator import Number, Tool, pagination_arguments
from .._helpers import list_options, require_id

# Kernels are listed in one fixed page
_KERNEL_LIST_OPTIONS = ListOptions(page=1, per_page=100)


def _droplet_id(args: dict[str, Any]) -> int:
    return require_id(args, "ID", "Droplet ID")


@Tool(
    "droplet-neighbors",
    "Get the droplets running on the same physical hardware as a droplet",
    arguments=[Number("ID", "ID of the droplet", required=True)],
)
async def droplet_neighbors(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplets.neighbors(_droplet_id(args))


@Tool(
    "droplet-kernels",
    "List the kernels available to a droplet",
    arguments=[Number("ID", "ID of the droplet", required=True)],
)
async def droplet_kernels(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplets.kernels(_droplet_id(args), _KERNEL_LIST_OPTIONS)


@Tool(
    "droplet-snapshots",
    "List snapshots of a droplet",
    arguments=[Number("ID", "ID of the droplet", required=True), *pagination_arguments()],
)
async def droplet_snapshots(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplets.snapshots(_droplet_id(args), list_options(args))


@Tool(
    "droplet-backups",
    "List backups of a droplet",
    arguments=[Number("ID", "ID of the droplet", required=True), *pagination_arguments()],
)
async def droplet_backups(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplets.backups(_droplet_id(args), list_options(args))


@Tool(
    "droplet-actions-list",
    "List the actions performed on a droplet",
    arguments=[Number("ID", "ID of the droplet", required=True), *pagination_arguments()],
)
async def droplet_actions_list(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplets.actions(_droplet_id(args), list_options(args))


@Tool(
    "droplet-action",
    "Get one action of a droplet",
    arguments=[
        Number("DropletID", "ID of the droplet", required=True),
        Number("ActionID", "ID of the action", required=True),
    ],
)
async def droplet_action(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    droplet_id = require_id(args, "DropletID", "DropletID")
    action_id = require_id(args, "ActionID", "ActionID")
    return await client.droplet_actions.get(droplet_id, action_id)


@Tool(
    "droplet-backup-policy-get",
    "Get the backup policy of a droplet",
    arguments=[Number("ID", "ID of the droplet", required=True)],
)
async def droplet_backup_policy_get(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplets.get_backup_policy(_droplet_id(args))


@Tool(
    "droplet-backup-policies-list",
    "List the backup policies of all droplets",
    arguments=pagination_arguments(),
)
async def droplet_backup_policies_list(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplets.list_backup_policies(list_options(args))


@Tool(
    "droplet-backup-policies-supported",
    "List the supported droplet backup policies",
)
async def droplet_backup_policies_supported(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplets.list_supported_backup_policies()


@Tool(
    "droplet-associated-resources",
    "List the resources (volumes, snapshots, reserved IPs) that would be destroyed with a droplet",
    arguments=[Number("ID", "ID of the droplet", required=True)],
)
async def droplet_associated_resources(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplets.list_associated_resources_for_deletion(_droplet_id(args))


@Tool(
    "droplet-enable-private-net",
    "Enable private networking on a droplet",
    arguments=[Number("ID", "ID of the droplet", required=True)],
)
async def droplet_enable_private_net(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.droplet_actions.enable_private_networking(_droplet_id(args))
