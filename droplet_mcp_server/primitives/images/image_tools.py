"""Image tools: list, inspect, import, rename and delete images."""
from typing import Any
import logging

from ...digitalocean.models import CustomImageCreateRequest, ImageUpdateRequest
from ...tool_config import get_argument_array, get_argument_string
from ...tool_decorator import Array, Number, String, Tool, pagination_arguments
from .._helpers import format_image_summaries, list_options, parse_tags, require_id, require_string

logger = logging.getLogger(__name__)

# Type filter -> ImagesService method; any other value lists every image
_LIST_BY_TYPE = {
    "distribution": "list_distribution",
    "application": "list_application",
    "user": "list_user",
}


def _image_id(args: dict[str, Any]) -> int:
    return require_id(args, "ID", "Image ID")


@Tool(
    "image-list",
    "List available images (snapshots, backups, distributions, applications)",
    arguments=[
        *pagination_arguments(),
        String("Type", "Filter by type: 'distribution', 'application', 'user' (snapshots/backups). If omitted, lists all"),
    ],
)
async def image_list(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    method = _LIST_BY_TYPE.get(get_argument_string(args, "Type"), "list")
    images = await getattr(client.images, method)(list_options(args))
    return format_image_summaries(images)


@Tool(
    "image-get",
    "Get a specific image by its numeric ID",
    arguments=[Number("ID", "Image ID", required=True)],
)
async def image_get(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.images.get_by_id(_image_id(args))


@Tool(
    "image-create",
    "Create a custom image from a URL pointing to a Linux virtual machine image",
    arguments=[
        String("Name", "Name of the image", required=True),
        String("Url", "Publicly accessible URL of the image file (raw, qcow2, vhdx, vdi or vmdk)", required=True),
        String("Region", "Slug of the region to store the image in (e.g., nyc3)", required=True),
        String("Distribution", "Linux distribution of the image (e.g., Ubuntu)"),
        String("Description", "Free-form description of the image"),
        Array("Tags", "Array of tag names to apply to the image"),
    ],
)
async def image_create(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    request = CustomImageCreateRequest(
        name=require_string(args, "Name"),
        url=require_string(args, "Url"),
        region=require_string(args, "Region"),
        distribution=get_argument_string(args, "Distribution") or None,
        description=get_argument_string(args, "Description") or None,
        tags=parse_tags(get_argument_array(args, "Tags")) or None,
    )
    image = await client.images.create(request)
    logger.info("Custom image %r import started", request.name)
    return image


@Tool(
    "image-update",
    "Update an image's name",
    arguments=[
        Number("ID", "Image ID", required=True),
        String("Name", "New name for the image", required=True),
    ],
)
async def image_update(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    image_id = _image_id(args)
    request = ImageUpdateRequest(name=require_string(args, "Name"))
    return await client.images.update(image_id, request)


@Tool(
    "image-delete",
    "Delete an image or snapshot",
    arguments=[Number("ID", "ID of the image to delete", required=True)],
    destructive=True,
)
async def image_delete(ctx: Any, client: Any, args: dict[str, Any]) -> str:
    image_id = _image_id(args)
    await client.images.delete(image_id)
    logger.info("Deleted image %d", image_id)
    return "Image deleted successfully"
