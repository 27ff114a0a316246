"""Image action tools: transfer and convert images, and poll their actions."""
from typing import Any

from ...tool_decorator import Number, String, Tool
from .._helpers import require_id, require_string


@Tool(
    "image-action-transfer",
    "Transfer an image to another region",
    arguments=[
        Number("ID", "Image ID", required=True),
        String("Region", "Slug of the destination region (e.g., sfo3)", required=True),
    ],
)
async def image_action_transfer(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    image_id = require_id(args, "ID", "Image ID")
    return await client.image_actions.transfer(image_id, require_string(args, "Region"))


@Tool(
    "image-action-convert",
    "Convert an image (for example a backup) to a snapshot",
    arguments=[Number("ID", "Image ID", required=True)],
)
async def image_action_convert(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    return await client.image_actions.convert(require_id(args, "ID", "Image ID"))


@Tool(
    "image-action-get",
    "Get an action performed on an image",
    arguments=[
        Number("ImageID", "Image ID", required=True),
        Number("ActionID", "Action ID", required=True),
    ],
)
async def image_action_get(ctx: Any, client: Any, args: dict[str, Any]) -> Any:
    image_id = require_id(args, "ImageID", "Image ID")
    action_id = require_id(args, "ActionID", "Action ID")
    return await client.image_actions.get(image_id, action_id)
