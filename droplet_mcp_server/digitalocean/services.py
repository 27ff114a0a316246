"""DigitalOcean API services.

Each coroutine performs one request through the owning client and returns
the payload unwrapped from its envelope key (``droplet``, ``actions``, ...).
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .models import (
    BackupPolicyRequest,
    CustomImageCreateRequest,
    DropletCreateRequest,
    DropletMultiCreateRequest,
    ImageUpdateRequest,
    ListOptions,
)

if TYPE_CHECKING:
    from .client import DigitalOceanClient


def _params(opt: Optional[ListOptions], **extra: Any) -> dict[str, Any]:
    params = (opt or ListOptions()).to_params()
    params.update({k: v for k, v in extra.items() if v is not None})
    return params


def _unwrap(data: Any, key: str) -> Any:
    if isinstance(data, dict):
        return data.get(key)
    return None


class _Service:
    def __init__(self, client: "DigitalOceanClient") -> None:
        self._client = client


class DropletsService(_Service):
    async def list(self, opt: Optional[ListOptions] = None) -> list[dict[str, Any]]:
        data = await self._client.request("GET", "/droplets", params=_params(opt))
        return _unwrap(data, "droplets") or []

    async def list_with_gpus(self, opt: Optional[ListOptions] = None) -> list[dict[str, Any]]:
        data = await self._client.request("GET", "/droplets", params=_params(opt, type="gpus"))
        return _unwrap(data, "droplets") or []

    async def list_by_name(self, name: str, opt: Optional[ListOptions] = None) -> list[dict[str, Any]]:
        data = await self._client.request("GET", "/droplets", params=_params(opt, name=name))
        return _unwrap(data, "droplets") or []

    async def list_by_tag(self, tag: str, opt: Optional[ListOptions] = None) -> list[dict[str, Any]]:
        data = await self._client.request("GET", "/droplets", params=_params(opt, tag_name=tag))
        return _unwrap(data, "droplets") or []

    async def get(self, droplet_id: int) -> dict[str, Any]:
        data = await self._client.request("GET", f"/droplets/{droplet_id}")
        return _unwrap(data, "droplet")

    async def create(self, request: DropletCreateRequest) -> dict[str, Any]:
        data = await self._client.request("POST", "/droplets", json_body=request.to_payload())
        return _unwrap(data, "droplet")

    async def create_multiple(self, request: DropletMultiCreateRequest) -> list[dict[str, Any]]:
        data = await self._client.request("POST", "/droplets", json_body=request.to_payload())
        return _unwrap(data, "droplets") or []

    async def delete(self, droplet_id: int) -> None:
        await self._client.request("DELETE", f"/droplets/{droplet_id}")

    async def delete_by_tag(self, tag: str) -> None:
        await self._client.request("DELETE", "/droplets", params={"tag_name": tag})

    async def neighbors(self, droplet_id: int) -> list[dict[str, Any]]:
        data = await self._client.request("GET", f"/droplets/{droplet_id}/neighbors")
        return _unwrap(data, "droplets") or []

    async def kernels(self, droplet_id: int, opt: Optional[ListOptions] = None) -> list[dict[str, Any]]:
        data = await self._client.request("GET", f"/droplets/{droplet_id}/kernels", params=_params(opt))
        return _unwrap(data, "kernels") or []

    async def snapshots(self, droplet_id: int, opt: Optional[ListOptions] = None) -> list[dict[str, Any]]:
        data = await self._client.request("GET", f"/droplets/{droplet_id}/snapshots", params=_params(opt))
        return _unwrap(data, "snapshots") or []

    async def backups(self, droplet_id: int, opt: Optional[ListOptions] = None) -> list[dict[str, Any]]:
        data = await self._client.request("GET", f"/droplets/{droplet_id}/backups", params=_params(opt))
        return _unwrap(data, "backups") or []

    async def actions(self, droplet_id: int, opt: Optional[ListOptions] = None) -> list[dict[str, Any]]:
        data = await self._client.request("GET", f"/droplets/{droplet_id}/actions", params=_params(opt))
        return _unwrap(data, "actions") or []

    async def get_backup_policy(self, droplet_id: int) -> dict[str, Any]:
        data = await self._client.request("GET", f"/droplets/{droplet_id}/backups/policy")
        return _unwrap(data, "policy")

    async def list_backup_policies(self, opt: Optional[ListOptions] = None) -> dict[str, Any]:
        # Keyed by droplet ID
        data = await self._client.request("GET", "/droplets/backups/policies", params=_params(opt))
        return _unwrap(data, "policies") or {}

    async def list_supported_backup_policies(self) -> list[dict[str, Any]]:
        data = await self._client.request("GET", "/droplets/backups/supported_policies")
        return _unwrap(data, "supported_policies") or []

    async def list_associated_resources_for_deletion(self, droplet_id: int) -> dict[str, Any]:
        return await self._client.request("GET", f"/droplets/{droplet_id}/destroy_with_associated_resources")


class DropletActionsService(_Service):
    """Actions on a single droplet, or on every droplet sharing a tag."""

    async def _do_action(self, droplet_id: int, request: dict[str, Any]) -> dict[str, Any]:
        data = await self._client.request("POST", f"/droplets/{droplet_id}/actions", json_body=request)
        return _unwrap(data, "action")

    async def _do_action_by_tag(self, tag: str, request: dict[str, Any]) -> list[dict[str, Any]]:
        data = await self._client.request(
            "POST", "/droplets/actions", params={"tag_name": tag}, json_body=request
        )
        return _unwrap(data, "actions") or []

    async def shutdown(self, droplet_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "shutdown"})

    async def shutdown_by_tag(self, tag: str) -> list[dict[str, Any]]:
        return await self._do_action_by_tag(tag, {"type": "shutdown"})

    async def power_off(self, droplet_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "power_off"})

    async def power_off_by_tag(self, tag: str) -> list[dict[str, Any]]:
        return await self._do_action_by_tag(tag, {"type": "power_off"})

    async def power_on(self, droplet_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "power_on"})

    async def power_on_by_tag(self, tag: str) -> list[dict[str, Any]]:
        return await self._do_action_by_tag(tag, {"type": "power_on"})

    async def power_cycle(self, droplet_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "power_cycle"})

    async def power_cycle_by_tag(self, tag: str) -> list[dict[str, Any]]:
        return await self._do_action_by_tag(tag, {"type": "power_cycle"})

    async def reboot(self, droplet_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "reboot"})

    async def restore(self, droplet_id: int, image_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "restore", "image": image_id})

    async def resize(self, droplet_id: int, size: str, resize_disk: bool) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "resize", "size": size, "disk": resize_disk})

    async def rename(self, droplet_id: int, name: str) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "rename", "name": name})

    async def snapshot(self, droplet_id: int, name: str) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "snapshot", "name": name})

    async def snapshot_by_tag(self, tag: str, name: str) -> list[dict[str, Any]]:
        return await self._do_action_by_tag(tag, {"type": "snapshot", "name": name})

    async def enable_backups(self, droplet_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "enable_backups"})

    async def enable_backups_by_tag(self, tag: str) -> list[dict[str, Any]]:
        return await self._do_action_by_tag(tag, {"type": "enable_backups"})

    async def enable_backups_with_policy(self, droplet_id: int, policy: BackupPolicyRequest) -> dict[str, Any]:
        return await self._do_action(
            droplet_id,
            {"type": "enable_backups", "backup_policy": policy.model_dump(exclude_none=True)},
        )

    async def change_backup_policy(self, droplet_id: int, policy: BackupPolicyRequest) -> dict[str, Any]:
        return await self._do_action(
            droplet_id,
            {"type": "change_backup_policy", "backup_policy": policy.model_dump(exclude_none=True)},
        )

    async def disable_backups(self, droplet_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "disable_backups"})

    async def disable_backups_by_tag(self, tag: str) -> list[dict[str, Any]]:
        return await self._do_action_by_tag(tag, {"type": "disable_backups"})

    async def password_reset(self, droplet_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "password_reset"})

    async def rebuild_by_image_id(self, droplet_id: int, image_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "rebuild", "image": image_id})

    async def rebuild_by_image_slug(self, droplet_id: int, slug: str) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "rebuild", "image": slug})

    async def change_kernel(self, droplet_id: int, kernel_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "change_kernel", "kernel": kernel_id})

    async def enable_ipv6(self, droplet_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "enable_ipv6"})

    async def enable_ipv6_by_tag(self, tag: str) -> list[dict[str, Any]]:
        return await self._do_action_by_tag(tag, {"type": "enable_ipv6"})

    async def enable_private_networking(self, droplet_id: int) -> dict[str, Any]:
        return await self._do_action(droplet_id, {"type": "enable_private_networking"})

    async def enable_private_networking_by_tag(self, tag: str) -> list[dict[str, Any]]:
        return await self._do_action_by_tag(tag, {"type": "enable_private_networking"})

    async def get(self, droplet_id: int, action_id: int) -> dict[str, Any]:
        data = await self._client.request("GET", f"/droplets/{droplet_id}/actions/{action_id}")
        return _unwrap(data, "action")

    async def get_by_uri(self, uri: str) -> dict[str, Any]:
        data = await self._client.request("GET", uri)
        return _unwrap(data, "action")


class ImagesService(_Service):
    async def list(self, opt: Optional[ListOptions] = None) -> list[dict[str, Any]]:
        data = await self._client.request("GET", "/images", params=_params(opt))
        return _unwrap(data, "images") or []

    async def list_distribution(self, opt: Optional[ListOptions] = None) -> list[dict[str, Any]]:
        data = await self._client.request("GET", "/images", params=_params(opt, type="distribution"))
        return _unwrap(data, "images") or []

    async def list_application(self, opt: Optional[ListOptions] = None) -> list[dict[str, Any]]:
        data = await self._client.request("GET", "/images", params=_params(opt, type="application"))
        return _unwrap(data, "images") or []

    async def list_user(self, opt: Optional[ListOptions] = None) -> list[dict[str, Any]]:
        data = await self._client.request("GET", "/images", params=_params(opt, private="true"))
        return _unwrap(data, "images") or []

    async def get_by_id(self, image_id: int) -> dict[str, Any]:
        data = await self._client.request("GET", f"/images/{image_id}")
        return _unwrap(data, "image")

    async def create(self, request: CustomImageCreateRequest) -> dict[str, Any]:
        data = await self._client.request("POST", "/images", json_body=request.to_payload())
        return _unwrap(data, "image")

    async def update(self, image_id: int, request: ImageUpdateRequest) -> dict[str, Any]:
        data = await self._client.request("PUT", f"/images/{image_id}", json_body=request.model_dump())
        return _unwrap(data, "image")

    async def delete(self, image_id: int) -> None:
        await self._client.request("DELETE", f"/images/{image_id}")


class ImageActionsService(_Service):
    async def transfer(self, image_id: int, region: str) -> dict[str, Any]:
        data = await self._client.request(
            "POST", f"/images/{image_id}/actions", json_body={"type": "transfer", "region": region}
        )
        return _unwrap(data, "action")

    async def convert(self, image_id: int) -> dict[str, Any]:
        data = await self._client.request("POST", f"/images/{image_id}/actions", json_body={"type": "convert"})
        return _unwrap(data, "action")

    async def get(self, image_id: int, action_id: int) -> dict[str, Any]:
        data = await self._client.request("GET", f"/images/{image_id}/actions/{action_id}")
        return _unwrap(data, "action")
