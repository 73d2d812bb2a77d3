"""Availability set service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from .errors import resource_not_found
from .services import Service as _BaseService
from .services import ServiceScope

_INVALID_SPEC = "invalid availability set specification"

SKU_ALIGNED = "Aligned"
PLATFORM_FAULT_DOMAIN_COUNT = 2
PLATFORM_UPDATE_DOMAIN_COUNT = 5


@dataclass
class Spec:
    """Specification of an availability set."""

    name: str


class _Client(Protocol):
    def get(self, resource_group: str, name: str) -> Mapping[str, Any]: ...

    def create_or_update(self, resource_group: str, name: str, parameters: dict[str, Any]) -> Any: ...

    def delete(self, resource_group: str, name: str) -> Any: ...


def _require_spec(spec: Any) -> Spec:
    if not isinstance(spec, Spec):
        raise TypeError(_INVALID_SPEC)
    return spec


def _has_virtual_machines(availability_set: Any) -> bool:
    if not isinstance(availability_set, Mapping):
        return False
    properties = availability_set.get("properties")
    if not properties:
        return False
    return bool(properties.get("virtual_machines"))


class Service(_BaseService):
    """Create, read and delete availability sets in the scope's resource group."""

    def __init__(self, client: _Client, scope: ServiceScope) -> None:
        self.client = client
        self.scope = scope

    def create_or_update(self, spec: Any) -> None:
        """Create or update an aligned availability set."""
        avset = _require_spec(spec)
        parameters = {
            "name": avset.name,
            "sku": {"name": SKU_ALIGNED},
            "location": self.scope.location,
            "properties": {
                "platform_fault_domain_count": PLATFORM_FAULT_DOMAIN_COUNT,
                "platform_update_domain_count": PLATFORM_UPDATE_DOMAIN_COUNT,
            },
            "tags": dict(self.scope.tags),
        }
        try:
            self.client.create_or_update(self.scope.resource_group, avset.name, parameters)
        except Exception as err:
            raise RuntimeError(f"failed to create availability set {avset.name}: {err}") from err

    def get(self, spec: Any) -> Any:
        """Return the availability set named by spec."""
        avset = _require_spec(spec)
        try:
            return self.client.get(self.scope.resource_group, avset.name)
        except Exception as err:
            raise RuntimeError(f"failed to get availability set {avset.name}: {err}") from err

    def delete(self, spec: Any) -> None:
        """Delete the availability set unless virtual machines are still attached."""
        avset = _require_spec(spec)
        group = self.scope.resource_group
        try:
            existing = self.client.get(group, avset.name)
        except Exception as err:
            if resource_not_found(err):
                return
            raise RuntimeError(f"failed to get availability set {avset.name}: {err}") from err

        if _has_virtual_machines(existing):
            return

        try:
            self.client.delete(group, avset.name)
        except Exception as err:
            if resource_not_found(err):
                return
            raise RuntimeError(f"failed to delete availability set {avset.name}: {err}") from err