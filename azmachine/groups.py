"""Resource group service, for public and stack hub clouds."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from .services import Service as _BaseService
from .services import ServiceScope

logger = logging.getLogger(__name__)

MICROSOFT_COMPUTE_VIRTUAL_MACHINES = "Microsoft.Compute/virtualMachines"


class _Poller(Protocol):
    def wait(self) -> None: ...

    def result(self) -> Any: ...


class _Client(Protocol):
    def get(self, resource_group: str) -> Any: ...

    def create_or_update(self, resource_group: str, parameters: dict[str, Any]) -> Any: ...

    def delete(self, resource_group: str, *args: str) -> _Poller: ...


class _GroupsService(_BaseService):
    def __init__(self, client: _Client, scope: ServiceScope) -> None:
        self.client = client
        self.scope = scope

    def _parameters(self) -> dict[str, Any]:
        return {"location": self.scope.location, "tags": dict(self.scope.tags)}

    def _delete_args(self) -> tuple[str, ...]:
        return (MICROSOFT_COMPUTE_VIRTUAL_MACHINES,)

    def _get_group(self) -> Any:
        return self.client.get(self.scope.resource_group)

    def _create_group(self) -> None:
        group = self.scope.resource_group
        logger.info("creating resource group %s", group)
        self.client.create_or_update(group, self._parameters())
        logger.info("successfully created resource group %s", group)

    def _delete_group(self) -> None:
        group = self.scope.resource_group
        logger.info("deleting resource group %s", group)
        try:
            poller = self.client.delete(group, *self._delete_args())
        except Exception as err:
            raise RuntimeError(f"failed to delete resource group {group}: {err}") from err
        try:
            poller.wait()
        except Exception as err:
            raise RuntimeError(f"cannot delete, future response: {err}") from err
        poller.result()
        logger.info("successfully deleted resource group %s", group)


class Service(_GroupsService):
    """Resource groups on the public cloud; created groups carry the scope's tags."""

    def get(self, spec: Any) -> Any:
        """Return the scope's resource group; the spec is not used."""
        return self._get_group()

    def create_or_update(self, spec: Any) -> None:
        """Create or update the scope's resource group in the scope's location."""
        self._create_group()

    def delete(self, spec: Any) -> None:
        """Delete the scope's resource group and wait for completion."""
        self._delete_group()


class StackHubService(_GroupsService):
    """Resource groups on a stack hub cloud, which takes no tags."""

    def _parameters(self) -> dict[str, Any]:
        return {"location": self.scope.location}

    def _delete_args(self) -> tuple[str, ...]:
        return ()

    def get(self, spec: Any) -> Any:
        """Return the scope's resource group; the spec is not used."""
        return self._get_group()

    def create_or_update(self, spec: Any) -> None:
        """Create or update the scope's resource group in the scope's location."""
        self._create_group()

    def delete(self, spec: Any) -> None:
        """Delete the scope's resource group and wait for completion."""
        self._delete_group()


def new_service(client: _Client, scope: ServiceScope, stack_hub: bool = False) -> _GroupsService:
    """Return the service suited to the cloud kind."""
    if stack_hub:
        return StackHubService(client, scope)
    return Service(client, scope)