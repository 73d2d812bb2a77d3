"""Application security group service, for public and stack hub clouds."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from .errors import resource_not_found
from .services import Service as _BaseService
from .services import ServiceScope

logger = logging.getLogger(__name__)

_INVALID_SPEC = "invalid application security groups specification"


@dataclass
class Spec:
    """Specification of an application security group."""

    name: str


class _Poller(Protocol):
    def wait(self) -> None: ...

    def result(self) -> Any: ...


class _Client(Protocol):
    def get(self, resource_group: str, name: str) -> Any: ...

    def create_or_update(self, resource_group: str, name: str, parameters: dict[str, Any]) -> _Poller: ...

    def delete(self, resource_group: str, name: str) -> _Poller: ...


def _require_spec(spec: Any) -> Spec:
    if not isinstance(spec, Spec):
        raise TypeError(_INVALID_SPEC)
    return spec


class _SecurityGroupsService(_BaseService):
    def __init__(self, client: _Client, scope: ServiceScope) -> None:
        self.client = client
        self.scope = scope

    def _parameters(self) -> dict[str, Any]:
        return {"location": self.scope.location, "tags": dict(self.scope.tags)}

    def _get_group(self, spec: Any) -> Any:
        asg = _require_spec(spec)
        try:
            return self.client.get(self.scope.resource_group, asg.name)
        except Exception as err:
            if resource_not_found(err):
                raise LookupError(f"application security group {asg.name} not found: {err}") from err
            raise

    def _create_group(self, spec: Any) -> None:
        asg = _require_spec(spec)
        group = self.scope.resource_group
        logger.info("creating application security group %s", asg.name)
        try:
            poller = self.client.create_or_update(group, asg.name, self._parameters())
        except Exception as err:
            raise RuntimeError(
                f"failed to create application security group {asg.name} "
                f"in resource group {group}: {err}"
            ) from err
        try:
            poller.wait()
        except Exception as err:
            raise RuntimeError(f"cannot create, future response: {err}") from err
        try:
            poller.result()
        except Exception as err:
            raise RuntimeError(f"result error: {err}") from err
        logger.info("created application security group %s", asg.name)

    def _delete_group(self, spec: Any) -> None:
        asg = _require_spec(spec)
        group = self.scope.resource_group
        logger.info("deleting application security group %s", asg.name)
        try:
            poller = self.client.delete(group, asg.name)
        except Exception as err:
            if resource_not_found(err):
                return
            raise RuntimeError(
                f"failed to delete application security group {asg.name} "
                f"in resource group {group}: {err}"
            ) from err
        try:
            poller.wait()
        except Exception as err:
            raise RuntimeError(f"cannot create, future response: {err}") from err
        poller.result()
        logger.info("deleted application security group %s", asg.name)


class Service(_SecurityGroupsService):
    """Application security groups on the public cloud; created groups carry the scope's tags."""

    def get(self, spec: Any) -> Any:
        """Return the application security group named by spec."""
        return self._get_group(spec)

    def create_or_update(self, spec: Any) -> None:
        """Create or update the application security group and wait for it."""
        self._create_group(spec)

    def delete(self, spec: Any) -> None:
        """Delete the application security group; a missing one is not an error."""
        self._delete_group(spec)


class StackHubService(_SecurityGroupsService):
    """Application security groups on a stack hub cloud, which takes no tags."""

    def _parameters(self) -> dict[str, Any]:
        return {"location": self.scope.location}

    def get(self, spec: Any) -> Any:
        """Return the application security group named by spec."""
        return self._get_group(spec)

    def create_or_update(self, spec: Any) -> None:
        """Create or update the application security group and wait for it."""
        self._create_group(spec)

    def delete(self, spec: Any) -> None:
        """Delete the application security group; a missing one is not an error."""
        self._delete_group(spec)


def new_service(client: _Client, scope: ServiceScope, stack_hub: bool = False) -> _SecurityGroupsService:
    """Return the service suited to the cloud kind."""
    if stack_hub:
        return StackHubService(client, scope)
    return Service(client, scope)