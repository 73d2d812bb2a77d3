"""The generic service interface and simple stand-in services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from .errors import DetailedError

USER_AGENT = "cluster-api-azure-services"


@dataclass
class ServiceScope:
    """The machine settings a service acts on."""

    resource_group: str = ""
    location: str = ""
    tags: dict[str, str] = field(default_factory=dict)
    subscription_id: str = ""
    resource_manager_endpoint: str = ""


class Service(ABC):
    """A component offering get, create-or-update and delete of one resource kind."""

    @abstractmethod
    def get(self, spec: Any) -> Any:
        """Return the resource described by spec."""

    @abstractmethod
    def create_or_update(self, spec: Any) -> None:
        """Create or update the resource described by spec."""

    @abstractmethod
    def delete(self, spec: Any) -> None:
        """Delete the resource described by spec."""


@dataclass
class FakeStruct:
    """Placeholder value returned by a failing get."""


class FakeSuccessService(Service):
    """A service whose every operation succeeds."""

    def get(self, spec: Any) -> Any:
        return None

    def create_or_update(self, spec: Any) -> None:
        return None

    def delete(self, spec: Any) -> None:
        return None


class FakeFailureService(Service):
    """A service whose every operation fails."""

    def get(self, spec: Any) -> Any:
        raise RuntimeError("Failed to Get service")

    def create_or_update(self, spec: Any) -> None:
        raise RuntimeError("Failed to Create")

    def delete(self, spec: Any) -> None:
        raise RuntimeError("Failed to Delete")


class FakeNotFoundService(Service):
    """A service whose every operation reports the resource as not found."""

    def get(self, spec: Any) -> Any:
        raise DetailedError(status_code=404)

    def create_or_update(self, spec: Any) -> None:
        raise DetailedError(status_code=404)

    def delete(self, spec: Any) -> None:
        raise DetailedError(status_code=404)


@dataclass
class FakeCachedService(Service):
    """A service counting create-or-update calls per spec name."""

    cache: dict[str, int] = field(default_factory=dict)

    def get(self, spec: Any) -> Any:
        return None

    def create_or_update(self, spec: Any) -> None:
        if spec is None:
            return
        name = str(getattr(spec, "name", ""))
        self.cache[name] = self.cache.get(name, 0) + 1

    def delete(self, spec: Any) -> None:
        return None