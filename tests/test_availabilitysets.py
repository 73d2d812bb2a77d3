import pytest

from azmachine.availabilitysets import Service, Spec
from azmachine.errors import DetailedError
from azmachine.services import ServiceScope


class FakeClient:
    def __init__(self, existing=None, get_error=None, write_error=None):
        self.existing = existing if existing is not None else {}
        self.get_error = get_error
        self.write_error = write_error
        self.calls = []

    def get(self, resource_group, name):
        self.calls.append(("get", resource_group, name))
        if self.get_error:
            raise self.get_error
        return self.existing

    def create_or_update(self, resource_group, name, parameters):
        self.calls.append(("create_or_update", resource_group, name, parameters))
        if self.write_error:
            raise self.write_error
        return parameters

    def delete(self, resource_group, name):
        self.calls.append(("delete", resource_group, name))
        if self.write_error:
            raise self.write_error


@pytest.fixture
def scope():
    return ServiceScope(resource_group="rg", location="centralus", tags={"env": "test"})


@pytest.mark.parametrize("method", ["get", "create_or_update", "delete"])
def test_invalid_spec(scope, method):
    with pytest.raises(TypeError, match="invalid availability set specification"):
        getattr(Service(FakeClient(), scope), method)(None)


def test_create_parameters(scope):
    client = FakeClient()
    Service(client, scope).create_or_update(Spec("avset"))
    (_, group, name, params), = client.calls
    assert (group, name) == ("rg", "avset")
    assert params["name"] == "avset"
    assert params["sku"] == {"name": "Aligned"}
    assert params["location"] == "centralus"
    assert params["tags"] == {"env": "test"}
    assert params["properties"]["platform_fault_domain_count"] == 2
    assert params["properties"]["platform_update_domain_count"] == 5


def test_create_failure(scope):
    client = FakeClient(write_error=DetailedError(status_code=500))
    with pytest.raises(RuntimeError, match="failed to create availability set avset") as info:
        Service(client, scope).create_or_update(Spec("avset"))
    assert isinstance(info.value.__cause__, DetailedError)


def test_get_returns_value(scope):
    client = FakeClient(existing={"name": "avset"})
    assert Service(client, scope).get(Spec("avset")) == {"name": "avset"}


def test_get_failure_wraps_even_not_found(scope):
    client = FakeClient(get_error=DetailedError(status_code=404))
    with pytest.raises(RuntimeError, match="failed to get availability set avset"):
        Service(client, scope).get(Spec("avset"))


def test_delete_empty_set(scope):
    client = FakeClient(existing={"properties": {"virtual_machines": []}})
    Service(client, scope).delete(Spec("avset"))
    assert client.calls == [("get", "rg", "avset"), ("delete", "rg", "avset")]


def test_delete_skipped_when_vms_attached(scope):
    client = FakeClient(existing={"properties": {"virtual_machines": [{"id": "vm-1"}]}})
    Service(client, scope).delete(Spec("avset"))
    assert client.calls == [("get", "rg", "avset")]


def test_delete_already_gone(scope):
    client = FakeClient(get_error=DetailedError(status_code=404))
    Service(client, scope).delete(Spec("avset"))
    assert client.calls == [("get", "rg", "avset")]


def test_delete_get_failure(scope):
    client = FakeClient(get_error=DetailedError(status_code=500))
    with pytest.raises(RuntimeError, match="failed to get availability set avset"):
        Service(client, scope).delete(Spec("avset"))


def test_delete_not_found_on_delete_is_ignored(scope):
    client = FakeClient(write_error=DetailedError(status_code=404))
    assert Service(client, scope).delete(Spec("avset")) is None
    assert client.calls[-1] == ("delete", "rg", "avset")


def test_delete_failure(scope):
    client = FakeClient(write_error=DetailedError(status_code=409))
    with pytest.raises(RuntimeError, match="failed to delete availability set avset"):
        Service(client, scope).delete(Spec("avset"))