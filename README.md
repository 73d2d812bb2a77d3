# azmachine

Building blocks for managing Azure virtual machines on behalf of a cluster.
The package depends only on the standard library.

## Modules

### `azmachine.defaults`

Name generators that give cluster resources consistent names:
`generate_vnet_name`, `generate_control_plane_security_group_name`,
`generate_node_security_group_name`, `generate_node_route_table_name`,
`generate_control_plane_subnet_name`, `generate_node_subnet_name`,
`generate_internal_lb_name`, `generate_public_lb_name`,
`generate_public_ip_name`, `generate_machine_public_ip_name`,
`generate_fqdn`, `generate_managed_identity_name`,
`generate_machine_provider_id`, `generate_os_disk_name`,
`generate_data_disk_name` and `generate_network_interface_name`.
The module also defines default constants such as `DEFAULT_VNET_CIDR` and
`DEFAULT_AZURE_DNS_ZONE`.

```python
from azmachine.defaults import generate_machine_provider_id

generate_machine_provider_id("Sub", "RG", "vm-0")
# 'azure:///subscriptions/sub/resourceGroups/rg/providers/Microsoft.Compute/virtualMachines/vm-0'
```

`generate_machine_public_ip_name` raises `ValueError` when the resulting name
is longer than 63 characters.

### `azmachine.errors`

`DetailedError` is an exception that carries the HTTP status code of a failed
API call in its `status_code` attribute. `resource_not_found(err)` returns true
when `err` is itself a `DetailedError` with status 404.
`invalid_credentials(err)` returns true when the first `DetailedError` found in
the chain of `err` and the errors it was raised from has status 401.

### `azmachine.services`

- `Service` is the abstract base class that every resource service follows. It
  has three methods: `get`, `create_or_update` and `delete`.
- `ServiceScope` is a dataclass that holds the settings a service acts on:
  `resource_group`, `location`, `tags`, `subscription_id` and
  `resource_manager_endpoint`.
- The module also provides stand-in services for tests:
  - `FakeSuccessService` succeeds on every call.
  - `FakeFailureService` raises `RuntimeError` on every call.
  - `FakeNotFoundService` raises `DetailedError(status_code=404)` on every call.
  - `FakeCachedService` counts `create_or_update` calls in its `cache` dict,
    keyed by the `name` attribute of each spec.

### `azmachine.provider_status`

`RawExtension` holds raw JSON bytes.

- `provider_status_from_raw_extension` decodes a `RawExtension` into a dict.
  When it is given `None`, it returns `{}`. It raises `ValueError` for empty
  input, invalid JSON, or JSON that is not an object.
- `raw_extension_from_provider_status` and `raw_extension_from_provider_spec`
  encode a mapping as compact JSON. When given `None`, they return an empty
  `RawExtension`.

### `azmachine.decode`

This module has typed dataclasses for API responses:

- `VirtualMachine` and its parts;
- `NetworkInterface`;
- `PublicIPAddress`;
- `LoadBalancer`.

To build them from plain dictionaries, use `get_virtual_machine`,
`get_network_interface`, `get_public_ip_address` and `get_load_balancers`.

A field can be looked up by its JSON name, its structure name or its attribute
name. The lookup tries an exact match first and then a case-insensitive one.
Unknown keys are ignored. A value of the wrong kind raises `DecodeError`, which
is a subclass of `ValueError`.

### `azmachine.machineset`

This module computes the annotations that let an autoscaler scale a machine set
up from zero. They are taken from the capabilities of an instance type.

`update_machine_set_annotations(annotations, capabilities)` reads the
`vCPUs`, `MemoryGB` and `GPUs` capabilities. It writes three annotations:

- `CPU_KEY`;
- `MEMORY_KEY`, with memory converted to MiB;
- `GPU_KEY`, which defaults to `"0"`.

It returns the updated mapping. If `annotations` is `None`, it returns a new
dict.

`memory_gib_to_mib("16")` gives `"16384"`. The conversion rounds halves away
from zero. A value that cannot be parsed is logged and counted as zero.

### Resource services

Each service takes a client object and a `ServiceScope`. The client does the
actual API calls, and you supply it.

- `azmachine.securitygroups` covers application security groups through
  `Spec(name)`, `Service` and `StackHubService`.
  - `get` raises `LookupError` when the group does not exist.
  - `create_or_update` waits for the operation to complete.
  - `delete` treats a missing group as already deleted.
  - `new_service(client, scope, stack_hub)` picks the variant. The Stack Hub
    variant sends no tags.
- `azmachine.availabilitysets` covers availability sets through `Spec(name)`
  and `Service`.
  - `create_or_update` creates an aligned set with 2 fault domains and 5 update
    domains.
  - `delete` does nothing while virtual machines are still attached, and
    ignores a missing set.
- `azmachine.groups` covers resource groups through `Service` and
  `StackHubService`, and `new_service(client, scope, stack_hub)` picks the
  variant.
  - These services act on the scope's resource group and ignore the spec.
  - `delete` waits for the operation to complete.

Client failures are raised again as `RuntimeError` with a descriptive message,
and the original error is kept as the cause.

## What it does not do

- It does not contact Azure itself. Every service needs a client object that
  you supply.
- It has no controller, reconcile loop or command-line program.
- It offers no service for looking up availability zones, deleting disks or
  listing the load balancers of a network interface.

## Installation

```
pip install .
```

## Running the tests

```
pip install ".[test]"
pytest
```