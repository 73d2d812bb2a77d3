"""Decoding of loosely typed resource data into typed network and VM structures.

Field lookup accepts the wire (JSON) name, the structure name or the attribute
name of a field. An exact match is tried first, then a case-insensitive one.
Keys that do not belong to a structure are ignored. A value of the wrong kind
raises DecodeError.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

_Decoder = Callable[[Any, str], Any]


class DecodeError(ValueError):
    """Raised when input data does not fit the target structure."""


def _type_name(value: Any) -> str:
    return type(value).__name__


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _string(value: Any, path: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(
            f"'{path}' expected type 'string', got unconvertible type '{_type_name(value)}'"
        )
    return value


def _boolean(value: Any, path: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DecodeError(
            f"'{path}' expected type 'bool', got unconvertible type '{_type_name(value)}'"
        )
    return value


def _list_of(item: _Decoder) -> _Decoder:
    def decode(value: Any, path: str) -> list[Any]:
        if not isinstance(value, (list, tuple)):
            raise DecodeError(
                f"'{path}': source data must be an array or slice, got {_type_name(value)}"
            )
        return [item(element, f"{path}[{position}]") for position, element in enumerate(value)]

    return decode


def _struct(cls: type) -> _Decoder:
    def decode(value: Any, path: str) -> Any:
        return _decode_struct(cls, value, path)

    return decode


def _as_mapping(value: Any, path: str) -> Mapping[Any, Any]:
    if isinstance(value, Mapping):
        return value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    raise DecodeError(f"'{path}' expected a map, got '{_type_name(value)}'")


def _lookup(source: Mapping[Any, Any], keys: tuple[str, ...]) -> tuple[bool, Any]:
    for key in keys:
        if key in source:
            return True, source[key]
    wanted = {key.lower() for key in keys}
    for key, value in source.items():
        if isinstance(key, str) and key.lower() in wanted:
            return True, value
    return False, None


def _decode_struct(cls: type, value: Any, path: str) -> Any:
    if value is None:
        return cls()
    source = _as_mapping(value, path)
    values: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        keys = tuple(f.metadata["keys"]) + (f.name,)
        found, raw = _lookup(source, keys)
        if not found or raw is None:
            continue
        values[f.name] = f.metadata["decode"](raw, _join(path, keys[0]))
    return cls(**values)


def _field(decode: _Decoder, *keys: str, default: Any = None) -> Any:
    return field(default=default, metadata={"keys": keys, "decode": decode})


# Network structures.


@dataclass
class InterfaceDNSSettings:
    """DNS settings of a network interface."""

    internal_domain_name_suffix: str | None = _field(
        _string, "internalDomainNameSuffix", "InternalDomainNameSuffix"
    )


@dataclass
class PublicIPAddressDNSSettings:
    """DNS settings of a public IP address."""

    fqdn: str | None = _field(_string, "fqdn", "Fqdn")


@dataclass
class PublicIPAddressPropertiesFormat:
    """Properties of a public IP address."""

    ip_address: str | None = _field(_string, "ipAddress", "IPAddress")
    dns_settings: PublicIPAddressDNSSettings | None = _field(
        _struct(PublicIPAddressDNSSettings), "dnsSettings", "DNSSettings"
    )


@dataclass
class PublicIPAddress:
    """A public IP address resource."""

    id: str | None = _field(_string, "id", "ID")
    properties: PublicIPAddressPropertiesFormat | None = _field(
        _struct(PublicIPAddressPropertiesFormat), "properties", "PublicIPAddressPropertiesFormat"
    )


@dataclass
class InterfaceIPConfigurationPropertiesFormat:
    """Properties of an IP configuration of a network interface."""

    private_ip_address: str | None = _field(_string, "privateIPAddress", "PrivateIPAddress")
    public_ip_address: PublicIPAddress | None = _field(
        _struct(PublicIPAddress), "publicIPAddress", "PublicIPAddress"
    )


@dataclass
class InterfaceIPConfiguration:
    """An IP configuration of a network interface."""

    properties: InterfaceIPConfigurationPropertiesFormat | None = _field(
        _struct(InterfaceIPConfigurationPropertiesFormat),
        "properties",
        "InterfaceIPConfigurationPropertiesFormat",
    )


@dataclass
class InterfacePropertiesFormat:
    """Properties of a network interface."""

    dns_settings: InterfaceDNSSettings | None = _field(
        _struct(InterfaceDNSSettings), "dnsSettings", "DNSSettings"
    )
    ip_configurations: list[InterfaceIPConfiguration] | None = _field(
        _list_of(_struct(InterfaceIPConfiguration)), "ipConfigurations", "IPConfigurations"
    )


@dataclass
class NetworkInterface:
    """A network interface resource."""

    properties: InterfacePropertiesFormat | None = _field(
        _struct(InterfacePropertiesFormat), "properties", "InterfacePropertiesFormat"
    )


@dataclass
class FrontendIPConfigurationPropertiesFormat:
    """Properties of a frontend IP configuration of a load balancer."""

    private_ip_address: str | None = _field(_string, "privateIPAddress", "PrivateIPAddress")


@dataclass
class FrontendIPConfiguration:
    """A frontend IP address of a load balancer."""

    properties: FrontendIPConfigurationPropertiesFormat | None = _field(
        _struct(FrontendIPConfigurationPropertiesFormat),
        "properties",
        "FrontendIPConfigurationPropertiesFormat",
    )


@dataclass
class LoadBalancerPropertiesFormat:
    """Properties of a load balancer."""

    frontend_ip_configurations: list[FrontendIPConfiguration] | None = _field(
        _list_of(_struct(FrontendIPConfiguration)),
        "frontendIPConfigurations",
        "FrontendIPConfigurations",
    )


@dataclass
class LoadBalancer:
    """A load balancer resource."""

    properties: LoadBalancerPropertiesFormat | None = _field(
        _struct(LoadBalancerPropertiesFormat), "properties", "LoadBalancerPropertiesFormat"
    )
    name: str | None = _field(_string, "name", "Name")


# Virtual machine structures.


@dataclass
class HardwareProfile:
    """Hardware settings of a virtual machine."""

    vm_size: str = _field(_string, "vmSize", "VMSize", default="")


@dataclass
class InstanceViewStatus:
    """One status entry of a virtual machine instance view."""

    code: str | None = _field(_string, "code", "Code")


@dataclass
class VirtualMachineInstanceView:
    """Runtime view of a virtual machine."""

    statuses: list[InstanceViewStatus] | None = _field(
        _list_of(_struct(InstanceViewStatus)), "statuses", "Statuses"
    )


@dataclass
class OSProfile:
    """Operating system settings of a virtual machine."""

    computer_name: str | None = _field(_string, "computerName", "ComputerName")


@dataclass
class NetworkInterfaceReferenceProperties:
    """Properties of a network interface reference."""

    primary: bool | None = _field(_boolean, "primary", "Primary")


@dataclass
class NetworkInterfaceReference:
    """A reference from a virtual machine to a network interface."""

    properties: NetworkInterfaceReferenceProperties | None = _field(
        _struct(NetworkInterfaceReferenceProperties),
        "properties",
        "NetworkInterfaceReferenceProperties",
    )
    id: str | None = _field(_string, "id", "ID")


@dataclass
class NetworkProfile:
    """Network settings of a virtual machine."""

    network_interfaces: list[NetworkInterfaceReference] | None = _field(
        _list_of(_struct(NetworkInterfaceReference)), "networkInterfaces", "NetworkInterfaces"
    )


@dataclass
class VirtualMachineProperties:
    """Properties of a virtual machine."""

    os_profile: OSProfile | None = _field(_struct(OSProfile), "osProfile", "OsProfile")
    network_profile: NetworkProfile | None = _field(
        _struct(NetworkProfile), "networkProfile", "NetworkProfile"
    )
    provisioning_state: str | None = _field(_string, "provisioningState", "ProvisioningState")
    instance_view: VirtualMachineInstanceView | None = _field(
        _struct(VirtualMachineInstanceView), "instanceView", "InstanceView"
    )
    hardware_profile: HardwareProfile | None = _field(
        _struct(HardwareProfile), "hardwareProfile", "HardwareProfile"
    )


@dataclass
class VirtualMachine:
    """A virtual machine resource."""

    properties: VirtualMachineProperties | None = _field(
        _struct(VirtualMachineProperties), "properties", "VirtualMachineProperties"
    )
    id: str | None = _field(_string, "id", "ID")
    zones: list[str] | None = _field(_list_of(_string), "zones", "Zones")
    location: str | None = _field(_string, "location", "Location")


def get_network_interface(nic: Any) -> NetworkInterface:
    """Decode a network interface."""
    return _decode_struct(NetworkInterface, nic, "")


def get_public_ip_address(ip: Any) -> PublicIPAddress:
    """Decode a public IP address."""
    return _decode_struct(PublicIPAddress, ip, "")


def get_load_balancers(lbs: Any) -> list[LoadBalancer]:
    """Decode a sequence of load balancers."""
    if lbs is None:
        return []
    return _list_of(_struct(LoadBalancer))(lbs, "")


def get_virtual_machine(vm: Any) -> VirtualMachine:
    """Decode a virtual machine."""
    return _decode_struct(VirtualMachine, vm, "")