import pytest

from azmachine.decode import (
    DecodeError,
    NetworkInterface,
    VirtualMachine,
    get_load_balancers,
    get_network_interface,
    get_public_ip_address,
    get_virtual_machine,
)


def test_network_interface_from_wire_names():
    nic = {
        "properties": {
            "dnsSettings": {"internalDomainNameSuffix": "internal.example.com"},
            "ipConfigurations": [
                {
                    "properties": {
                        "privateIPAddress": "10.0.0.4",
                        "publicIPAddress": {"id": "pip-id"},
                    }
                }
            ],
        }
    }
    decoded = get_network_interface(nic)
    assert decoded.properties.dns_settings.internal_domain_name_suffix == "internal.example.com"
    config = decoded.properties.ip_configurations[0].properties
    assert config.private_ip_address == "10.0.0.4"
    assert config.public_ip_address.id == "pip-id"


def test_network_interface_from_structure_names_case_insensitive():
    nic = {
        "interfacepropertiesformat": {
            "DNSSETTINGS": {"InternalDomainNameSuffix": "suffix.example.com"},
        }
    }
    decoded = get_network_interface(nic)
    assert decoded.properties.dns_settings.internal_domain_name_suffix == "suffix.example.com"
    assert decoded.properties.ip_configurations is None


def test_none_decodes_to_empty_structure():
    assert get_network_interface(None) == NetworkInterface()
    assert get_virtual_machine(None) == VirtualMachine()
    assert get_load_balancers(None) == []


def test_unknown_keys_are_ignored():
    decoded = get_public_ip_address({"id": "ip-1", "unrelated": {"x": 1}})
    assert decoded.id == "ip-1"
    assert decoded.properties is None


def test_public_ip_address():
    ip = {
        "id": "ip-2",
        "properties": {"ipAddress": "20.1.2.3", "dnsSettings": {"fqdn": "host.example.com"}},
    }
    decoded = get_public_ip_address(ip)
    assert decoded.properties.ip_address == "20.1.2.3"
    assert decoded.properties.dns_settings.fqdn == "host.example.com"


def test_wrong_string_type_raises():
    with pytest.raises(DecodeError, match="internalDomainNameSuffix"):
        get_network_interface({"properties": {"dnsSettings": {"internalDomainNameSuffix": 5}}})


def test_non_mapping_structure_raises():
    with pytest.raises(DecodeError):
        get_network_interface({"properties": "not a map"})
    with pytest.raises(DecodeError):
        get_network_interface(42)


def test_load_balancers_keep_order():
    lbs = [
        {"name": "lb-a", "properties": {"frontendIPConfigurations": [
            {"properties": {"privateIPAddress": "10.0.0.10"}}
        ]}},
        {"name": "lb-b"},
    ]
    decoded = get_load_balancers(lbs)
    assert [lb.name for lb in decoded] == ["lb-a", "lb-b"]
    frontend = decoded[0].properties.frontend_ip_configurations[0]
    assert frontend.properties.private_ip_address == "10.0.0.10"
    assert decoded[1].properties is None


def test_load_balancers_require_sequence():
    with pytest.raises(DecodeError):
        get_load_balancers({"name": "lb"})


def test_virtual_machine():
    vm = {
        "id": "vm-id",
        "location": "centralus",
        "zones": ["1", "2"],
        "properties": {
            "osProfile": {"computerName": "worker-0"},
            "provisioningState": "Succeeded",
            "hardwareProfile": {"vmSize": "Standard_D4s_v3"},
            "instanceView": {"statuses": [{"code": "PowerState/running"}]},
            "networkProfile": {
                "networkInterfaces": [{"id": "nic-id", "properties": {"primary": True}}]
            },
        },
    }
    decoded = get_virtual_machine(vm)
    assert decoded.id == "vm-id"
    assert decoded.location == "centralus"
    assert decoded.zones == ["1", "2"]
    props = decoded.properties
    assert props.os_profile.computer_name == "worker-0"
    assert props.provisioning_state == "Succeeded"
    assert props.hardware_profile.vm_size == "Standard_D4s_v3"
    assert [s.code for s in props.instance_view.statuses] == ["PowerState/running"]
    reference = props.network_profile.network_interfaces[0]
    assert reference.id == "nic-id"
    assert reference.properties.primary is True


def test_virtual_machine_round_trip_from_decoded_structure():
    vm = {
        "id": "vm-id",
        "zones": ["3"],
        "properties": {"hardwareProfile": {"vmSize": "Standard_NC24"}},
    }
    decoded = get_virtual_machine(vm)
    assert get_virtual_machine(decoded) == decoded


def test_bool_field_rejects_string():
    with pytest.raises(DecodeError):
        get_virtual_machine(
            {"properties": {"networkProfile": {"networkInterfaces": [
                {"properties": {"primary": "yes"}}
            ]}}}
        )


def test_zones_must_be_a_list():
    with pytest.raises(DecodeError):
        get_virtual_machine({"zones": "1"})


def test_hardware_profile_default_vm_size():
    decoded = get_virtual_machine({"properties": {"hardwareProfile": {}}})
    assert decoded.properties.hardware_profile.vm_size == ""