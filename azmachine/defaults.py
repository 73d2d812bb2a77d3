"""Default values and name generators for cluster resources."""

DEFAULT_USER_NAME = "capi"
DEFAULT_VNET_CIDR = "10.0.0.0/8"
DEFAULT_CONTROL_PLANE_SUBNET_CIDR = "10.0.0.0/16"
DEFAULT_NODE_SUBNET_CIDR = "10.1.0.0/16"
DEFAULT_INTERNAL_LB_IP_ADDRESS = "10.0.0.100"
DEFAULT_AZURE_DNS_ZONE = "cloudapp.azure.com"

MAX_PUBLIC_IP_NAME_LENGTH = 63


def generate_vnet_name(cluster_name: str) -> str:
    """Virtual network name for a cluster."""
    return f"{cluster_name}-vnet"


def generate_control_plane_security_group_name(cluster_name: str) -> str:
    """Control plane security group name for a cluster."""
    return f"{cluster_name}-controlplane-nsg"


def generate_node_security_group_name(cluster_name: str) -> str:
    """Node security group name for a cluster."""
    return f"{cluster_name}-node-nsg"


def generate_node_route_table_name(cluster_name: str) -> str:
    """Node route table name for a cluster."""
    return f"{cluster_name}-node-routetable"


def generate_control_plane_subnet_name(cluster_name: str) -> str:
    """Control plane subnet name for a cluster."""
    return f"{cluster_name}-controlplane-subnet"


def generate_node_subnet_name(cluster_name: str) -> str:
    """Node subnet name for a cluster."""
    return f"{cluster_name}-node-subnet"


def generate_internal_lb_name(cluster_name: str) -> str:
    """Internal load balancer name for a cluster."""
    return f"{cluster_name}-internal-lb"


def generate_public_lb_name(cluster_name: str) -> str:
    """Public load balancer name for a cluster."""
    return f"{cluster_name}-public-lb"


def generate_public_ip_name(cluster_name: str, hash_: str) -> str:
    """Public IP name from the cluster name and a hash."""
    return f"{cluster_name}-{hash_}"


def generate_machine_public_ip_name(cluster_name: str, machine_name: str) -> str:
    """Public IP name for a machine; raises ValueError if it exceeds 63 characters."""
    name = generate_public_ip_name(cluster_name, machine_name)
    if len(name) > MAX_PUBLIC_IP_NAME_LENGTH:
        raise ValueError("machine public IP name is longer than 63 characters")
    return name


def generate_fqdn(public_ip_name: str, location: str) -> str:
    """Fully qualified domain name for a public IP in a location."""
    return f"{public_ip_name}.{location}.{DEFAULT_AZURE_DNS_ZONE}"


def generate_managed_identity_name(
    subscription_id: str, resource_group_name: str, managed_identity_name: str
) -> str:
    """Resource ID of a user-assigned managed identity."""
    return (
        f"/subscriptions/{subscription_id}/resourcegroups/{resource_group_name}"
        f"/providers/Microsoft.ManagedIdentity/userAssignedIdentities/{managed_identity_name}"
    )


def generate_machine_provider_id(
    subscription_id: str, resource_group_name: str, machine_name: str
) -> str:
    """Provider ID of a machine, with subscription and resource group lower-cased."""
    return (
        f"azure:///subscriptions/{subscription_id.lower()}"
        f"/resourceGroups/{resource_group_name.lower()}"
        f"/providers/Microsoft.Compute/virtualMachines/{machine_name}"
    )


def generate_os_disk_name(machine_name: str) -> str:
    """OS disk name of a machine."""
    return f"{machine_name}_OSDisk"


def generate_data_disk_name(machine_name: str, suffix: str) -> str:
    """Data disk name of a machine."""
    return f"{machine_name}_{suffix}"


def generate_network_interface_name(machine_name: str) -> str:
    """Network interface name of a machine."""
    return f"{machine_name}-nic"