"""
Subnet Arithmetic Module

Provides IPv4 address conversion, mask derivation, network/broadcast
calculations, and overlap and membership tests for CIDR ranges.
"""

from cidrcalc.subnet.core import (
    CIDRRange,
    SubnetInfo,
    ip_to_uint,
    uint_to_ip,
    subnet_mask,
    host_mask,
    network_address,
    broadcast_address,
    broadcast_address_from_count,
    total_address_count,
    subnets_overlap,
    address_in_subnet,
    subnet_contains,
    describe,
)

__all__ = [
    "CIDRRange",
    "SubnetInfo",
    "ip_to_uint",
    "uint_to_ip",
    "subnet_mask",
    "host_mask",
    "network_address",
    "broadcast_address",
    "broadcast_address_from_count",
    "total_address_count",
    "subnets_overlap",
    "address_in_subnet",
    "subnet_contains",
    "describe",
]
