"""
Core IPv4 subnet arithmetic.

Addresses, masks and counts are plain Python integers treated as unsigned
32-bit values. Every function validates its inputs and raises
InvalidFormatError or OutOfRangeError instead of clamping.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import re
from dataclasses import dataclass

from cidrcalc.errors import InvalidFormatError, OutOfRangeError


ADDRESS_BITS = 32
MAX_UINT32 = 0xFFFFFFFF

_DECIMAL = re.compile(r"[0-9]+")


def _require_int(value: object, name: str) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFormatError(f"{name} must be an integer, got {value!r}")
    return value


def _require_uint32(value: object, name: str) -> int:
    value = _require_int(value, name)
    if not 0 <= value <= MAX_UINT32:
        raise OutOfRangeError(f"{name} {value} is outside 0-{MAX_UINT32}")
    return value


def _require_bits(value: object, name: str) -> int:
    value = _require_int(value, name)
    if not 0 <= value <= ADDRESS_BITS:
        raise OutOfRangeError(f"{name} {value} is outside 0-{ADDRESS_BITS}")
    return value


def parse_decimal(text: str, name: str, max_digits: int) -> int:
    """Parse an ASCII decimal field of at most ``max_digits`` significant digits."""
    if not _DECIMAL.fullmatch(text):
        raise InvalidFormatError(f"{name} {text!r} is not a decimal number")
    # bounded before int()
    digits = text.lstrip("0") or "0"
    if len(digits) > max_digits:
        raise OutOfRangeError(f"{name} {text[:20]!r} has more than {max_digits} significant digits")
    return int(digits)


# Address conversion

def ip_to_uint(ip_str: str) -> int:
    """Convert a dotted-decimal IPv4 address to its 32-bit integer value.

    Example: '192.168.1.0' -> 3232235776
    """
    if not isinstance(ip_str, str):
        raise InvalidFormatError(f"IPv4 address must be a string, got {ip_str!r}")

    fields = ip_str.split(".")
    if len(fields) != 4:
        raise InvalidFormatError(f"Expected four dot-separated octets: {ip_str!r}")

    value = 0
    for field in fields:
        octet = parse_decimal(field, "Octet", 3)
        if octet > 255:
            raise OutOfRangeError(f"Octet {octet} in {ip_str!r} is outside 0-255")
        value = (value << 8) | octet
    return value


def uint_to_ip(value: int) -> str:
    """Convert a 32-bit integer to dotted-decimal IPv4 notation.

    Example: 3232235776 -> '192.168.1.0'
    """
    value = _require_uint32(value, "Address")
    return ".".join(str((value >> shift) & 0xFF) for shift in (24, 16, 8, 0))


# Mask arithmetic

def subnet_mask(prefix_length: int) -> int:
    """Subnet mask with the top ``prefix_length`` bits set."""
    prefix_length = _require_bits(prefix_length, "Prefix length")
    if prefix_length == 0:
        return 0
    if prefix_length == ADDRESS_BITS:
        return MAX_UINT32
    return (MAX_UINT32 << (ADDRESS_BITS - prefix_length)) & MAX_UINT32


def host_mask(host_bits: int) -> int:
    """Host mask with the low ``host_bits`` bits set."""
    host_bits = _require_bits(host_bits, "Host bits")
    return (1 << host_bits) - 1


# Range arithmetic

def network_address(address: int, mask: int) -> int:
    """Network address of the subnet holding ``address``.

    Any address inside the subnet is normalised down to the network address.
    """
    address = _require_uint32(address, "Address")
    mask = _require_uint32(mask, "Subnet mask")
    return address & mask


def broadcast_address(network: int, hostmask: int) -> int:
    """Broadcast address of a subnet, from its network address and host mask."""
    network = _require_uint32(network, "Network address")
    hostmask = _require_uint32(hostmask, "Host mask")
    return network | hostmask


def broadcast_address_from_count(network: int, count: int) -> int:
    """Broadcast address of a subnet, from its network address and address count."""
    network = _require_uint32(network, "Network address")
    count = _require_int(count, "Address count")
    if not 1 <= count <= 1 << ADDRESS_BITS or count & (count - 1):
        raise OutOfRangeError(
            f"Address count {count} is not a power of two between 1 and {1 << ADDRESS_BITS}"
        )
    broadcast = network + count - 1
    if broadcast > MAX_UINT32:
        raise OutOfRangeError(
            f"{count} addresses from {uint_to_ip(network)} run past 255.255.255.255"
        )
    return broadcast


def total_address_count(prefix_length: int) -> int:
    """Number of addresses in a subnet with the given prefix length."""
    prefix_length = _require_bits(prefix_length, "Prefix length")
    return 1 << (ADDRESS_BITS - prefix_length)


@dataclass(frozen=True)
class CIDRRange:
    """An IPv4 range given by its aligned network address and prefix length."""
    network: int
    prefix_length: int

    def __post_init__(self):
        _require_uint32(self.network, "Network address")
        _require_bits(self.prefix_length, "Prefix length")
        if self.network & self.netmask != self.network:
            raise InvalidFormatError(
                f"{uint_to_ip(self.network)}/{self.prefix_length} has host bits set"
            )

    @classmethod
    def parse(cls, cidr: "str | CIDRRange", strict: bool = True) -> "CIDRRange":
        """Parse "A.B.C.D/n" notation.

        With ``strict`` a base address that has host bits set is rejected,
        otherwise it is masked down to the network address.
        """
        if isinstance(cidr, cls):
            return cidr
        if not isinstance(cidr, str) or "/" not in cidr:
            raise InvalidFormatError(f"Expected CIDR notation A.B.C.D/n: {cidr!r}")

        address, prefix = cidr.split("/", 1)
        prefix_length = _require_bits(parse_decimal(prefix, "Prefix length", 2), "Prefix length")

        base = ip_to_uint(address)
        if not strict:
            base = network_address(base, subnet_mask(prefix_length))
        return cls(base, prefix_length)

    @property
    def netmask(self) -> int:
        return subnet_mask(self.prefix_length)

    @property
    def hostmask(self) -> int:
        return host_mask(ADDRESS_BITS - self.prefix_length)

    @property
    def broadcast(self) -> int:
        return broadcast_address(self.network, self.hostmask)

    @property
    def num_addresses(self) -> int:
        return total_address_count(self.prefix_length)

    def __contains__(self, address: "int | str") -> bool:
        value = _as_address(address)
        return self.network <= value <= self.broadcast

    def __str__(self) -> str:
        return f"{uint_to_ip(self.network)}/{self.prefix_length}"


@dataclass
class SubnetInfo:
    """Information about a subnet."""
    network: str
    broadcast: str
    netmask: str
    hostmask: str
    prefix_length: int
    num_addresses: int
    num_hosts: int
    first_host: str | None
    last_host: str | None


def _as_address(address: "int | str") -> int:
    if isinstance(address, str):
        return ip_to_uint(address)
    return _require_uint32(address, "Address")


# Subnet queries

def subnets_overlap(
    cidr_a: "str | CIDRRange", cidr_b: "str | CIDRRange", strict: bool = True
) -> bool:
    """Check if two CIDR ranges share at least one address."""
    a = CIDRRange.parse(cidr_a, strict=strict)
    b = CIDRRange.parse(cidr_b, strict=strict)
    return max(a.network, b.network) <= min(a.broadcast, b.broadcast)


def address_in_subnet(address: "int | str", cidr: "str | CIDRRange", strict: bool = True) -> bool:
    """Check if an address lies within a CIDR range."""
    return address in CIDRRange.parse(cidr, strict=strict)


def subnet_contains(
    outer: "str | CIDRRange", inner: "str | CIDRRange", strict: bool = True
) -> bool:
    """Check if the inner range lies wholly within the outer range."""
    o = CIDRRange.parse(outer, strict=strict)
    i = CIDRRange.parse(inner, strict=strict)
    return o.network <= i.network and i.broadcast <= o.broadcast


def describe(cidr: "str | CIDRRange", strict: bool = True) -> SubnetInfo:
    """Calculate subnet information from CIDR notation."""
    net = CIDRRange.parse(cidr, strict=strict)

    # /31 and /32 have no network/broadcast reservation
    if net.prefix_length >= 31:
        first_host = None
        last_host = None
        num_hosts = 0 if net.prefix_length == 32 else 2
    else:
        first_host = uint_to_ip(net.network + 1)
        last_host = uint_to_ip(net.broadcast - 1)
        num_hosts = net.num_addresses - 2

    return SubnetInfo(
        network=uint_to_ip(net.network),
        broadcast=uint_to_ip(net.broadcast),
        netmask=uint_to_ip(net.netmask),
        hostmask=uint_to_ip(net.hostmask),
        prefix_length=net.prefix_length,
        num_addresses=net.num_addresses,
        num_hosts=num_hosts,
        first_host=first_host,
        last_host=last_host,
    )
