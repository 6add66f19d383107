"""
Subnet arithmetic CLI commands.

Single-value commands print one line to stdout: integers in decimal
(or dotted-decimal with --dotted) and booleans as "true"/"false".
"""

import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cidrcalc.config import get_config
from cidrcalc.errors import CIDRError
from cidrcalc.subnet.core import (
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
    parse_decimal,
)

logger = logging.getLogger(__name__)


def _console(stderr: bool = False) -> Console:
    return Console(stderr=stderr, no_color=get_config().no_color)


def _fail(error: CIDRError) -> None:
    logger.debug("%s: %s", type(error).__name__, error)
    _console(stderr=True).print(f"[red]Error:[/red] {escape(str(error))}")
    raise SystemExit(1)


def _parse_value(text: str) -> int:
    """Accept either a decimal integer or a dotted-decimal address."""
    if "." in text:
        return ip_to_uint(text)
    # 4294967295 has ten digits
    return parse_decimal(text, "Value", 10)


def _echo_uint(value: int, dotted: bool) -> None:
    click.echo(uint_to_ip(value) if dotted else str(value))


def _echo_bool(value: bool) -> None:
    click.echo("true" if value else "false")


dotted_option = click.option(
    "--dotted", is_flag=True, help="Print the result in dotted-decimal notation"
)
lenient_option = click.option(
    "--lenient", is_flag=True, help="Mask CIDR base addresses that have host bits set"
)


@click.group()
def subnet():
    """IPv4 subnet arithmetic."""
    pass


@subnet.command("total-count")
@click.argument("prefix_length", type=int)
def total_count(prefix_length: int):
    """Total number of addresses in a /PREFIX_LENGTH subnet.

    Examples:
        cidrcalc subnet total-count 24
    """
    try:
        result = total_address_count(prefix_length)
    except CIDRError as e:
        _fail(e)

    logger.debug("total-count /%d -> %d", prefix_length, result)
    click.echo(str(result))


@subnet.command("subnet-mask")
@click.argument("prefix_length", type=int)
@dotted_option
def subnet_mask_cmd(prefix_length: int, dotted: bool):
    """Subnet mask for a prefix length.

    Examples:
        cidrcalc subnet subnet-mask 24
        cidrcalc subnet subnet-mask 27 --dotted
    """
    try:
        result = subnet_mask(prefix_length)
    except CIDRError as e:
        _fail(e)

    _echo_uint(result, dotted)


@subnet.command("host-mask")
@click.argument("host_bits", type=int)
@dotted_option
def host_mask_cmd(host_bits: int, dotted: bool):
    """Host mask for a number of host bits.

    Examples:
        cidrcalc subnet host-mask 8
    """
    try:
        result = host_mask(host_bits)
    except CIDRError as e:
        _fail(e)

    _echo_uint(result, dotted)


@subnet.command()
@click.argument("address")
@click.argument("mask")
@dotted_option
def network(address: str, mask: str, dotted: bool):
    """Network address of ADDRESS under MASK.

    Both arguments may be decimal integers or dotted-decimal.

    Examples:
        cidrcalc subnet network 169607169 4294901760
        cidrcalc subnet network 10.28.0.1 255.255.0.0 --dotted
    """
    try:
        result = network_address(_parse_value(address), _parse_value(mask))
    except CIDRError as e:
        _fail(e)

    _echo_uint(result, dotted)


@subnet.command()
@click.argument("network_addr", metavar="NETWORK")
@click.argument("hostmask", required=False)
@click.option("--count", type=int, help="Derive the broadcast from an address count instead of a host mask")
@dotted_option
def broadcast(network_addr: str, hostmask: str | None, count: int | None, dotted: bool):
    """Broadcast address of NETWORK from HOSTMASK or --count.

    Examples:
        cidrcalc subnet broadcast 3232235776 255
        cidrcalc subnet broadcast 192.168.1.0 --count 256 --dotted
    """
    if (hostmask is None) == (count is None):
        raise click.UsageError("Give exactly one of HOSTMASK or --count")

    try:
        base = _parse_value(network_addr)
        if count is not None:
            result = broadcast_address_from_count(base, count)
        else:
            result = broadcast_address(base, _parse_value(hostmask))
    except CIDRError as e:
        _fail(e)

    _echo_uint(result, dotted)


@subnet.command("to-uint")
@click.argument("address")
def to_uint(address: str):
    """Convert a dotted-decimal address to its integer value.

    Examples:
        cidrcalc subnet to-uint 192.168.1.0
    """
    try:
        result = ip_to_uint(address)
    except CIDRError as e:
        _fail(e)

    click.echo(str(result))


@subnet.command("to-ip")
@click.argument("value", type=int)
def to_ip(value: int):
    """Convert an integer to dotted-decimal notation.

    Examples:
        cidrcalc subnet to-ip 3232235776
    """
    try:
        result = uint_to_ip(value)
    except CIDRError as e:
        _fail(e)

    click.echo(result)


@subnet.command()
@click.argument("cidr_a")
@click.argument("cidr_b")
@lenient_option
def overlap(cidr_a: str, cidr_b: str, lenient: bool):
    """Check if two CIDR ranges overlap.

    Examples:
        cidrcalc subnet overlap 10.28.0.0/16 10.28.0.0/25
        cidrcalc subnet overlap 10.28.0.0/25 10.28.0.128/25
    """
    try:
        result = subnets_overlap(cidr_a, cidr_b, strict=not lenient)
    except CIDRError as e:
        _fail(e)

    logger.debug("overlap %s %s -> %s", cidr_a, cidr_b, result)
    _echo_bool(result)


@subnet.command("in-subnet")
@click.argument("address")
@click.argument("cidr")
@lenient_option
def in_subnet(address: str, cidr: str, lenient: bool):
    """Check if ADDRESS lies within CIDR.

    Examples:
        cidrcalc subnet in-subnet 10.28.0.129 10.28.0.128/25
    """
    try:
        result = address_in_subnet(address, cidr, strict=not lenient)
    except CIDRError as e:
        _fail(e)

    _echo_bool(result)


@subnet.command()
@click.argument("outer")
@click.argument("inner")
@lenient_option
def covers(outer: str, inner: str, lenient: bool):
    """Check if the OUTER range wholly contains the INNER range.

    Examples:
        cidrcalc subnet covers 10.28.0.0/16 10.28.1.0/27
    """
    try:
        result = subnet_contains(outer, inner, strict=not lenient)
    except CIDRError as e:
        _fail(e)

    _echo_bool(result)


@subnet.command()
@click.argument("cidr")
@lenient_option
def calc(cidr: str, lenient: bool):
    """Calculate subnet information from CIDR notation.

    Examples:
        cidrcalc subnet calc 192.168.1.0/24
        cidrcalc subnet calc 10.28.0.5/25 --lenient
    """
    console = _console()

    try:
        info = describe(cidr, strict=not lenient)
    except CIDRError as e:
        _fail(e)

    table = Table(title=f"Subnet Calculator: {cidr}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Network", info.network)
    table.add_row("Broadcast", info.broadcast)
    table.add_row("Netmask", info.netmask)
    table.add_row("Hostmask", info.hostmask)
    table.add_row("Prefix Length", f"/{info.prefix_length}")
    table.add_row("Total Addresses", f"{info.num_addresses:,}")
    table.add_row("Usable Hosts", f"{info.num_hosts:,}")

    if info.first_host:
        table.add_row("First Host", info.first_host)
        table.add_row("Last Host", info.last_host)

    console.print(table)


if __name__ == "__main__":
    subnet()
