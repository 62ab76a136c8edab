"""IPv4 address and subnet parsing, address/port splitting."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass

from uwkit.split import rsplit_chr

_STRTOL10_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class BadIPAddress(ValueError):
    """The text is not a valid IPv4 address."""


class MissingNetmask(ValueError):
    """A subnet without CIDR suffix was given without a netmask."""


class BadNetmask(ValueError):
    """The CIDR netmask is out of range or malformed."""


@dataclass(frozen=True)
class IPv4Subnet:
    """An IPv4 subnet address with its netmask, both as 32-bit integers."""

    subnet: int
    netmask: int


def _leading_int(text: str) -> int:
    match = _STRTOL10_RE.match(text)
    return int(match.group(1)) if match else 0


def parse_ipv4_address(addr: str) -> int:
    """Parse dotted-quad IPv4 text into a 32-bit integer."""
    if not isinstance(addr, str):
        raise TypeError(f"expected a string, got {type(addr).__name__}")
    try:
        return int(ipaddress.IPv4Address(addr))
    except ipaddress.AddressValueError:
        raise BadIPAddress(f"Bad IPv4 address {addr}") from None


def parse_ipv4_subnet(subnet: str, netmask: str | None = None) -> IPv4Subnet:
    """Parse a subnet in CIDR notation, or a subnet address plus a netmask."""
    if not isinstance(subnet, str):
        raise BadIPAddress(f"Bad IPv4 subnet {subnet!r}")

    parts = subnet.split("/")
    if len(parts) > 1:
        bits = _leading_int(parts[1])
        if bits <= 0 or bits >= 32 or len(parts) > 2:
            raise BadNetmask(f"Bad netmask {subnet}")
        mask = (0xFFFFFFFF << (32 - bits)) & 0xFFFFFFFF
    else:
        if not isinstance(netmask, str):
            raise MissingNetmask(f"Missing netmask for {subnet}")
        mask = parse_ipv4_address(netmask)

    return IPv4Subnet(subnet=parse_ipv4_address(parts[0]), netmask=mask)


def split_addr_port(addr_port: str) -> tuple[str, str]:
    """Split "address:port" into its parts.

    Without a colon the whole text is taken as the port. An address holding
    colons is treated as IPv6 and must be bracketed to carry a port;
    otherwise the whole text is the address and the port is empty.
    """
    parts = rsplit_chr(addr_port, ":", 1)
    if not parts:
        raise ValueError("empty address")
    if len(parts) == 1:
        return "", parts[0]
    addr, port = parts
    if ":" in addr and not (addr.startswith("[") and addr.endswith("]")):
        return addr_port, ""
    return addr, port