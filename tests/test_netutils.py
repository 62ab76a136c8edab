import pytest
from hypothesis import given
from hypothesis import strategies as st

from uwkit.netutils import (
    BadIPAddress,
    BadNetmask,
    IPv4Subnet,
    MissingNetmask,
    parse_ipv4_address,
    parse_ipv4_subnet,
    split_addr_port,
)


def _dotted(n):
    return ".".join(str(b) for b in n.to_bytes(4, "big"))


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_parse_ipv4_address_round_trip(n):
    assert parse_ipv4_address(_dotted(n)) == n


def test_parse_ipv4_address_all_ones():
    assert parse_ipv4_address("255.255.255.255") == 0xFFFFFFFF


@pytest.mark.parametrize("addr", ["256.0.0.1", "1.2.3", "1.2.3.4.5", "a.b.c.d", "", "1.2.3.4 "])
def test_parse_ipv4_address_bad(addr):
    with pytest.raises(BadIPAddress) as info:
        parse_ipv4_address(addr)
    assert "Bad IPv4 address" in str(info.value)


def test_parse_cidr_subnet():
    result = parse_ipv4_subnet("10.0.0.0/8")
    assert result == IPv4Subnet(
        subnet=parse_ipv4_address("10.0.0.0"),
        netmask=parse_ipv4_address("255.0.0.0"),
    )


@given(st.integers(min_value=1, max_value=31))
def test_cidr_netmask_bits(bits):
    result = parse_ipv4_subnet(f"192.168.0.0/{bits}")
    assert bin(result.netmask).count("1") == bits
    assert result.netmask >> 31 == 1


def test_parse_subnet_with_netmask():
    result = parse_ipv4_subnet("192.168.1.0", "255.255.255.0")
    assert result.netmask == parse_ipv4_address("255.255.255.0")
    assert result.subnet == parse_ipv4_address("192.168.1.0")


@pytest.mark.parametrize("subnet", ["10.0.0.0/0", "10.0.0.0/32", "10.0.0.0/abc", "10.0.0.0/8/8"])
def test_bad_netmask(subnet):
    with pytest.raises(BadNetmask) as info:
        parse_ipv4_subnet(subnet)
    assert "Bad netmask" in str(info.value)


def test_missing_netmask():
    with pytest.raises(MissingNetmask):
        parse_ipv4_subnet("10.0.0.0")


def test_bad_netmask_address():
    with pytest.raises(BadIPAddress):
        parse_ipv4_subnet("10.0.0.0", "255.255.255.256")


def test_subnet_must_be_string():
    with pytest.raises(BadIPAddress):
        parse_ipv4_subnet(42)


def test_split_addr_port_basic():
    assert split_addr_port("host:80") == ("host", "80")


def test_split_port_only():
    assert split_addr_port("80") == ("", "80")


def test_split_bracketed_ipv6():
    assert split_addr_port("[::1]:443") == ("[::1]", "443")


def test_split_bare_ipv6_has_no_port():
    assert split_addr_port("fe80::1") == ("fe80::1", "")


def test_split_leading_colon_is_port_text():
    assert split_addr_port(":80") == ("", ":80")


def test_split_empty():
    with pytest.raises(ValueError):
        split_addr_port("")