"""Rapidhash: a fast 64-bit non-cryptographic hash function."""

from __future__ import annotations

MASK64 = (1 << 64) - 1

DEFAULT_SEED = 0xBDD89AA982704029

SECRET = (
    0x2D358DCCAA6C78A5,
    0x8BB84B93962EACC9,
    0x4B33A62ED433D4A3,
)

_MAX_LENGTH = (1 << 32) - 1


def rapid_mum(a: int, b: int) -> tuple[int, int]:
    """Multiply two 64-bit numbers and return the (low, high) 64-bit halves."""
    product = (a & MASK64) * (b & MASK64)
    return product & MASK64, product >> 64


def rapid_mix(a: int, b: int) -> int:
    """Multiply two 64-bit numbers and xor the halves of the 128-bit product."""
    low, high = rapid_mum(a, b)
    return low ^ high


def _read64(data: bytes, pos: int) -> int:
    return int.from_bytes(data[pos:pos + 8], "little")


def _read32(data: bytes, pos: int) -> int:
    return int.from_bytes(data[pos:pos + 4], "little")


def _read_small(data: bytes, length: int) -> int:
    return (data[0] << 56) | (data[length >> 1] << 32) | data[length - 1]


def rapidhash_with_seed(data: bytes | bytearray | memoryview, seed: int) -> int:
    """Hash `data` with the given 64-bit seed and the default secrets."""
    data = bytes(data)
    length = len(data)
    if length > _MAX_LENGTH:
        raise ValueError(f"data too long to hash: {length} bytes")

    s0, s1, s2 = SECRET
    seed &= MASK64
    seed ^= rapid_mix(seed ^ s0, s1) ^ length

    if length <= 16:
        if length >= 4:
            last = length - 4
            a = (_read32(data, 0) << 32) | _read32(data, last)
            delta = (length & 24) >> (length >> 3)
            b = (_read32(data, delta) << 32) | _read32(data, last - delta)
        elif length > 0:
            a = _read_small(data, length)
            b = 0
        else:
            a = b = 0
    else:
        pos = 0
        remaining = length
        if remaining > 48:
            see1 = see2 = seed
            while remaining >= 96:
                seed = rapid_mix(_read64(data, pos) ^ s0, _read64(data, pos + 8) ^ seed)
                see1 = rapid_mix(_read64(data, pos + 16) ^ s1, _read64(data, pos + 24) ^ see1)
                see2 = rapid_mix(_read64(data, pos + 32) ^ s2, _read64(data, pos + 40) ^ see2)
                seed = rapid_mix(_read64(data, pos + 48) ^ s0, _read64(data, pos + 56) ^ seed)
                see1 = rapid_mix(_read64(data, pos + 64) ^ s1, _read64(data, pos + 72) ^ see1)
                see2 = rapid_mix(_read64(data, pos + 80) ^ s2, _read64(data, pos + 88) ^ see2)
                pos += 96
                remaining -= 96
            if remaining >= 48:
                seed = rapid_mix(_read64(data, pos) ^ s0, _read64(data, pos + 8) ^ seed)
                see1 = rapid_mix(_read64(data, pos + 16) ^ s1, _read64(data, pos + 24) ^ see1)
                see2 = rapid_mix(_read64(data, pos + 32) ^ s2, _read64(data, pos + 40) ^ see2)
                pos += 48
                remaining -= 48
            seed ^= see1 ^ see2
        if remaining > 16:
            seed = rapid_mix(_read64(data, pos) ^ s2, _read64(data, pos + 8) ^ seed ^ s1)
            if remaining > 32:
                seed = rapid_mix(_read64(data, pos + 16) ^ s2, _read64(data, pos + 24) ^ seed)
        a = _read64(data, pos + remaining - 16)
        b = _read64(data, pos + remaining - 8)

    a ^= s1
    b ^= seed
    a, b = rapid_mum(a, b)
    return rapid_mix(a ^ s0 ^ length, b ^ s1)


def rapidhash(data: bytes | bytearray | memoryview) -> int:
    """Hash `data` with the default seed."""
    return rapidhash_with_seed(data, DEFAULT_SEED)