"""Bit manipulation helpers: case toggling, binary strings and subsets."""

from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")

_CASE_BIT = 0x20


def toggle_case(ch: str) -> str:
    """Flip the case of an ASCII letter by toggling bit 0x20."""
    code = ord(ch)
    if "A" <= ch <= "Z":
        return chr(code | _CASE_BIT)
    if "a" <= ch <= "z":
        return chr(code & ~_CASE_BIT)
    return ch


def toggle_string(text: str) -> str:
    """Toggle the case of every ASCII letter in ``text``."""
    return "".join(toggle_case(ch) for ch in text)


def to_binary_reversed(num: int) -> str:
    """Return the 32-bit binary form of ``num`` without leading zeros, reversed.

    Negative numbers use their two's complement bit pattern.
    """
    bits = format(num & 0xFFFFFFFF, "032b").lstrip("0") or "0"
    return bits[::-1]


def _as_bytes(text: str | bytes) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def byte_lines(text: str | bytes) -> list[str]:
    """Return each byte of ``text`` as an 8-character binary string."""
    return [format(byte, "08b") for byte in _as_bytes(text)]


def string_to_binary(text: str | bytes) -> str:
    """Concatenate the 8-bit binary form of every byte of ``text``."""
    return "".join(byte_lines(text))


def subsets(items: Sequence[T]) -> Iterator[list[T]]:
    """Yield every subset of ``items`` in bitmask order."""
    for mask in range(1 << len(items)):
        yield [item for bit, item in enumerate(items) if mask & (1 << bit)]