"""Small demonstrations of classic bit manipulation tricks."""

from __future__ import annotations

import sys

_CASE_MASK = ord("_")
_LOWER_BIT = ord(" ")


def set_bit(number: int, bit: int) -> int:
    """Return number with the given bit set."""
    return number | (1 << bit)


def clear_bit(number: int, bit: int) -> int:
    """Return number with the given bit cleared."""
    return number & ~(1 << bit)


def toggle_bit(number: int, bit: int) -> int:
    """Return number with the given bit flipped."""
    return number ^ (1 << bit)


def _single(ch: str) -> int:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ord(ch)


def to_upper(ch: str) -> str:
    """Upper-case an ASCII letter by clearing its case bit."""
    return chr(_single(ch) & _CASE_MASK)


def to_lower(ch: str) -> str:
    """Lower-case an ASCII letter by setting its case bit."""
    return chr(_single(ch) | _LOWER_BIT)


def is_power_of_two(value: int) -> bool:
    """True if value is a positive power of two."""
    return value > 0 and not (value & (value - 1))


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers using three XOR operations."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def main(argv: list[str] | None = None) -> int:
    """Run the bit manipulation demonstrations."""
    out = sys.stdout

    number = set_bit(0x75, 3)
    number = clear_bit(number, 1)
    number = toggle_bit(number, 0)
    out.write(f"number = 0x{number:02X}\n")

    for ch in "sREedEv":
        out.write(f"UPPERCASE: {to_upper(ch)}\n")
        out.write(f"LOWERCASE: {to_lower(ch)}\n")

    value = 32
    verdict = "is" if is_power_of_two(value) else "is not"
    out.write(f"{value} {verdict} a power of 2\n")

    a, b = 3, 4
    out.write(f"Before swap:\na: {a}; b: {b}\n")
    a, b = xor_swap(a, b)
    out.write(f"\nAfter swap:\na: {a}; b: {b}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())