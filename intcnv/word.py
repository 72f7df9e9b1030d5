from __future__ import annotations

INPUT_MASK = 0xFFFF_FFFF_FFFF_FFFF
INPUT_MIN_SIGNED = -0x8000_0000_0000_0000


def mask(width: int) -> int:
    return (1 << width) - 1


def sign_bit(width: int) -> int:
    return 1 << (width - 1)


def truncate(value: int, width: int) -> int:
    return value & mask(width)


def to_signed(value: int, width: int) -> int:
    w = value & mask(width)
    if w >= sign_bit(width):
        return w - (mask(width) + 1)
    return w


def wrap64(value: int) -> int:
    return value & INPUT_MASK


def fits64(value: int) -> bool:
    return INPUT_MIN_SIGNED <= value <= INPUT_MASK
