from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from intcnv.word import mask, to_signed, truncate


class ConversionError(Exception):
    pass


class UnrecognizedTypeError(ConversionError):
    def __init__(self, tag: str) -> None:
        super().__init__(f"unrecognized type '{tag}'")
        self.tag = tag


class Signedness(Enum):
    UNSIGNED = "unsigned"
    SIGNED = "signed"


class TypeTag(Enum):
    U8 = "u8"
    I8 = "i8"
    U16 = "u16"
    I16 = "i16"
    U32 = "u32"
    I32 = "i32"
    U64 = "u64"
    I64 = "i64"


@dataclass(frozen=True, slots=True)
class WidthRule:
    width: int
    signedness: Signedness

    @property
    def signed(self) -> bool:
        return self.signedness is Signedness.SIGNED

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.width - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.width - 1)) - 1
        return mask(self.width)

    def apply(self, value: int) -> int:
        """Keep the low ``width`` bits of ``value`` and read them per signedness."""
        if self.signed:
            return to_signed(value, self.width)
        return truncate(value, self.width)


WIDTH_RULES: dict[TypeTag, WidthRule] = {
    TypeTag.U8: WidthRule(8, Signedness.UNSIGNED),
    TypeTag.I8: WidthRule(8, Signedness.SIGNED),
    TypeTag.U16: WidthRule(16, Signedness.UNSIGNED),
    TypeTag.I16: WidthRule(16, Signedness.SIGNED),
    TypeTag.U32: WidthRule(32, Signedness.UNSIGNED),
    TypeTag.I32: WidthRule(32, Signedness.SIGNED),
    TypeTag.U64: WidthRule(64, Signedness.UNSIGNED),
    TypeTag.I64: WidthRule(64, Signedness.SIGNED),
}

TAG_NAMES: tuple[str, ...] = tuple(tag.value for tag in TypeTag)


def resolve_type(name: str) -> tuple[TypeTag, WidthRule]:
    try:
        tag = TypeTag(name)
    except ValueError:
        raise UnrecognizedTypeError(name) from None
    return tag, WIDTH_RULES[tag]
