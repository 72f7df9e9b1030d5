from intcnv.converter import convert, ConversionResult
from intcnv.parsing import ParsedValue, parse_value
from intcnv.types import (
    TypeTag,
    WidthRule,
    Signedness,
    WIDTH_RULES,
    resolve_type,
    ConversionError,
    UnrecognizedTypeError,
)
from intcnv.diagnostics import Diagnostic, Severity
from intcnv.word import (
    mask,
    truncate,
    to_signed,
    INPUT_MASK,
)

__all__ = [
    "convert",
    "ConversionResult",
    "ParsedValue",
    "parse_value",
    "TypeTag",
    "WidthRule",
    "Signedness",
    "WIDTH_RULES",
    "resolve_type",
    "ConversionError",
    "UnrecognizedTypeError",
    "Diagnostic",
    "Severity",
    "mask",
    "truncate",
    "to_signed",
    "INPUT_MASK",
]
