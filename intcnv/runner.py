from __future__ import annotations

import sys

from intcnv import diagnostics as codes
from intcnv.converter import convert
from intcnv.diagnostics import Diagnostic, Severity
from intcnv.types import WIDTH_RULES

USAGE_LINE = "Usage: intcnv i32 134"


def print_usage(given: int) -> int:
    print(USAGE_LINE)
    diag = Diagnostic(
        code=codes.MISSING_ARGUMENTS,
        message=f"expected TYPE and VALUE, got {given} argument(s)",
        severity=Severity.ERROR,
    )
    print(str(diag), file=sys.stderr)
    return 1


def format_type_table() -> str:
    lines = [f"{'TYPE':<5} {'BITS':>4}  RANGE"]
    for tag, rule in WIDTH_RULES.items():
        lines.append(
            f"{tag.value:<5} {rule.width:>4}  {rule.min_value} .. {rule.max_value}"
        )
    return "\n".join(lines)


def run_conversion(type_tag: str, raw_value: str, *, strict: bool = False) -> int:
    result = convert(type_tag, raw_value, strict=strict)

    for d in result.diagnostics:
        print(str(d), file=sys.stderr)

    if result.has_errors():
        return 1

    print(result.text)
    return 0
