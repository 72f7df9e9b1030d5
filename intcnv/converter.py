from __future__ import annotations

from dataclasses import dataclass

from intcnv import diagnostics as codes
from intcnv.diagnostics import Diagnostic, DiagnosticCollector, Severity
from intcnv.parsing import ParsedValue, parse_value
from intcnv.types import TAG_NAMES, UnrecognizedTypeError, WidthRule, resolve_type


@dataclass(slots=True)
class ConversionResult:
    rule: WidthRule | None
    value: int | None
    diagnostics: list[Diagnostic]

    @property
    def text(self) -> str | None:
        if self.value is None:
            return None
        return str(self.value)

    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.diagnostics)

    def has_warnings(self) -> bool:
        return any(d.severity == Severity.WARNING for d in self.diagnostics)

    def format_diagnostics(self) -> str:
        return "\n".join(str(d) for d in self.diagnostics)


def _check_parsed(
    raw_value: str,
    parsed: ParsedValue,
    diagnostics: DiagnosticCollector,
    *,
    strict: bool,
) -> None:
    if parsed.malformed:
        if strict:
            diagnostics.add_error(
                codes.MALFORMED_NUMBER,
                f"'{raw_value}' is not a decimal number",
                "value",
            )
        else:
            diagnostics.add_warning(
                codes.MALFORMED_NUMBER_DEFAULTED,
                f"'{raw_value}' has no leading digits, using 0",
                "value",
            )
        return

    if parsed.wrapped:
        diagnostics.add_warning(
            codes.VALUE_WRAPPED,
            f"'{raw_value}' does not fit in 64 bits, reduced modulo 2**64",
            "value",
        )

    if parsed.trailing:
        diagnostics.add_warning(
            codes.TRAILING_INPUT,
            f"read '{parsed.digits}', ignoring trailing text '{parsed.trailing}'",
            "value",
        )


def convert(type_tag: str, raw_value: str, *, strict: bool = False) -> ConversionResult:
    diagnostics = DiagnosticCollector()

    try:
        _, rule = resolve_type(type_tag)
    except UnrecognizedTypeError as e:
        diagnostics.add_error(
            codes.UNRECOGNIZED_TYPE,
            f"{e}, expected one of: {', '.join(TAG_NAMES)}",
            "type",
        )
        return ConversionResult(rule=None, value=None, diagnostics=diagnostics.diagnostics)

    parsed = parse_value(raw_value)
    _check_parsed(raw_value, parsed, diagnostics, strict=strict)

    if diagnostics.has_errors():
        return ConversionResult(rule=rule, value=None, diagnostics=diagnostics.diagnostics)

    return ConversionResult(
        rule=rule,
        value=rule.apply(parsed.value),
        diagnostics=diagnostics.diagnostics,
    )
