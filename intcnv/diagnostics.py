from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

UNRECOGNIZED_TYPE = "E001"
MISSING_ARGUMENTS = "E002"
MALFORMED_NUMBER = "E003"
MALFORMED_NUMBER_DEFAULTED = "W001"
VALUE_WRAPPED = "W002"
TRAILING_INPUT = "W003"


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    code: str
    message: str
    severity: Severity
    argument: str | None = None

    def __str__(self) -> str:
        prefix = f"{self.severity.value}: [{self.code}] {self.message}"
        if self.argument is not None:
            return f"{prefix} (argument '{self.argument}')"
        return prefix


class DiagnosticCollector:
    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self._diagnostics)

    def add(
        self,
        code: str,
        message: str,
        severity: Severity,
        argument: str | None = None,
    ) -> Diagnostic:
        diag = Diagnostic(
            code=code,
            message=message,
            severity=severity,
            argument=argument,
        )
        self._diagnostics.append(diag)
        return diag

    def add_error(
        self, code: str, message: str, argument: str | None = None
    ) -> Diagnostic:
        return self.add(code, message, Severity.ERROR, argument)

    def add_warning(
        self, code: str, message: str, argument: str | None = None
    ) -> Diagnostic:
        return self.add(code, message, Severity.WARNING, argument)
