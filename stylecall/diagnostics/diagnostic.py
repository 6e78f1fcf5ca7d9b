"""Diagnostics core types."""

from collections.abc import Iterable
from dataclasses import dataclass

from stylecall.diagnostics.codes import DiagnosticSpec, Severity
from stylecall.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic handed to the host for rendering."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None


class CompileError(Exception):
    """Raised when a grammar node cannot be expressed as a call.

    The first error aborts the whole compilation unit; nothing in the compiler
    catches it.
    """

    def __init__(self, spec: DiagnosticSpec, message: str, range: TextRange):
        self.spec = spec
        self.message = message
        self.range = range
        super().__init__(f"{message} at {range.as_tuple()}")

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            code=self.spec.code,
            message=self.message,
            range=self.range,
            severity=self.spec.severity,
            hint=self.spec.hint,
            category=self.spec.category,
        )


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)
