"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


COMPILE_UNSUPPORTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_UNSUPPORTED_VALUE",
    message="Unsupported component value",
    hint="Blocks, operators, unicode ranges and non-comma delimiters have no call equivalent.",
    severity="error",
    category="value",
)

COMPILE_UNSUPPORTED_AT_RULE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_UNSUPPORTED_AT_RULE",
    message="At-rule not supported",
    hint="Only `@keyframes` can be compiled, and only for the plain API.",
    severity="error",
    category="rule",
)

COMPILE_UNEXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_UNEXPECTED_VALUE",
    message="Unexpected value for property",
    severity="error",
    category="declaration",
)

COMPILE_TOO_MANY_VALUES: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_TOO_MANY_VALUES",
    message="Too many values",
    severity="error",
    category="declaration",
)

COMPILE_INVALID_ARITY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_INVALID_ARITY",
    message="Unexpected number of values for property",
    severity="error",
    category="declaration",
)

COMPILE_GRADIENT_DIRECTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_GRADIENT_DIRECTION",
    message="Invalid gradient direction",
    hint="Start the gradient with an angle, `to top|right|bottom|left`, or a color.",
    severity="error",
    category="value",
)

COMPILE_MALFORMED_COLOR_STOP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_MALFORMED_COLOR_STOP",
    message="Malformed color stop",
    hint="Use `<color>` or `<color> <percentage>`.",
    severity="error",
    category="value",
)

COMPILE_INVALID_COLOR_FUNCTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_INVALID_COLOR_FUNCTION",
    message="Invalid color function arguments",
    severity="error",
    category="value",
)

COMPILE_NESTED_AT_RULE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_NESTED_AT_RULE",
    message="Nested at-rule inside keyframes",
    severity="error",
    category="rule",
)

COMPILE_INVALID_KEYFRAME_SELECTOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_INVALID_KEYFRAME_SELECTOR",
    message="Invalid keyframe selector",
    hint="Use a percentage, `from`, `to` or `0`.",
    severity="error",
    category="rule",
)
