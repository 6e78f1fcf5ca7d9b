"""Diagnostics."""

from stylecall.diagnostics.codes import (
    COMPILE_GRADIENT_DIRECTION,
    COMPILE_INVALID_ARITY,
    COMPILE_INVALID_COLOR_FUNCTION,
    COMPILE_INVALID_KEYFRAME_SELECTOR,
    COMPILE_MALFORMED_COLOR_STOP,
    COMPILE_NESTED_AT_RULE,
    COMPILE_TOO_MANY_VALUES,
    COMPILE_UNEXPECTED_VALUE,
    COMPILE_UNSUPPORTED_AT_RULE,
    COMPILE_UNSUPPORTED_VALUE,
    DiagnosticSpec,
    Severity,
)
from stylecall.diagnostics.diagnostic import CompileError, Diagnostic, has_errors

__all__ = [
    "COMPILE_GRADIENT_DIRECTION",
    "COMPILE_INVALID_ARITY",
    "COMPILE_INVALID_COLOR_FUNCTION",
    "COMPILE_INVALID_KEYFRAME_SELECTOR",
    "COMPILE_MALFORMED_COLOR_STOP",
    "COMPILE_NESTED_AT_RULE",
    "COMPILE_TOO_MANY_VALUES",
    "COMPILE_UNEXPECTED_VALUE",
    "COMPILE_UNSUPPORTED_AT_RULE",
    "COMPILE_UNSUPPORTED_VALUE",
    "CompileError",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
]
