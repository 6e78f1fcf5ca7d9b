"""Compile CSS grammar trees into typed styling-API call expressions."""

from stylecall.compiler import ApiVariant, CompileOptions, expand_stylesheet
from stylecall.diagnostics import CompileError, Diagnostic
from stylecall.pipeline import CompileRunResult, run_compile

__all__ = [
    "ApiVariant",
    "CompileError",
    "CompileOptions",
    "CompileRunResult",
    "Diagnostic",
    "expand_stylesheet",
    "run_compile",
]
