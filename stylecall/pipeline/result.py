"""Compile run result carrier."""

from __future__ import annotations

from dataclasses import dataclass

from stylecall.compiler.options import CompileOptions
from stylecall.diagnostics import Diagnostic
from stylecall.expr import ListLiteral
from stylecall.syntax import Stylesheet


@dataclass(frozen=True, slots=True)
class CompileRunResult:
    """Either a full expression tree or the diagnostic that aborted the unit."""

    stylesheet: Stylesheet
    options: CompileOptions
    expression: ListLiteral | None
    diagnostics: list[Diagnostic]
    has_errors: bool
