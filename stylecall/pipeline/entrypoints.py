"""Compile entrypoint that turns the first compile error into a diagnostic."""

from __future__ import annotations

import logging

from stylecall.compiler import ApiVariant, CompileOptions, expand_stylesheet
from stylecall.diagnostics import CompileError, has_errors
from stylecall.pipeline.result import CompileRunResult
from stylecall.syntax import Stylesheet

logger = logging.getLogger(__name__)


def run_compile(
    stylesheet: Stylesheet,
    options: CompileOptions | None = None,
    *,
    variant: ApiVariant | str | None = None,
) -> CompileRunResult:
    """Compile one stylesheet; no partial tree is returned on failure."""
    resolved = _resolve_options(options, variant)
    try:
        expression = expand_stylesheet(stylesheet, resolved)
    except CompileError as error:
        diagnostic = error.to_diagnostic()
        logger.debug(
            "Compilation aborted (%s) at %s: %s",
            diagnostic.code,
            diagnostic.range.as_tuple(),
            diagnostic.message,
        )
        return CompileRunResult(
            stylesheet=stylesheet,
            options=resolved,
            expression=None,
            diagnostics=[diagnostic],
            has_errors=has_errors([diagnostic]),
        )

    logger.debug(
        "Compiled %d rules into %d expressions for the %s API",
        len(stylesheet.rules),
        len(expression.elements),
        resolved.variant,
    )
    return CompileRunResult(
        stylesheet=stylesheet,
        options=resolved,
        expression=expression,
        diagnostics=[],
        has_errors=False,
    )


def _resolve_options(
    options: CompileOptions | None,
    variant: ApiVariant | str | None,
) -> CompileOptions:
    if options is not None:
        if variant is not None:
            raise ValueError("Pass either options or variant, not both")
        return options
    if variant is not None:
        return CompileOptions.for_variant(variant)
    return CompileOptions()
