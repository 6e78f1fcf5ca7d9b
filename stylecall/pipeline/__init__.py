"""Compile entrypoint and result carrier."""

from stylecall.pipeline.entrypoints import run_compile
from stylecall.pipeline.result import CompileRunResult

__all__ = ["CompileRunResult", "run_compile"]
