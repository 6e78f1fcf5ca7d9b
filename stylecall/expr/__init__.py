"""Typed call expressions produced by the compiler."""

from stylecall.expr.dump import dump_expression
from stylecall.expr.model import (
    Argument,
    BoolLiteral,
    Call,
    Expr,
    FloatLiteral,
    Identifier,
    IntLiteral,
    ListLiteral,
    StringLiteral,
    TupleLiteral,
    VariantConstructor,
    call,
    positional,
)

__all__ = [
    "Argument",
    "BoolLiteral",
    "Call",
    "Expr",
    "FloatLiteral",
    "Identifier",
    "IntLiteral",
    "ListLiteral",
    "StringLiteral",
    "TupleLiteral",
    "VariantConstructor",
    "call",
    "dump_expression",
    "positional",
]
