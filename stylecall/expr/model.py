"""Call-expression tree handed to the code generator."""

from __future__ import annotations

from dataclasses import dataclass

from stylecall.text import TextRange


@dataclass(frozen=True, slots=True)
class Identifier:
    """Named reference, e.g. `zero`, `easeIn`, or a callee such as `px`."""

    name: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class IntLiteral:
    value: int
    range: TextRange


@dataclass(frozen=True, slots=True)
class FloatLiteral:
    value: float
    range: TextRange


@dataclass(frozen=True, slots=True)
class StringLiteral:
    value: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class BoolLiteral:
    value: bool
    range: TextRange


@dataclass(frozen=True, slots=True)
class Argument:
    """Call argument; `label` is None for positional arguments."""

    label: str | None
    value: Expr


@dataclass(frozen=True, slots=True)
class Call:
    callee: Identifier
    args: tuple[Argument, ...]
    range: TextRange

    @property
    def name(self) -> str:
        return self.callee.name

    @property
    def labels(self) -> tuple[str | None, ...]:
        return tuple(arg.label for arg in self.args)

    @property
    def values(self) -> tuple[Expr, ...]:
        return tuple(arg.value for arg in self.args)


@dataclass(frozen=True, slots=True)
class ListLiteral:
    elements: tuple[Expr, ...]
    range: TextRange


@dataclass(frozen=True, slots=True)
class TupleLiteral:
    elements: tuple[Expr, ...]
    range: TextRange


@dataclass(frozen=True, slots=True)
class VariantConstructor:
    """Symbolic tagged value, e.g. `pointer` or `num 700`."""

    tag: str
    payload: Expr | None
    range: TextRange


type Expr = (
    Identifier
    | IntLiteral
    | FloatLiteral
    | StringLiteral
    | BoolLiteral
    | Call
    | ListLiteral
    | TupleLiteral
    | VariantConstructor
)


def call(name: str, name_range: TextRange, range: TextRange, *args: Argument) -> Call:
    return Call(callee=Identifier(name=name, range=name_range), args=args, range=range)


def positional(*values: Expr) -> tuple[Argument, ...]:
    return tuple(Argument(label=None, value=value) for value in values)


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
    "positional",
]
