"""Input grammar tree handed over by the CSS parser.

Nodes are already tokenized and structured; the compiler only pattern-matches on
them. Every node carries the span it was parsed from.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from stylecall.text import TextRange


class DimensionKind(StrEnum):
    """Unit family the parser attaches to float-tagged dimensions."""

    TIME = "time"
    LENGTH = "length"
    ANGLE = "angle"


@dataclass(frozen=True, slots=True)
class Ident:
    name: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class String:
    """Quoted string, stored without its quotes."""

    value: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class Number:
    """Number kept as source digits, e.g. `0`, `1.5`, `-2`."""

    digits: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class Percentage:
    """Percentage; `digits` excludes the `%` sign."""

    digits: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class Dimension:
    number: str
    unit: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class FloatDimension:
    """Dimension the parser classified as a time, length or angle."""

    number: str
    unit: str
    kind: DimensionKind
    range: TextRange


@dataclass(frozen=True, slots=True)
class Hash:
    """Hash token; `hex` excludes the leading `#`."""

    hex: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class Uri:
    value: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class Function:
    """Function call value; `params` keeps comma delimiters in source order."""

    name: str
    params: tuple[ComponentValue, ...]
    range: TextRange


@dataclass(frozen=True, slots=True)
class Operator:
    op: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class Delim:
    char: str
    range: TextRange

    @property
    def is_comma(self) -> bool:
        return self.char == ","

    @property
    def is_colon(self) -> bool:
        return self.char == ":"


@dataclass(frozen=True, slots=True)
class UnicodeRange:
    text: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class ParenBlock:
    values: tuple[ComponentValue, ...]
    range: TextRange


@dataclass(frozen=True, slots=True)
class BracketBlock:
    values: tuple[ComponentValue, ...]
    range: TextRange


@dataclass(frozen=True, slots=True)
class Declaration:
    """`name: values;` where `values` keeps delimiters between the values."""

    name: str
    name_range: TextRange
    values: tuple[ComponentValue, ...]
    range: TextRange


@dataclass(frozen=True, slots=True)
class DeclarationList:
    items: tuple[Declaration | AtRule, ...]


@dataclass(frozen=True, slots=True)
class AtRule:
    """At-rule such as `@keyframes spin { ... }`; `name` excludes the `@`."""

    name: str
    name_range: TextRange
    prelude: tuple[ComponentValue, ...]
    prelude_range: TextRange
    block: DeclarationList | Stylesheet | None
    range: TextRange


@dataclass(frozen=True, slots=True)
class StyleRule:
    prelude: tuple[ComponentValue, ...]
    prelude_range: TextRange
    block: DeclarationList
    range: TextRange

    @property
    def has_empty_prelude(self) -> bool:
        return len(self.prelude) == 0


@dataclass(frozen=True, slots=True)
class Stylesheet:
    rules: tuple[StyleRule | AtRule, ...]
    range: TextRange


type ComponentValue = (
    Ident
    | String
    | Number
    | Percentage
    | Dimension
    | FloatDimension
    | Hash
    | Uri
    | Function
    | Operator
    | Delim
    | UnicodeRange
    | ParenBlock
    | BracketBlock
)
type Rule = StyleRule | AtRule


__all__ = [
    "AtRule",
    "BracketBlock",
    "ComponentValue",
    "Declaration",
    "DeclarationList",
    "Delim",
    "Dimension",
    "DimensionKind",
    "FloatDimension",
    "Function",
    "Hash",
    "Ident",
    "Number",
    "Operator",
    "ParenBlock",
    "Percentage",
    "Rule",
    "String",
    "StyleRule",
    "Stylesheet",
    "UnicodeRange",
    "Uri",
]
