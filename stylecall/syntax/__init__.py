"""Grammar tree consumed by the compiler."""

from stylecall.syntax.model import (
    AtRule,
    BracketBlock,
    ComponentValue,
    Declaration,
    DeclarationList,
    Delim,
    Dimension,
    DimensionKind,
    FloatDimension,
    Function,
    Hash,
    Ident,
    Number,
    Operator,
    ParenBlock,
    Percentage,
    Rule,
    String,
    StyleRule,
    Stylesheet,
    UnicodeRange,
    Uri,
)

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
