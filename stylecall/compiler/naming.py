"""Identifier naming decisions: call names, overload suffixes, variant constants."""

from __future__ import annotations

from typing import Final

from stylecall.compiler.options import ApiVariant

# Never suffixed, whatever the arity.
_OVERLOAD_EXEMPT: Final[frozenset[str]] = frozenset({"unsafe"})

# Plain-API keywords exposed as tagged values rather than plain references.
_PLAIN_VARIANT_CONSTANTS: Final[frozenset[str]] = frozenset(
    {
        # selector keywords
        "hover",
        "active",
        "focus",
        "visited",
        "link",
        "checked",
        "disabled",
        "enabled",
        "first-child",
        "last-child",
        "only-child",
        "empty",
        # cursor
        "pointer",
        "default",
        "crosshair",
        "move",
        "text",
        "wait",
        "help",
        "progress",
        "not-allowed",
        "no-drop",
        "grab",
        "grabbing",
        "zoom-in",
        "zoom-out",
        "col-resize",
        "row-resize",
        "e-resize",
        "n-resize",
        "s-resize",
        "w-resize",
        # list-style
        "disc",
        "circle",
        "square",
        "decimal",
        "decimal-leading-zero",
        "lower-roman",
        "upper-roman",
        "lower-alpha",
        "upper-alpha",
        "inside",
        "outside",
        # outline-style
        "dotted",
        "dashed",
        "solid",
        "double",
        "groove",
        "ridge",
        "outset",
        # transform-style
        "flat",
        "preserve-3d",
        # font-variant
        "small-caps",
        "all-small-caps",
        "petite-caps",
        "unicase",
        "titling-caps",
        # step timing
        "step-start",
        "step-end",
        # display
        "block",
        "inline",
        "inline-block",
        "flex",
        "inline-flex",
        "grid",
        "inline-grid",
        "table",
        "table-cell",
        "table-row",
        "list-item",
        "contents",
        # font-weight
        "bold",
        "bolder",
        "lighter",
    }
)


def to_call_name(kebab: str) -> str:
    """`border-top-left-radius` -> `borderTopLeftRadius`."""
    first, *rest = kebab.split("-")
    return first.lower() + "".join(segment[:1].upper() + segment[1:] for segment in rest)


def is_overloaded(property_name: str, arity: int, variant: ApiVariant) -> bool:
    """Typed-API calls taking several values are suffixed with the arity.

    Plain-API properties with arity overloads (`padding`, `margin`) are suffixed
    by their own expanders instead.
    """
    if arity <= 1 or property_name in _OVERLOAD_EXEMPT:
        return False
    return variant == ApiVariant.TYPED


def overloaded_name(call_name: str, arity: int) -> str:
    return f"{call_name}{arity}"


def resolve_call_name(property_name: str, arity: int, variant: ApiVariant) -> str:
    """Mapped call name, suffixed with the arity when the property is overloaded."""
    name = to_call_name(property_name)
    if is_overloaded(property_name, arity, variant):
        return overloaded_name(name, arity)
    return name


def is_variant_constant(ident: str, variant: ApiVariant) -> bool:
    if variant != ApiVariant.PLAIN:
        return False
    return ident in _PLAIN_VARIANT_CONSTANTS


__all__ = [
    "is_overloaded",
    "is_variant_constant",
    "overloaded_name",
    "resolve_call_name",
    "to_call_name",
]
