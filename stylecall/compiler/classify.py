"""Shape predicates over component values.

Every predicate accepts any component value and never looks at its span.
"""

from __future__ import annotations

from typing import Final

from stylecall.syntax import (
    ComponentValue,
    Delim,
    Dimension,
    DimensionKind,
    FloatDimension,
    Function,
    Hash,
    Ident,
    Number,
    Percentage,
    String,
)

TIME_UNITS: Final[frozenset[str]] = frozenset({"s", "ms"})
ANGLE_UNITS: Final[frozenset[str]] = frozenset({"deg", "rad", "grad", "turn"})
LENGTH_UNITS: Final[frozenset[str]] = frozenset(
    {
        "px",
        "pt",
        "pc",
        "cm",
        "mm",
        "q",
        "in",
        "em",
        "rem",
        "ex",
        "ch",
        "vw",
        "vh",
        "vmin",
        "vmax",
    }
)

_TIMING_FUNCTION_IDENTS: Final[frozenset[str]] = frozenset(
    {"ease", "ease-in", "ease-out", "ease-in-out", "linear", "step-start", "step-end"}
)
_TIMING_FUNCTION_NAMES: Final[frozenset[str]] = frozenset({"cubic-bezier", "steps", "frames"})
_ANIMATION_DIRECTIONS: Final[frozenset[str]] = frozenset(
    {"normal", "reverse", "alternate", "alternate-reverse"}
)
_ANIMATION_FILL_MODES: Final[frozenset[str]] = frozenset({"none", "forwards", "backwards", "both"})
_ANIMATION_PLAY_STATES: Final[frozenset[str]] = frozenset({"running", "paused"})
_COLOR_FUNCTION_NAMES: Final[frozenset[str]] = frozenset({"rgb", "rgba", "hsl", "hsla"})
_LINE_WIDTHS: Final[frozenset[str]] = frozenset({"thin", "medium", "thick"})
_LINE_STYLES: Final[frozenset[str]] = frozenset(
    {
        "none",
        "hidden",
        "dotted",
        "dashed",
        "solid",
        "double",
        "groove",
        "ridge",
        "inset",
        "outset",
    }
)


def _ident_in(value: ComponentValue, names: frozenset[str]) -> bool:
    return isinstance(value, Ident) and value.name in names


def _unit_kind(value: ComponentValue) -> DimensionKind | None:
    if isinstance(value, FloatDimension):
        return value.kind
    if isinstance(value, Dimension):
        unit = value.unit.lower()
        if unit in TIME_UNITS:
            return DimensionKind.TIME
        if unit in LENGTH_UNITS:
            return DimensionKind.LENGTH
        if unit in ANGLE_UNITS:
            return DimensionKind.ANGLE
    return None


def is_comma(value: ComponentValue) -> bool:
    return isinstance(value, Delim) and value.is_comma


def is_zero(value: ComponentValue) -> bool:
    return isinstance(value, Number) and value.digits == "0"


def is_number(value: ComponentValue) -> bool:
    return isinstance(value, Number)


def is_time(value: ComponentValue) -> bool:
    return _unit_kind(value) == DimensionKind.TIME


def is_angle(value: ComponentValue) -> bool:
    return _unit_kind(value) == DimensionKind.ANGLE


def is_length(value: ComponentValue) -> bool:
    return is_zero(value) or _unit_kind(value) == DimensionKind.LENGTH


def is_percentage_or_zero(value: ComponentValue) -> bool:
    return isinstance(value, Percentage) or is_zero(value)


def is_timing_function(value: ComponentValue) -> bool:
    if isinstance(value, Function):
        return value.name in _TIMING_FUNCTION_NAMES
    return _ident_in(value, _TIMING_FUNCTION_IDENTS)


def is_animation_iteration_count(value: ComponentValue) -> bool:
    if isinstance(value, Function):
        return value.name == "count"
    return isinstance(value, Ident) and value.name == "infinite"


def is_animation_direction(value: ComponentValue) -> bool:
    return _ident_in(value, _ANIMATION_DIRECTIONS)


def is_animation_fill_mode(value: ComponentValue) -> bool:
    return _ident_in(value, _ANIMATION_FILL_MODES)


def is_animation_play_state(value: ComponentValue) -> bool:
    return _ident_in(value, _ANIMATION_PLAY_STATES)


def is_keyframes_name(value: ComponentValue) -> bool:
    return isinstance(value, (Ident, String))


def is_color(value: ComponentValue) -> bool:
    if isinstance(value, Function):
        return value.name in _COLOR_FUNCTION_NAMES
    return isinstance(value, (Hash, Ident))


def is_line_width(value: ComponentValue) -> bool:
    return _ident_in(value, _LINE_WIDTHS) or is_length(value)


def is_line_style(value: ComponentValue) -> bool:
    return _ident_in(value, _LINE_STYLES)


def is_inset(value: ComponentValue) -> bool:
    return isinstance(value, Ident) and value.name == "inset"


def is_any_ident(value: ComponentValue) -> bool:
    return isinstance(value, Ident)


__all__ = [
    "ANGLE_UNITS",
    "LENGTH_UNITS",
    "TIME_UNITS",
    "is_angle",
    "is_animation_direction",
    "is_animation_fill_mode",
    "is_animation_iteration_count",
    "is_animation_play_state",
    "is_any_ident",
    "is_color",
    "is_comma",
    "is_inset",
    "is_keyframes_name",
    "is_length",
    "is_line_style",
    "is_line_width",
    "is_number",
    "is_percentage_or_zero",
    "is_time",
    "is_timing_function",
    "is_zero",
]
