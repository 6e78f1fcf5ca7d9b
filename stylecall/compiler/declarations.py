"""Declaration expansion: one CSS declaration becomes one call expression.

Property-specific expanders are registered per (property, variant) pair; a
declaration without a registered expander takes the standard path.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from stylecall.compiler.classify import (
    is_animation_direction,
    is_animation_fill_mode,
    is_animation_iteration_count,
    is_animation_play_state,
    is_any_ident,
    is_color,
    is_inset,
    is_keyframes_name,
    is_length,
    is_line_style,
    is_line_width,
    is_time,
    is_timing_function,
)
from stylecall.compiler.grouping import group_parameters
from stylecall.compiler.naming import overloaded_name, resolve_call_name, to_call_name
from stylecall.compiler.options import ApiVariant, CompileOptions
from stylecall.compiler.slots import ShorthandSpec, Slot, SlotRender, assign_slots, render_slots
from stylecall.compiler.values import number_literal, translate_value
from stylecall.diagnostics import COMPILE_INVALID_ARITY, COMPILE_UNEXPECTED_VALUE, CompileError
from stylecall.expr import (
    Argument,
    Call,
    Expr,
    FloatLiteral,
    ListLiteral,
    StringLiteral,
    VariantConstructor,
    call,
    positional,
)
from stylecall.syntax import ComponentValue, Declaration, Ident, Number, String
from stylecall.text import TextRange

type Expander = Callable[[Declaration, CompileOptions], Expr]

BOTH_VARIANTS: Final[tuple[ApiVariant, ...]] = (ApiVariant.PLAIN, ApiVariant.TYPED)

EXPANDERS: dict[tuple[str, ApiVariant], Expander] = {}

# Call names taking the list of per-group calls.
_LIST_CALL_NAMES: Final[dict[str, str]] = {
    "animation": "animations",
    "box-shadow": "boxShadows",
    "text-shadow": "textShadows",
    "transition": "transitions",
    "font-family": "fontFamilies",
    "transform": "transforms",
}

_BOX_LABELS: Final[dict[int, tuple[str | None, ...]]] = {
    2: ("v", "h"),
    3: ("top", "h", "bottom"),
    4: ("top", "right", "bottom", "left"),
}

ANIMATION: Final[ShorthandSpec] = ShorthandSpec(
    property_name="animation",
    slots=(
        Slot("time", is_time, ("duration", "delay"), noun="time"),
        Slot("timing", is_timing_function, ("timingFunction",), noun="timing function"),
        Slot("iterations", is_animation_iteration_count, ("iterationCount",), noun="iteration count"),
        Slot("direction", is_animation_direction, ("direction",), noun="direction"),
        Slot("fill", is_animation_fill_mode, ("fillMode",), noun="fill mode"),
        Slot("play", is_animation_play_state, ("playState",), noun="play state"),
        Slot("name", is_keyframes_name, (None,), SlotRender.NAME, noun="keyframes name", fallback=True),
    ),
    emit_order=("time", "timing", "iterations", "direction", "fill", "play", "name"),
)

BOX_SHADOW: Final[ShorthandSpec] = ShorthandSpec(
    property_name="box-shadow",
    slots=(
        Slot("inset", is_inset, ("inset",), SlotRender.FLAG, noun="inset"),
        Slot("lengths", is_length, ("x", "y", "blur", "spread"), noun="length"),
        Slot("color", is_color, (None,), noun="color", fallback=True),
    ),
    emit_order=("lengths", "inset", "color"),
)

TEXT_SHADOW: Final[ShorthandSpec] = ShorthandSpec(
    property_name="text-shadow",
    slots=(
        Slot("lengths", is_length, ("x", "y", "blur"), noun="length"),
        Slot("color", is_color, (None,), noun="color", fallback=True),
    ),
    emit_order=("lengths", "color"),
)

TRANSITION: Final[ShorthandSpec] = ShorthandSpec(
    property_name="transition",
    slots=(
        Slot("time", is_time, ("duration", "delay"), noun="time"),
        Slot("timing", is_timing_function, ("timingFunction",), noun="timing function"),
        Slot("property", is_any_ident, (None,), SlotRender.NAME, noun="property", fallback=True),
    ),
    emit_order=("property", "time", "timing"),
)

BORDER_PAIR: Final[ShorthandSpec] = ShorthandSpec(
    property_name="border",
    slots=(
        Slot("width", is_line_width, ("width",), noun="line width"),
        Slot("style", is_line_style, ("style",), noun="line style"),
        Slot("color", is_color, ("color",), noun="color", fallback=True),
    ),
    emit_order=("width", "style", "color"),
)


def expander(*property_names: str, variants: tuple[ApiVariant, ...] = BOTH_VARIANTS):
    """Decorator adding a function to ``EXPANDERS`` for the given variants."""

    def expander_decorator(function: Expander) -> Expander:
        for property_name in property_names:
            for variant in variants:
                key = (property_name, variant)
                assert key not in EXPANDERS, key
                EXPANDERS[key] = function
        return function

    return expander_decorator


def expand_declaration(declaration: Declaration, options: CompileOptions) -> Expr:
    expand = EXPANDERS.get((declaration.name.lower(), options.variant), expand_standard)
    return expand(declaration, options)


def expand_standard(declaration: Declaration, options: CompileOptions) -> Call:
    """Mapped name, overload suffix when eligible, unlabeled translated values."""
    arity = len(declaration.values)
    name = resolve_call_name(declaration.name, arity, options.variant)
    args = positional(*(translate_value(value, options) for value in declaration.values))
    return call(name, declaration.name_range, declaration.range, *args)


def _labeled(declaration: Declaration, options: CompileOptions, labels: tuple[str | None, ...]) -> Call:
    name = overloaded_name(to_call_name(declaration.name), len(declaration.values))
    args = tuple(
        Argument(label=label, value=translate_value(value, options))
        for label, value in zip(labels, declaration.values, strict=True)
    )
    return call(name, declaration.name_range, declaration.range, *args)


def _values_range(declaration: Declaration) -> TextRange:
    values = declaration.values
    if not values:
        return TextRange.empty(declaration.name_range.end)
    return values[0].range.cover(values[-1].range)


def _list_call(declaration: Declaration, items: list[Expr]) -> Call:
    elements = ListLiteral(elements=tuple(items), range=_values_range(declaration))
    name = _LIST_CALL_NAMES[declaration.name.lower()]
    return call(name, declaration.name_range, declaration.range, *positional(elements))


def _single_value(declaration: Declaration) -> ComponentValue:
    if len(declaration.values) != 1:
        raise CompileError(
            COMPILE_INVALID_ARITY,
            f"Property `{declaration.name}` expects a single value, got {len(declaration.values)}",
            declaration.range,
        )
    return declaration.values[0]


def _unexpected(declaration: Declaration, value: ComponentValue) -> CompileError:
    return CompileError(
        COMPILE_UNEXPECTED_VALUE,
        f"Unexpected value for property `{declaration.name}`",
        value.range,
    )


def _expand_groups(declaration: Declaration, options: CompileOptions, spec: ShorthandSpec) -> Call:
    item_name = to_call_name(declaration.name)
    items: list[Expr] = []
    for group in group_parameters(declaration.values):
        if not group.values:
            raise CompileError(
                COMPILE_INVALID_ARITY,
                f"Empty value group for property `{declaration.name}`",
                group.range,
            )
        filled = assign_slots(spec, group.values)
        items.append(call(item_name, declaration.name_range, group.range, *render_slots(spec, filled, options)))
    return _list_call(declaration, items)


@expander("animation")
def expand_animation(declaration: Declaration, options: CompileOptions) -> Expr:
    return _expand_groups(declaration, options, ANIMATION)


@expander("box-shadow")
def expand_box_shadow(declaration: Declaration, options: CompileOptions) -> Expr:
    return _expand_groups(declaration, options, BOX_SHADOW)


@expander("text-shadow")
def expand_text_shadow(declaration: Declaration, options: CompileOptions) -> Expr:
    return _expand_groups(declaration, options, TEXT_SHADOW)


@expander("transition")
def expand_transition(declaration: Declaration, options: CompileOptions) -> Expr:
    return _expand_groups(declaration, options, TRANSITION)


@expander("font-family")
def expand_font_family(declaration: Declaration, options: CompileOptions) -> Expr:
    groups = group_parameters(declaration.values)
    if options.is_plain:
        families = ", ".join(
            " ".join(_family_word(declaration, value, quote=True) for value in group.values)
            for group in groups
        )
        family = StringLiteral(value=families, range=_values_range(declaration))
        return call(to_call_name(declaration.name), declaration.name_range, declaration.range, *positional(family))

    items: list[Expr] = []
    for group in groups:
        words = " ".join(_family_word(declaration, value, quote=False) for value in group.values)
        name = StringLiteral(value=words, range=group.range)
        items.append(call(to_call_name(declaration.name), declaration.name_range, group.range, *positional(name)))
    return _list_call(declaration, items)


def _family_word(declaration: Declaration, value: ComponentValue, *, quote: bool) -> str:
    if isinstance(value, Ident):
        return value.name
    if isinstance(value, String):
        return f'"{value.value}"' if quote else value.value
    raise _unexpected(declaration, value)


@expander("z-index", variants=(ApiVariant.TYPED,))
def expand_z_index(declaration: Declaration, options: CompileOptions) -> Expr:
    value = _single_value(declaration)
    if isinstance(value, Ident):
        arg = translate_value(value, options)
    elif isinstance(value, Number):
        arg = call("int", value.range, value.range, *positional(number_literal(value.digits, value.range)))
    else:
        raise _unexpected(declaration, value)
    return call(to_call_name(declaration.name), declaration.name_range, declaration.range, *positional(arg))


@expander("flex-grow", "flex-shrink", variants=(ApiVariant.PLAIN,))
def expand_flex_factor(declaration: Declaration, options: CompileOptions) -> Expr:
    value = _single_value(declaration)
    if not isinstance(value, Number):
        raise _unexpected(declaration, value)
    factor = FloatLiteral(value=float(value.digits), range=value.range)
    return call(to_call_name(declaration.name), declaration.name_range, declaration.range, *positional(factor))


@expander("font-weight", variants=(ApiVariant.PLAIN,))
def expand_font_weight(declaration: Declaration, options: CompileOptions) -> Expr:
    value = _single_value(declaration)
    if isinstance(value, Ident):
        arg = translate_value(value, options)
    elif isinstance(value, Number):
        arg = VariantConstructor(tag="num", payload=number_literal(value.digits, value.range), range=value.range)
    else:
        raise _unexpected(declaration, value)
    return call(to_call_name(declaration.name), declaration.name_range, declaration.range, *positional(arg))


@expander("padding", "margin")
def expand_box(declaration: Declaration, options: CompileOptions) -> Expr:
    values = declaration.values
    if len(values) > 4:
        raise CompileError(
            COMPILE_INVALID_ARITY,
            f"Property `{declaration.name}` cannot have more than 4 values",
            values[4].range,
        )
    labels = _BOX_LABELS.get(len(values))
    if labels is None:
        return expand_standard(declaration, options)
    return _labeled(declaration, options, labels)


@expander(
    "border-top-left-radius",
    "border-top-right-radius",
    "border-bottom-left-radius",
    "border-bottom-right-radius",
    variants=(ApiVariant.TYPED,),
)
def expand_corner_radius(declaration: Declaration, options: CompileOptions) -> Expr:
    if len(declaration.values) == 2:
        return _labeled(declaration, options, ("v", "h"))
    return expand_standard(declaration, options)


@expander("background-position", "transform-origin", variants=(ApiVariant.TYPED,))
def expand_position(declaration: Declaration, options: CompileOptions) -> Expr:
    if len(declaration.values) == 2:
        return _labeled(declaration, options, ("h", "v"))
    return expand_standard(declaration, options)


@expander("flex", variants=(ApiVariant.TYPED,))
def expand_flex(declaration: Declaration, options: CompileOptions) -> Expr:
    if len(declaration.values) == 3:
        return _labeled(declaration, options, ("grow", "shrink", None))
    return expand_standard(declaration, options)


@expander("border", "outline", variants=(ApiVariant.TYPED,))
def expand_border_pair(declaration: Declaration, options: CompileOptions) -> Expr:
    if len(declaration.values) != 2:
        return expand_standard(declaration, options)
    spec = ShorthandSpec(
        property_name=declaration.name,
        slots=BORDER_PAIR.slots,
        emit_order=BORDER_PAIR.emit_order,
    )
    filled = assign_slots(spec, declaration.values)
    name = overloaded_name(to_call_name(declaration.name), 2)
    return call(name, declaration.name_range, declaration.range, *render_slots(spec, filled, options))


@expander("transform", variants=(ApiVariant.PLAIN,))
def expand_transform(declaration: Declaration, options: CompileOptions) -> Expr:
    if len(declaration.values) <= 1:
        return expand_standard(declaration, options)
    items = [translate_value(value, options) for value in declaration.values]
    return _list_call(declaration, items)


__all__ = [
    "ANIMATION",
    "BORDER_PAIR",
    "BOX_SHADOW",
    "EXPANDERS",
    "TEXT_SHADOW",
    "TRANSITION",
    "expand_declaration",
    "expand_standard",
    "expander",
]
