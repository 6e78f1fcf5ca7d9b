"""Translate single component values into call expressions.

Nested function values are translated with an explicit stack of generator
frames: a rule that needs a child translated yields a `_Request` and receives the
child's expression back, so input nesting depth never reaches the interpreter's
recursion limit.
"""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass
from typing import Final

from stylecall.compiler.classify import (
    is_angle,
    is_color,
    is_comma,
    is_percentage_or_zero,
)
from stylecall.compiler.grouping import ParameterGroup, group_parameters
from stylecall.compiler.naming import is_variant_constant, to_call_name
from stylecall.compiler.options import ApiVariant, CompileOptions
from stylecall.diagnostics import (
    COMPILE_GRADIENT_DIRECTION,
    COMPILE_INVALID_COLOR_FUNCTION,
    COMPILE_MALFORMED_COLOR_STOP,
    COMPILE_UNSUPPORTED_VALUE,
    CompileError,
)
from stylecall.expr import (
    Argument,
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
from stylecall.syntax import (
    BracketBlock,
    ComponentValue,
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
    String,
    UnicodeRange,
    Uri,
)
from stylecall.text import TextRange

ZERO_NAME: Final[str] = "zero"

_LINEAR_GRADIENTS: Final[frozenset[str]] = frozenset({"linear-gradient", "repeating-linear-gradient"})
_RADIAL_GRADIENTS: Final[frozenset[str]] = frozenset({"radial-gradient", "repeating-radial-gradient"})
_DIRECTION_ANGLES: Final[dict[str, int]] = {"bottom": 180, "top": 0, "right": 90, "left": 270}
_DEFAULT_GRADIENT_ANGLE: Final[int] = 180


@dataclass(frozen=True, slots=True)
class _Request:
    value: ComponentValue
    zero_literal: bool = False


type _Frame = Generator[_Request, Expr, Expr]


def translate_value(
    value: ComponentValue,
    options: CompileOptions,
    *,
    zero_literal: bool = False,
) -> Expr:
    """Translate one component value.

    `zero_literal` renders a bare `0` as the integer literal `0` instead of the
    `zero` reference; only generic function parameter lists ask for it.
    """
    step = _translate_step(value, options, zero_literal)
    if not isinstance(step, Generator):
        return step

    stack: list[_Frame] = [step]
    result: Expr | None = None
    while stack:
        try:
            request = stack[-1].send(result)  # type: ignore[arg-type]
        except StopIteration as stop:
            stack.pop()
            result = stop.value
            continue

        child = _translate_step(request.value, options, request.zero_literal)
        if isinstance(child, Generator):
            stack.append(child)
            result = None
        else:
            result = child

    assert result is not None
    return result


def is_integer_unit(unit: str, kind: DimensionKind, variant: ApiVariant) -> bool:
    """Literal kind of a float-tagged dimension; depends on unit and variant only."""
    unit = unit.lower()
    if unit == "ms" and kind == DimensionKind.TIME:
        return True
    if unit == "px":
        return True
    return unit == "pt" and variant == ApiVariant.PLAIN


def number_literal(digits: str, range: TextRange) -> IntLiteral | FloatLiteral:
    if _has_fraction(digits):
        return FloatLiteral(value=float(digits), range=range)
    return IntLiteral(value=int(digits), range=range)


def _has_fraction(digits: str) -> bool:
    return "." in digits or "e" in digits.lower()


def _translate_step(
    value: ComponentValue,
    options: CompileOptions,
    zero_literal: bool,
) -> Expr | _Frame:
    match value:
        case Percentage():
            return _percentage(value)
        case Ident(name=name, range=range):
            return translate_ident(name, range, options)
        case String(value=text, range=range):
            return StringLiteral(value=text, range=range)
        case Uri(value=text, range=range):
            callee_range, _ = range.split_at(len("url"))
            return call("url", callee_range, range, *positional(StringLiteral(value=text, range=range)))
        case Hash(hex=hex_digits, range=range):
            callee_range, digits_range = range.split_at(len("#"))
            return call("hex", callee_range, range, *positional(StringLiteral(value=hex_digits, range=digits_range)))
        case Number(digits=digits, range=range):
            if digits == "0":
                if zero_literal:
                    return IntLiteral(value=0, range=range)
                return Identifier(name=ZERO_NAME, range=range)
            return number_literal(digits, range)
        case FloatDimension(number=number, unit=unit, kind=kind, range=range):
            integral = is_integer_unit(unit, kind, options.variant)
            return _dimension(number, unit, range, integral=integral)
        case Dimension(number=number, unit=unit, range=range):
            return _dimension(number, unit, range, integral=not _has_fraction(number))
        case Function():
            return _function_frame(value, options)
        case Operator(op=op, range=range):
            raise CompileError(COMPILE_UNSUPPORTED_VALUE, f"Unsupported operator `{op}`", range)
        case Delim(char=char, range=range):
            raise CompileError(COMPILE_UNSUPPORTED_VALUE, f"Unsupported delimiter `{char}`", range)
        case UnicodeRange(text=text, range=range):
            raise CompileError(COMPILE_UNSUPPORTED_VALUE, f"Unsupported unicode range `{text}`", range)
        case ParenBlock(range=range):
            raise CompileError(COMPILE_UNSUPPORTED_VALUE, "Unsupported parenthesized block", range)
        case BracketBlock(range=range):
            raise CompileError(COMPILE_UNSUPPORTED_VALUE, "Unsupported bracketed block", range)
    raise CompileError(COMPILE_UNSUPPORTED_VALUE, f"Unsupported value {type(value).__name__}", value.range)


def translate_ident(name: str, range: TextRange, options: CompileOptions) -> Expr:
    mapped = to_call_name(name)
    if is_variant_constant(name, options.variant):
        return VariantConstructor(tag=mapped, payload=None, range=range)
    return Identifier(name=mapped, range=range)


def _percentage(value: Percentage) -> Call:
    digits_range, sign_range = value.range.split_at(len(value.digits))
    literal = FloatLiteral(value=float(value.digits), range=digits_range)
    return call("pct", sign_range, value.range, *positional(literal))


def _dimension(number: str, unit: str, range: TextRange, *, integral: bool) -> Call:
    number_range, unit_range = range.split_at(len(number))
    literal: IntLiteral | FloatLiteral
    if integral:
        literal = IntLiteral(value=int(float(number)), range=number_range)
    else:
        literal = FloatLiteral(value=float(number), range=number_range)
    return call(unit.lower(), unit_range, range, *positional(literal))


def _callee_range(function: Function) -> TextRange:
    name_range, _ = function.range.split_at(len(function.name))
    return name_range


def _function_frame(function: Function, options: CompileOptions) -> _Frame:
    name = function.name.lower()
    if name in _LINEAR_GRADIENTS:
        return _linear_gradient(function)
    if name in _RADIAL_GRADIENTS:
        return _radial_gradient(function)
    if name == "hsl":
        return _hsl(function, with_alpha=False)
    if name == "hsla":
        return _hsl(function, with_alpha=True)
    return _generic_function(function)


def _generic_function(function: Function) -> _Frame:
    args: list[Expr] = []
    for param in function.params:
        if is_comma(param):
            continue
        args.append((yield _Request(param, zero_literal=True)))
    return call(
        to_call_name(function.name),
        _callee_range(function),
        function.range,
        *positional(*args),
    )


def _linear_gradient(function: Function) -> _Frame:
    groups = group_parameters(function.params)
    if not groups or not groups[0].values:
        raise CompileError(
            COMPILE_GRADIENT_DIRECTION,
            f"Missing parameters for `{function.name}`",
            function.range,
        )

    first = groups[0]
    head = first.values[0]
    direction: Expr
    if len(first) == 1 and is_angle(head):
        direction = yield _Request(head)
        stops = groups[1:]
    elif isinstance(head, Ident) and head.name == "to":
        direction = _to_direction(first)
        stops = groups[1:]
    elif isinstance(head, Ident):
        # a bare identifier reads as a color: keep it as a stop, default the angle
        default_range = TextRange.empty(first.range.start)
        direction = _angle(_DEFAULT_GRADIENT_ANGLE, default_range, default_range)
        stops = groups
    else:
        raise CompileError(
            COMPILE_GRADIENT_DIRECTION,
            f"Unexpected first parameter for `{function.name}`",
            first.range,
        )

    stop_list = yield from _color_stops(function, stops)
    return call(
        to_call_name(function.name),
        _callee_range(function),
        function.range,
        *positional(direction, stop_list),
    )


def _radial_gradient(function: Function) -> _Frame:
    stop_list = yield from _color_stops(function, group_parameters(function.params))
    return call(
        to_call_name(function.name),
        _callee_range(function),
        function.range,
        *positional(stop_list),
    )


def _to_direction(group: ParameterGroup) -> Call:
    keyword, *rest = group.values
    if len(rest) != 1 or not isinstance(rest[0], Ident) or rest[0].name not in _DIRECTION_ANGLES:
        raise CompileError(
            COMPILE_GRADIENT_DIRECTION,
            "Expected `to top`, `to right`, `to bottom` or `to left`",
            group.range,
        )
    side = rest[0]
    return _angle(_DIRECTION_ANGLES[side.name], keyword.range, group.range, literal_range=side.range)


def _angle(
    degrees: int,
    callee_range: TextRange,
    range: TextRange,
    *,
    literal_range: TextRange | None = None,
) -> Call:
    literal = FloatLiteral(value=float(degrees), range=literal_range or range)
    return call("deg", callee_range, range, *positional(literal))


def _color_stops(function: Function, groups: list[ParameterGroup]) -> Generator[_Request, Expr, ListLiteral]:
    if not groups:
        raise CompileError(
            COMPILE_MALFORMED_COLOR_STOP,
            f"Missing color stops for `{function.name}`",
            function.range,
        )

    elements: list[Expr] = []
    for group in groups:
        values = group.values
        if len(values) == 1 and is_color(values[0]):
            elements.append((yield _Request(values[0])))
            continue
        if len(values) == 2 and is_color(values[0]) and is_percentage_or_zero(values[1]):
            color = yield _Request(values[0])
            elements.append(
                TupleLiteral(elements=(_stop_position(values[1]), color), range=group.range)
            )
            continue
        raise CompileError(
            COMPILE_MALFORMED_COLOR_STOP,
            f"Malformed color stop in `{function.name}`",
            group.range,
        )

    range = groups[0].range.cover(groups[-1].range)
    return ListLiteral(elements=tuple(elements), range=range)


def _stop_position(value: ComponentValue) -> Call:
    if isinstance(value, Percentage):
        return _percentage(value)
    # a bare `0` position reads as `0%`
    digits_range, rest = value.range.split_at(1)
    return call("pct", rest, value.range, *positional(FloatLiteral(value=0.0, range=digits_range)))


def _hsl(function: Function, *, with_alpha: bool) -> _Frame:
    values = [param for param in function.params if not is_comma(param)]
    expected = 4 if with_alpha else 3
    if len(values) != expected:
        raise CompileError(
            COMPILE_INVALID_COLOR_FUNCTION,
            f"`{function.name}` expects {expected} arguments, got {len(values)}",
            function.range,
        )

    hue, saturation, lightness, *alpha = values
    hue_expr: Expr
    if isinstance(hue, Number):
        hue_expr = number_literal(hue.digits, hue.range)
    elif is_angle(hue):
        hue_expr = yield _Request(hue)
    else:
        raise CompileError(
            COMPILE_INVALID_COLOR_FUNCTION,
            f"`{function.name}` hue must be a number or an angle",
            hue.range,
        )

    args: list[Expr] = [hue_expr]
    for component in (saturation, lightness):
        if not isinstance(component, Percentage):
            raise CompileError(
                COMPILE_INVALID_COLOR_FUNCTION,
                f"`{function.name}` saturation and lightness must be percentages",
                component.range,
            )
        args.append(FloatLiteral(value=float(component.digits), range=component.range))

    if alpha:
        args.append(_alpha(function, alpha[0]))

    return call(
        to_call_name(function.name),
        _callee_range(function),
        function.range,
        *positional(*args),
    )


def _alpha(function: Function, value: ComponentValue) -> VariantConstructor:
    if isinstance(value, Number):
        return VariantConstructor(
            tag="num",
            payload=number_literal(value.digits, value.range),
            range=value.range,
        )
    if isinstance(value, Percentage):
        return VariantConstructor(
            tag="perc",
            payload=FloatLiteral(value=float(value.digits), range=value.range),
            range=value.range,
        )
    raise CompileError(
        COMPILE_INVALID_COLOR_FUNCTION,
        f"`{function.name}` alpha must be a number or a percentage",
        value.range,
    )


__all__ = [
    "ZERO_NAME",
    "is_integer_unit",
    "number_literal",
    "translate_ident",
    "translate_value",
]
