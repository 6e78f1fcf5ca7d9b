"""Rule assembly: style rules, `@keyframes`, and whole stylesheets."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from stylecall.compiler.declarations import expand_declaration
from stylecall.compiler.options import CompileOptions
from stylecall.compiler.values import number_literal
from stylecall.diagnostics import (
    COMPILE_INVALID_KEYFRAME_SELECTOR,
    COMPILE_NESTED_AT_RULE,
    COMPILE_UNSUPPORTED_AT_RULE,
    CompileError,
)
from stylecall.expr import (
    Call,
    Expr,
    FloatLiteral,
    IntLiteral,
    ListLiteral,
    StringLiteral,
    TupleLiteral,
    call,
    positional,
)
from stylecall.syntax import (
    AtRule,
    BracketBlock,
    ComponentValue,
    DeclarationList,
    Delim,
    Dimension,
    FloatDimension,
    Function,
    Hash,
    Ident,
    Number,
    Operator,
    ParenBlock,
    Percentage,
    String,
    StyleRule,
    Stylesheet,
    UnicodeRange,
    Uri,
)


def expand_stylesheet(stylesheet: Stylesheet, options: CompileOptions) -> ListLiteral:
    """Flatten a stylesheet into one list.

    Style rules without a selector contribute their declarations directly;
    every other rule becomes a single element.
    """
    elements: list[Expr] = []
    for rule in stylesheet.rules:
        if isinstance(rule, StyleRule) and rule.has_empty_prelude:
            elements.extend(expand_declaration_list(rule.block, options))
            continue
        elements.append(expand_rule(rule, options))
    return ListLiteral(elements=tuple(elements), range=stylesheet.range)


def expand_rule(rule: StyleRule | AtRule, options: CompileOptions) -> Call:
    if isinstance(rule, AtRule):
        return expand_at_rule(rule, options)
    return expand_style_rule(rule, options)


def expand_style_rule(rule: StyleRule, options: CompileOptions) -> Call:
    selector = StringLiteral(value=selector_text(rule.prelude), range=rule.prelude_range)
    block = ListLiteral(elements=tuple(expand_declaration_list(rule.block, options)), range=rule.range)
    return call(options.selector_callee, rule.prelude_range, rule.range, *positional(selector, block))


def expand_declaration_list(block: DeclarationList, options: CompileOptions) -> list[Expr]:
    expressions: list[Expr] = []
    for item in block.items:
        if isinstance(item, AtRule):
            expressions.append(expand_at_rule(item, options))
        else:
            expressions.append(expand_declaration(item, options))
    return expressions


def expand_at_rule(rule: AtRule, options: CompileOptions) -> Call:
    if rule.name.lower() != "keyframes" or not options.is_plain:
        raise CompileError(
            COMPILE_UNSUPPORTED_AT_RULE,
            f"At-rule `@{rule.name}` not supported",
            rule.name_range,
        )
    if not isinstance(rule.block, Stylesheet):
        raise CompileError(
            COMPILE_UNSUPPORTED_AT_RULE,
            "`@keyframes` expects a block of keyframe rules",
            rule.range,
        )

    frames: list[Expr] = []
    for child in rule.block.rules:
        if isinstance(child, AtRule):
            raise CompileError(
                COMPILE_NESTED_AT_RULE,
                f"Nested at-rule `@{child.name}` inside `@keyframes`",
                child.prelude_range,
            )
        progress = keyframe_progress(child)
        declarations = ListLiteral(elements=tuple(expand_declaration_list(child.block, options)), range=child.range)
        frames.append(TupleLiteral(elements=(progress, declarations), range=child.range))

    keyframes = ListLiteral(elements=tuple(frames), range=rule.block.range)
    return call("keyframes", rule.name_range, rule.range, *positional(keyframes))


def keyframe_progress(rule: StyleRule) -> IntLiteral | FloatLiteral:
    """`from`/`0` -> 0, `to` -> 100, `n%` -> n."""
    if len(rule.prelude) == 1:
        value = rule.prelude[0]
        match value:
            case Percentage(digits=digits, range=range):
                return number_literal(digits, range)
            case Ident(name="from", range=range) | Number(digits="0", range=range):
                return IntLiteral(value=0, range=range)
            case Ident(name="to", range=range):
                return IntLiteral(value=100, range=range)
    raise CompileError(
        COMPILE_INVALID_KEYFRAME_SELECTOR,
        "Keyframe selector must be a percentage, `from`, `to` or `0`",
        rule.prelude_range,
    )


@dataclass(slots=True)
class _TextFrame:
    values: Iterator[ComponentValue]
    opener: str = ""
    closer: str = ""
    parts: list[str] = field(default_factory=list)
    after_colon: bool = False


def selector_text(prelude: tuple[ComponentValue, ...]) -> str:
    """Join selector tokens with single spaces; a `:` sticks to both neighbours.

    Function and block tokens are rendered through an explicit frame stack.
    """
    root = _TextFrame(values=iter(prelude))
    stack = [root]
    while stack:
        frame = stack[-1]
        value = next(frame.values, None)
        if value is None:
            stack.pop()
            if stack:
                _append(stack[-1], f"{frame.opener}{''.join(frame.parts)}{frame.closer}", colon=False)
            continue

        match value:
            case Function(name=name, params=params):
                stack.append(_TextFrame(values=iter(params), opener=f"{name}(", closer=")"))
            case ParenBlock(values=values):
                stack.append(_TextFrame(values=iter(values), opener="(", closer=")"))
            case BracketBlock(values=values):
                stack.append(_TextFrame(values=iter(values), opener="[", closer="]"))
            case Delim(char=char):
                _append(frame, char, colon=value.is_colon)
            case _:
                _append(frame, _token_text(value), colon=False)

    return "".join(root.parts)


def _append(frame: _TextFrame, piece: str, *, colon: bool) -> None:
    if frame.parts and not colon and not frame.after_colon:
        frame.parts.append(" ")
    frame.parts.append(piece)
    frame.after_colon = colon


def _token_text(value: ComponentValue) -> str:
    match value:
        case Ident(name=name):
            return name
        case Hash(hex=hex_digits):
            return f"#{hex_digits}"
        case String(value=text):
            return f'"{text}"'
        case Number(digits=digits):
            return digits
        case Percentage(digits=digits):
            return f"{digits}%"
        case Dimension(number=number, unit=unit) | FloatDimension(number=number, unit=unit):
            return f"{number}{unit}"
        case Uri(value=text):
            return f"url({text})"
        case Operator(op=op):
            return op
        case UnicodeRange(text=text):
            return text
    return ""


__all__ = [
    "expand_at_rule",
    "expand_declaration_list",
    "expand_rule",
    "expand_style_rule",
    "expand_stylesheet",
    "keyframe_progress",
    "selector_text",
]
