"""Indented debug rendering of expression trees."""

from __future__ import annotations

from stylecall.expr.model import (
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
)


def dump_expression(expr: Expr, *, with_ranges: bool = True) -> str:
    """Render one node per line, children indented under their parent.

    Nodes are visited from an explicit stack, so trees of any depth can be dumped.
    """
    lines: list[str] = []

    def span(node: Expr) -> str:
        if not with_ranges:
            return ""
        return f" @{node.range.as_tuple()}"

    stack: list[tuple[Expr, int, str | None]] = [(expr, 0, None)]
    while stack:
        node, depth, label = stack.pop()
        indent = "  " * depth
        prefix = f"{indent}{label}: " if label is not None else indent
        children: list[tuple[Expr, int, str | None]] = []
        match node:
            case Identifier(name=name):
                lines.append(f"{prefix}Identifier {name}{span(node)}")
            case IntLiteral(value=value) | FloatLiteral(value=value) | BoolLiteral(value=value):
                lines.append(f"{prefix}{type(node).__name__} {value!r}{span(node)}")
            case StringLiteral(value=value):
                lines.append(f"{prefix}StringLiteral {value!r}{span(node)}")
            case Call(callee=callee, args=args):
                lines.append(f"{prefix}Call {callee.name}{span(node)}")
                children = [(arg.value, depth + 1, arg.label) for arg in args]
            case ListLiteral(elements=elements) | TupleLiteral(elements=elements):
                lines.append(f"{prefix}{type(node).__name__}{span(node)}")
                children = [(element, depth + 1, None) for element in elements]
            case VariantConstructor(tag=tag, payload=payload):
                lines.append(f"{prefix}Variant {tag}{span(node)}")
                if payload is not None:
                    children = [(payload, depth + 1, None)]
        stack.extend(reversed(children))

    return "\n".join(lines)


__all__ = ["dump_expression"]
