"""Ordered slot assignment for shorthand properties.

A shorthand like `box-shadow: inset 2px 2px 4px red` lists values whose role is
only known from their shape. A `ShorthandSpec` lists slots in matching order;
each raw value goes to the first slot whose predicate accepts it and that still
has room. Fallback slots (colors, names) accept nearly any identifier, so a
value that already matched a full slot never falls through to one: a second
`inset` is too many insets, not a color. Arguments are then emitted in the
spec's `emit_order`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from stylecall.compiler.options import CompileOptions
from stylecall.compiler.values import translate_value
from stylecall.diagnostics import COMPILE_TOO_MANY_VALUES, COMPILE_UNEXPECTED_VALUE, CompileError
from stylecall.expr import Argument, BoolLiteral, Expr, StringLiteral
from stylecall.syntax import ComponentValue, Ident, String

type ValuePredicate = Callable[[ComponentValue], bool]


class SlotRender(StrEnum):
    VALUE = "value"
    NAME = "name"
    FLAG = "flag"


@dataclass(frozen=True, slots=True)
class Slot:
    """Argument slot; its capacity is the number of labels.

    A `None` label makes the argument positional. A `fallback` slot only takes
    values that matched no earlier slot.
    """

    key: str
    predicate: ValuePredicate
    labels: tuple[str | None, ...]
    render: SlotRender = SlotRender.VALUE
    noun: str = "such"
    fallback: bool = False

    @property
    def capacity(self) -> int:
        return len(self.labels)


@dataclass(frozen=True, slots=True)
class ShorthandSpec:
    property_name: str
    slots: tuple[Slot, ...]
    emit_order: tuple[str, ...]

    def slot(self, key: str) -> Slot:
        for slot in self.slots:
            if slot.key == key:
                return slot
        raise KeyError(key)


def assign_slots(spec: ShorthandSpec, values: Sequence[ComponentValue]) -> dict[str, list[ComponentValue]]:
    filled: dict[str, list[ComponentValue]] = {slot.key: [] for slot in spec.slots}

    for value in values:
        full_match: Slot | None = None
        target: Slot | None = None
        for slot in spec.slots:
            if not slot.predicate(value):
                continue
            if slot.fallback and full_match is not None:
                continue
            if len(filled[slot.key]) < slot.capacity:
                target = slot
                break
            if full_match is None:
                full_match = slot

        if target is not None:
            filled[target.key].append(value)
            continue
        if full_match is not None:
            raise CompileError(
                COMPILE_TOO_MANY_VALUES,
                f"`{spec.property_name}` cannot have more than {full_match.capacity} {full_match.noun} values",
                value.range,
            )
        raise CompileError(
            COMPILE_UNEXPECTED_VALUE,
            f"Unexpected value for property `{spec.property_name}`",
            value.range,
        )

    return filled


def render_slots(
    spec: ShorthandSpec,
    filled: dict[str, list[ComponentValue]],
    options: CompileOptions,
) -> tuple[Argument, ...]:
    args: list[Argument] = []
    for key in spec.emit_order:
        slot = spec.slot(key)
        for label, value in zip(slot.labels, filled[key]):
            args.append(Argument(label=label, value=_render(slot, value, options)))
    return tuple(args)


def _render(slot: Slot, value: ComponentValue, options: CompileOptions) -> Expr:
    if slot.render == SlotRender.FLAG:
        return BoolLiteral(value=True, range=value.range)
    if slot.render == SlotRender.NAME:
        if isinstance(value, Ident):
            return StringLiteral(value=value.name, range=value.range)
        if isinstance(value, String):
            return StringLiteral(value=value.value, range=value.range)
    return translate_value(value, options)


__all__ = [
    "ShorthandSpec",
    "Slot",
    "SlotRender",
    "ValuePredicate",
    "assign_slots",
    "render_slots",
]
