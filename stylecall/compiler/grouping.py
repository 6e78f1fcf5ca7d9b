"""Comma-delimited parameter grouping."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from stylecall.compiler.classify import is_comma
from stylecall.syntax import ComponentValue
from stylecall.text import TextRange


@dataclass(frozen=True, slots=True)
class ParameterGroup:
    """Space-separated run of values between two commas."""

    values: tuple[ComponentValue, ...]
    range: TextRange

    def __len__(self) -> int:
        return len(self.values)


def group_parameters(values: Iterable[ComponentValue]) -> list[ParameterGroup]:
    """Split `values` on commas, keeping left-to-right order inside each group.

    Commas are consumed. A group's range starts at its first value and is widened
    by each following value. A trailing comma yields an empty group positioned at
    the comma.
    """
    groups: list[ParameterGroup] = []
    current: list[ComponentValue] = []
    current_range: TextRange | None = None
    last_end: int | None = None

    for value in values:
        last_end = value.range.end
        if is_comma(value):
            groups.append(_close(current, current_range, value.range.start))
            current = []
            current_range = None
            continue
        current.append(value)
        current_range = value.range if current_range is None else current_range.cover(value.range)

    if last_end is not None:
        groups.append(_close(current, current_range, last_end))
    return groups


def _close(
    values: list[ComponentValue],
    range: TextRange | None,
    offset: int,
) -> ParameterGroup:
    if range is None:
        range = TextRange.empty(offset)
    return ParameterGroup(values=tuple(values), range=range)


__all__ = ["ParameterGroup", "group_parameters"]
