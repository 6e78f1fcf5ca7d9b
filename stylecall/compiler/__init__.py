"""CSS grammar tree -> call expression compiler."""

from stylecall.compiler.declarations import EXPANDERS, expand_declaration, expand_standard
from stylecall.compiler.grouping import ParameterGroup, group_parameters
from stylecall.compiler.naming import (
    is_overloaded,
    is_variant_constant,
    overloaded_name,
    resolve_call_name,
    to_call_name,
)
from stylecall.compiler.options import ApiVariant, CompileOptions
from stylecall.compiler.rules import (
    expand_at_rule,
    expand_declaration_list,
    expand_rule,
    expand_style_rule,
    expand_stylesheet,
    keyframe_progress,
    selector_text,
)
from stylecall.compiler.slots import ShorthandSpec, Slot, SlotRender, assign_slots, render_slots
from stylecall.compiler.values import is_integer_unit, number_literal, translate_value

__all__ = [
    "EXPANDERS",
    "ApiVariant",
    "CompileOptions",
    "ParameterGroup",
    "ShorthandSpec",
    "Slot",
    "SlotRender",
    "assign_slots",
    "expand_at_rule",
    "expand_declaration",
    "expand_declaration_list",
    "expand_rule",
    "expand_standard",
    "expand_style_rule",
    "expand_stylesheet",
    "group_parameters",
    "is_integer_unit",
    "is_overloaded",
    "is_variant_constant",
    "keyframe_progress",
    "number_literal",
    "overloaded_name",
    "render_slots",
    "resolve_call_name",
    "selector_text",
    "to_call_name",
    "translate_value",
]
