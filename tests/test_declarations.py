import pytest

from stylecall.compiler import (
    EXPANDERS,
    ApiVariant,
    CompileOptions,
    expand_declaration,
    expand_standard,
)
from stylecall.diagnostics import (
    COMPILE_INVALID_ARITY,
    COMPILE_TOO_MANY_VALUES,
    COMPILE_UNEXPECTED_VALUE,
    CompileError,
)
from stylecall.expr import (
    BoolLiteral,
    Call,
    FloatLiteral,
    Identifier,
    IntLiteral,
    ListLiteral,
    StringLiteral,
    VariantConstructor,
)
from stylecall.text import TextRange
from tests._builders import TreeBuilder
from tests._debug import debug_dump_expression
from tests._shared_cases import CALLEE_CASES, DeclarationCase, case_id

PLAIN = CompileOptions.for_variant(ApiVariant.PLAIN)
TYPED = CompileOptions.for_variant(ApiVariant.TYPED)


def _expand(declaration, options: CompileOptions) -> Call:
    expr = expand_declaration(declaration, options)
    debug_dump_expression(declaration.name, expr)
    assert isinstance(expr, Call)
    return expr


@pytest.mark.parametrize("case", CALLEE_CASES, ids=case_id)
def test_callee_names_per_variant(case: DeclarationCase) -> None:
    declaration = case.build(TreeBuilder())

    assert _expand(declaration, PLAIN).name == case.plain_callee
    assert _expand(declaration, TYPED).name == case.typed_callee


@pytest.mark.parametrize("case", CALLEE_CASES, ids=case_id)
def test_declaration_call_spans_the_declaration(case: DeclarationCase) -> None:
    declaration = case.build(TreeBuilder(5))

    for options in (PLAIN, TYPED):
        expr = _expand(declaration, options)
        assert expr.range == declaration.range
        assert expr.callee.range == declaration.name_range


def test_standard_path_translates_values_positionally() -> None:
    b = TreeBuilder()
    declaration = b.decl("border-spacing", lambda: [b.px("1"), b.em("2")])

    expr = expand_standard(declaration, TYPED)

    assert expr.name == "borderSpacing2"
    assert expr.labels == (None, None)
    first, second = expr.values
    assert isinstance(first, Call) and first.name == "px"
    assert isinstance(second, Call) and second.name == "em"
    assert isinstance(second.values[0], FloatLiteral)


def test_registry_keys_are_property_and_variant() -> None:
    assert ("animation", ApiVariant.PLAIN) in EXPANDERS
    assert ("animation", ApiVariant.TYPED) in EXPANDERS
    assert ("z-index", ApiVariant.TYPED) in EXPANDERS
    assert ("z-index", ApiVariant.PLAIN) not in EXPANDERS
    assert ("transform", ApiVariant.TYPED) not in EXPANDERS


def test_padding_two_values_are_vertical_and_horizontal() -> None:
    b = TreeBuilder()
    declaration = b.decl("padding", lambda: [b.px("10"), b.px("20")])

    expr = _expand(declaration, PLAIN)

    assert expr.name == "padding2"
    assert expr.range == TextRange(0, 20)
    assert expr.callee.range == TextRange(0, 7)
    assert expr.labels == ("v", "h")
    vertical, horizontal = expr.values
    assert isinstance(vertical, Call) and vertical.values == (IntLiteral(value=10, range=TextRange(9, 11)),)
    assert isinstance(horizontal, Call) and horizontal.values == (IntLiteral(value=20, range=TextRange(14, 16)),)


@pytest.mark.parametrize(
    ("count", "labels"),
    [
        (3, ("top", "h", "bottom")),
        (4, ("top", "right", "bottom", "left")),
    ],
)
def test_margin_labels_by_value_count(count: int, labels: tuple[str, ...]) -> None:
    b = TreeBuilder()
    declaration = b.decl("margin", lambda: [b.px(str(index)) for index in range(1, count + 1)])

    for options in (PLAIN, TYPED):
        expr = _expand(declaration, options)
        assert expr.name == f"margin{count}"
        assert expr.labels == labels


def test_single_value_padding_is_unsuffixed_and_unlabeled() -> None:
    b = TreeBuilder()
    declaration = b.decl("padding", lambda: [b.number("0")])

    expr = _expand(declaration, PLAIN)

    assert expr.name == "padding"
    assert expr.labels == (None,)
    assert expr.values == (Identifier(name="zero", range=declaration.values[0].range),)


def test_padding_with_five_values_fails_at_fifth() -> None:
    b = TreeBuilder()
    declaration = b.decl("padding", lambda: [b.px(str(index)) for index in range(5)])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, TYPED)

    assert excinfo.value.spec is COMPILE_INVALID_ARITY
    assert excinfo.value.range == declaration.values[4].range


def test_transition_emits_property_name_then_times() -> None:
    b = TreeBuilder()
    declaration = b.decl("transition", lambda: [b.ident("color"), b.s("0.3"), b.ident("ease")])

    expr = _expand(declaration, PLAIN)

    assert expr.name == "transitions"
    (items,) = expr.values
    assert isinstance(items, ListLiteral)
    (item,) = items.elements
    assert isinstance(item, Call)
    assert item.name == "transition"
    assert item.range == declaration.values[0].range.cover(declaration.values[2].range)
    assert item.labels == (None, "duration", "timingFunction")
    name, duration, timing = item.values
    assert name == StringLiteral(value="color", range=declaration.values[0].range)
    assert isinstance(duration, Call) and duration.name == "s"
    assert timing == Identifier(name="ease", range=declaration.values[2].range)


def test_transition_groups_become_separate_items() -> None:
    b = TreeBuilder()
    declaration = b.decl(
        "transition",
        lambda: [
            b.ident("opacity"),
            b.ms("200"),
            b.comma(),
            b.ident("transform"),
            b.s("1"),
            b.ms("50"),
            b.ident("linear"),
        ],
    )

    expr = _expand(declaration, TYPED)

    (items,) = expr.values
    assert isinstance(items, ListLiteral)
    first, second = items.elements
    assert isinstance(first, Call) and isinstance(second, Call)
    assert first.labels == (None, "duration")
    assert second.labels == (None, "duration", "delay", "timingFunction")
    assert isinstance(second.values[2], Call)
    assert second.values[2].values[0] == IntLiteral(value=50, range=TextRange.at(declaration.values[5].range.start, 2))


def test_transition_third_time_is_too_many() -> None:
    b = TreeBuilder()
    declaration = b.decl("transition", lambda: [b.s("1"), b.s("2"), b.s("3")])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, PLAIN)

    assert excinfo.value.spec is COMPILE_TOO_MANY_VALUES
    assert excinfo.value.range == declaration.values[2].range
    assert "cannot have more than 2 time values" in excinfo.value.message


def test_animation_slots_and_name() -> None:
    b = TreeBuilder()
    declaration = b.decl(
        "animation",
        lambda: [b.ident("spin"), b.s("1"), b.ident("linear"), b.ident("infinite"), b.ident("alternate")],
    )

    expr = _expand(declaration, PLAIN)

    assert expr.name == "animations"
    (items,) = expr.values
    (item,) = items.elements
    assert isinstance(item, Call)
    assert item.name == "animation"
    assert item.labels == ("duration", "timingFunction", "iterationCount", "direction", None)
    assert item.values[-1] == StringLiteral(value="spin", range=declaration.values[0].range)


def test_animation_second_name_is_too_many() -> None:
    b = TreeBuilder()
    declaration = b.decl("animation", lambda: [b.ident("spin"), b.string("fade")])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, TYPED)

    assert excinfo.value.spec is COMPILE_TOO_MANY_VALUES
    assert excinfo.value.range == declaration.values[1].range


def test_animation_unexpected_value() -> None:
    b = TreeBuilder()
    declaration = b.decl("animation", lambda: [b.ident("spin"), b.pct("10")])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, PLAIN)

    assert excinfo.value.spec is COMPILE_UNEXPECTED_VALUE
    assert excinfo.value.range == declaration.values[1].range
    assert excinfo.value.message == "Unexpected value for property `animation`"


def test_box_shadow_inset_is_emitted_after_lengths() -> None:
    b = TreeBuilder()
    declaration = b.decl(
        "box-shadow",
        lambda: [b.ident("inset"), b.px("2"), b.px("2"), b.px("4"), b.ident("red")],
    )

    expr = _expand(declaration, PLAIN)

    (items,) = expr.values
    (item,) = items.elements
    assert isinstance(item, Call)
    assert item.name == "boxShadow"
    assert item.labels == ("x", "y", "blur", "inset", None)
    assert item.values[3] == BoolLiteral(value=True, range=declaration.values[0].range)
    assert item.values[4] == Identifier(name="red", range=declaration.values[4].range)


def test_box_shadow_fifth_length_is_too_many() -> None:
    b = TreeBuilder()
    declaration = b.decl("box-shadow", lambda: [b.px(str(index)) for index in range(1, 6)])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, PLAIN)

    assert excinfo.value.spec is COMPILE_TOO_MANY_VALUES
    assert excinfo.value.range == declaration.values[4].range
    assert "cannot have more than 4 length values" in excinfo.value.message


def test_box_shadow_second_inset_is_too_many_not_a_color() -> None:
    b = TreeBuilder()
    declaration = b.decl("box-shadow", lambda: [b.ident("inset"), b.ident("inset"), b.px("2"), b.px("2")])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, PLAIN)

    assert excinfo.value.spec is COMPILE_TOO_MANY_VALUES
    assert excinfo.value.range == declaration.values[1].range
    assert "cannot have more than 1 inset values" in excinfo.value.message


def test_transition_second_timing_function_is_not_a_property_name() -> None:
    b = TreeBuilder()
    declaration = b.decl("transition", lambda: [b.ident("ease-in"), b.ident("ease-out"), b.s("1")])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, TYPED)

    assert excinfo.value.spec is COMPILE_TOO_MANY_VALUES
    assert excinfo.value.range == declaration.values[1].range
    assert "cannot have more than 1 timing function values" in excinfo.value.message


def test_animation_second_timing_function_is_not_a_keyframes_name() -> None:
    b = TreeBuilder()
    declaration = b.decl("animation", lambda: [b.ident("linear"), b.s("1"), b.ident("ease")])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, PLAIN)

    assert excinfo.value.spec is COMPILE_TOO_MANY_VALUES
    assert excinfo.value.range == declaration.values[2].range


def test_typed_border_pair_second_width_is_not_a_color() -> None:
    b = TreeBuilder()
    declaration = b.decl("border", lambda: [b.px("1"), b.ident("thick")])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, TYPED)

    assert excinfo.value.spec is COMPILE_TOO_MANY_VALUES
    assert excinfo.value.range == declaration.values[1].range


def test_box_shadow_empty_group_is_an_error() -> None:
    b = TreeBuilder()
    declaration = b.decl("box-shadow", lambda: [b.px("1"), b.px("1"), b.comma(), b.comma(), b.px("2"), b.px("2")])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, PLAIN)

    assert excinfo.value.spec is COMPILE_INVALID_ARITY
    assert excinfo.value.range == TextRange.empty(declaration.values[3].range.start)


def test_text_shadow_lengths_and_color() -> None:
    b = TreeBuilder()
    declaration = b.decl("text-shadow", lambda: [b.number("0"), b.px("1"), b.hash("000")])

    expr = _expand(declaration, TYPED)

    assert expr.name == "textShadows"
    (items,) = expr.values
    (item,) = items.elements
    assert isinstance(item, Call)
    assert item.labels == ("x", "y", None)
    assert item.values[0] == Identifier(name="zero", range=declaration.values[0].range)


def test_font_family_plain_is_one_combined_string() -> None:
    b = TreeBuilder()
    declaration = b.decl(
        "font-family",
        lambda: [b.string("Helvetica Neue"), b.comma(), b.ident("Open"), b.ident("Sans"), b.comma(), b.ident("serif")],
    )

    expr = _expand(declaration, PLAIN)

    assert expr.name == "fontFamily"
    (family,) = expr.values
    assert isinstance(family, StringLiteral)
    assert family.value == '"Helvetica Neue", Open Sans, serif'
    assert family.range == declaration.values[0].range.cover(declaration.values[-1].range)


def test_font_family_typed_is_list_of_family_calls() -> None:
    b = TreeBuilder()
    declaration = b.decl("font-family", lambda: [b.string("Helvetica Neue"), b.comma(), b.ident("serif")])

    expr = _expand(declaration, TYPED)

    assert expr.name == "fontFamilies"
    (families,) = expr.values
    assert isinstance(families, ListLiteral)
    first, second = families.elements
    assert isinstance(first, Call) and isinstance(second, Call)
    assert first.name == second.name == "fontFamily"
    assert first.values == (StringLiteral(value="Helvetica Neue", range=declaration.values[0].range),)
    assert second.values == (StringLiteral(value="serif", range=declaration.values[2].range),)


def test_font_family_rejects_non_words() -> None:
    b = TreeBuilder()
    declaration = b.decl("font-family", lambda: [b.ident("serif"), b.number("3")])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, PLAIN)

    assert excinfo.value.spec is COMPILE_UNEXPECTED_VALUE
    assert excinfo.value.range == declaration.values[1].range


def test_z_index_typed_wraps_numbers_and_passes_idents() -> None:
    b = TreeBuilder()
    number = b.decl("z-index", lambda: [b.number("10")])
    auto = b.decl("z-index", lambda: [b.ident("auto")])

    wrapped = _expand(number, TYPED)
    assert wrapped.name == "zIndex"
    (inner,) = wrapped.values
    assert isinstance(inner, Call) and inner.name == "int"
    assert inner.values == (IntLiteral(value=10, range=number.values[0].range),)

    assert _expand(auto, TYPED).values == (Identifier(name="auto", range=auto.values[0].range),)
    assert _expand(number, PLAIN).values == (IntLiteral(value=10, range=number.values[0].range),)


def test_flex_factor_plain_is_float() -> None:
    b = TreeBuilder()
    declaration = b.decl("flex-shrink", lambda: [b.number("2")])

    assert _expand(declaration, PLAIN).values == (FloatLiteral(value=2.0, range=declaration.values[0].range),)
    assert _expand(declaration, TYPED).values == (IntLiteral(value=2, range=declaration.values[0].range),)


def test_flex_factor_rejects_two_values() -> None:
    b = TreeBuilder()
    declaration = b.decl("flex-grow", lambda: [b.number("1"), b.number("2")])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, PLAIN)

    assert excinfo.value.spec is COMPILE_INVALID_ARITY
    assert excinfo.value.range == declaration.range


def test_font_weight_plain_number_is_tagged() -> None:
    b = TreeBuilder()
    number = b.decl("font-weight", lambda: [b.number("600")])
    bold = b.decl("font-weight", lambda: [b.ident("bold")])

    (weight,) = _expand(number, PLAIN).values
    assert weight == VariantConstructor(
        tag="num",
        payload=IntLiteral(value=600, range=number.values[0].range),
        range=number.values[0].range,
    )
    (keyword,) = _expand(bold, PLAIN).values
    assert keyword == VariantConstructor(tag="bold", payload=None, range=bold.values[0].range)


def test_typed_positional_pairs_are_labeled() -> None:
    b = TreeBuilder()
    origin = b.decl("transform-origin", lambda: [b.pct("50"), b.number("0")])
    corner = b.decl("border-top-left-radius", lambda: [b.px("4"), b.px("8")])
    flex = b.decl("flex", lambda: [b.number("1"), b.number("0"), b.ident("auto")])

    assert _expand(origin, TYPED).labels == ("h", "v")
    assert _expand(origin, TYPED).name == "transformOrigin2"
    assert _expand(corner, TYPED).labels == ("v", "h")
    assert _expand(flex, TYPED).labels == ("grow", "shrink", None)
    assert _expand(flex, PLAIN).labels == (None, None, None)
    assert _expand(flex, PLAIN).name == "flex"


def test_typed_border_pair_labels_by_shape() -> None:
    b = TreeBuilder()
    declaration = b.decl("outline", lambda: [b.ident("dashed"), b.hash("f00")])

    expr = _expand(declaration, TYPED)

    assert expr.name == "outline2"
    assert expr.labels == ("style", "color")


def test_typed_border_pair_rejects_two_colors() -> None:
    b = TreeBuilder()
    declaration = b.decl("border", lambda: [b.hash("f00"), b.hash("0f0")])

    with pytest.raises(CompileError) as excinfo:
        expand_declaration(declaration, TYPED)

    assert excinfo.value.spec is COMPILE_TOO_MANY_VALUES
    assert "`border` cannot have more than 1 color values" in excinfo.value.message
    assert excinfo.value.range == declaration.values[1].range


def test_plain_transform_lists_multiple_functions() -> None:
    b = TreeBuilder()
    declaration = b.decl(
        "transform",
        lambda: [b.func("rotate", lambda: [b.deg("45")]), b.func("scale", lambda: [b.number("2")])],
    )

    plain = _expand(declaration, PLAIN)
    assert plain.name == "transforms"
    (items,) = plain.values
    assert isinstance(items, ListLiteral)
    assert [item.name for item in items.elements] == ["rotate", "scale"]

    typed = _expand(declaration, TYPED)
    assert typed.name == "transform2"
    assert typed.labels == (None, None)


def test_property_name_lookup_ignores_case() -> None:
    b = TreeBuilder()
    declaration = b.decl("Box-Shadow", lambda: [b.px("1"), b.px("1")])

    assert _expand(declaration, PLAIN).name == "boxShadows"
