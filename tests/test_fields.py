import struct

import pytest

from cordlgen.fields import (
    FieldSlot,
    explicit_layout_padding,
    field_into_offset_structs,
    render_const_value,
    unique_enum_constants,
)
from cordlgen.members import ConstRustField, RustField, Visibility
from cordlgen.type_flags import TypeKind


def test_padding_none_without_offsets():
    assert explicit_layout_padding([]) is None
    assert explicit_layout_padding([FieldSlot("a", None, 4)]) is None


def test_padding_covers_last_field():
    fields = [FieldSlot("a", 0, 4), FieldSlot("b", 8, 8), FieldSlot("c", None, 100)]
    padding = explicit_layout_padding(fields)
    assert padding.name == "padding"
    assert padding.field_type == "quest_hook::libil2cpp::ValueTypePadding<16>"
    assert padding.visibility is Visibility.PRIVATE
    assert padding.offset == 0


def test_padding_tie_on_offset_uses_larger_size():
    fields = [FieldSlot("a", 4, 2), FieldSlot("b", 4, 8), FieldSlot("c", 0, 4)]
    padding = explicit_layout_padding(fields)
    assert padding.field_type.endswith("<12>")


def test_offset_structs_layout():
    field = RustField("value", "u32", Visibility.PRIVATE, 12)
    packed, aligned = field_into_offset_structs(0, field)

    assert packed.packing == 1
    assert aligned.packing is None

    assert [f.name for f in packed.fields] == ["value_padding", "value"]
    assert [f.name for f in aligned.fields] == [
        "value_padding_forAlignment",
        "value_forAlignment",
    ]
    assert packed.fields[1].visibility is Visibility.PUBLIC
    assert aligned.fields[1].visibility is Visibility.PRIVATE
    assert packed.fields[1].field_type == "u32"
    assert aligned.fields[1].field_type == "u32"
    assert all(f.offset == 12 for f in packed.fields + aligned.fields)


def test_offset_structs_padding_sizes_agree():
    field = RustField("x", "u64", Visibility.PUBLIC, 40)
    packed, aligned = field_into_offset_structs(0, field)
    packed_size = packed.fields[0].field_type.removeprefix("[u8; ").removesuffix("]")
    aligned_size = aligned.fields[0].field_type.removeprefix("[u8; ").removesuffix("]")
    assert int(packed_size, 16) == int(aligned_size) == 40


def test_null_constant():
    assert render_const_value(None) == "Default::default()"


def test_bool_constants():
    assert render_const_value((TypeKind.BOOLEAN, True)) == "true"
    assert render_const_value((TypeKind.BOOLEAN, False)) == "false"


@pytest.mark.parametrize(
    "kind, suffix",
    [
        (TypeKind.U1, "u8"),
        (TypeKind.U2, "u16"),
        (TypeKind.U4, "u32"),
        (TypeKind.U8, "u64"),
        (TypeKind.I1, "i8"),
        (TypeKind.I2, "i16"),
        (TypeKind.I4, "i32"),
        (TypeKind.I8, "i64"),
    ],
)
def test_integer_constants_are_suffixed(kind, suffix):
    rendered = render_const_value((kind, 42))
    assert rendered.endswith(suffix)
    assert int(rendered[: -len(suffix)]) == 42


def test_negative_integer():
    rendered = render_const_value((TypeKind.I4, -7))
    assert int(rendered.removesuffix("i32")) == -7


@pytest.mark.parametrize("number", [0.1, 1.5, 1e20, -3.25, 2.0])
def test_f64_round_trip(number):
    rendered = render_const_value((TypeKind.R8, number))
    assert rendered.endswith("f64")
    text = rendered.removesuffix("f64")
    assert "e" not in text.lower()
    assert float(text) == number


@pytest.mark.parametrize("number", [0.1, 1.5, 3.14159, -100.0])
def test_f32_round_trip(number):
    rendered = render_const_value((TypeKind.R4, number))
    assert rendered.endswith("f32")
    expected = struct.unpack("<f", struct.pack("<f", number))[0]
    parsed = float(rendered.removesuffix("f32"))
    assert struct.unpack("<f", struct.pack("<f", parsed))[0] == expected


def test_special_floats():
    assert render_const_value((TypeKind.R8, float("inf"))) == "std::f64::INFINITY"
    assert render_const_value((TypeKind.R8, float("-inf"))) == "std::f64::NEG_INFINITY"
    assert render_const_value((TypeKind.R4, float("inf"))) == "std::f32::INFINITY"
    assert render_const_value((TypeKind.R4, float("-inf"))) == "std::f32::NEG_INFINITY"
    assert render_const_value((TypeKind.R4, float("nan"))) == "std::f64::NAN"
    assert render_const_value((TypeKind.R8, float("nan"))) == "std::f64::NAN"


def test_string_constant_is_quoted_and_escaped():
    rendered = render_const_value((TypeKind.STRING, 'say "hi"\n'))
    assert rendered.startswith('"') and rendered.endswith('"')
    assert '\\"hi\\"' in rendered
    assert "\\n" in rendered
    assert "\n" not in rendered


def test_string_constant_collapses_double_backslash():
    rendered = render_const_value((TypeKind.STRING, "a\\\\b"))
    assert rendered == render_const_value((TypeKind.STRING, "a\\b"))


def test_char_constant():
    assert render_const_value((TypeKind.CHAR, "x")) == "'x'"


def test_unsupported_constant_kind():
    with pytest.raises(ValueError):
        render_const_value((TypeKind.CLASS, object()))


def test_unique_enum_constants_keeps_first_by_name():
    constants = [
        ConstRustField("Zeta", "i32", "1i32", Visibility.PUBLIC),
        ConstRustField("Alpha", "i32", "1i32", Visibility.PUBLIC),
        ConstRustField("Beta", "i32", "2i32", Visibility.PUBLIC),
    ]
    result = unique_enum_constants(constants)
    assert [c.name for c in result] == ["Alpha", "Beta"]
    assert len({c.value for c in result}) == len(result)


def test_unique_enum_constants_all_distinct_only_sorts():
    constants = [
        ConstRustField("B", "u8", "2u8"),
        ConstRustField("A", "u8", "1u8"),
    ]
    result = unique_enum_constants(constants)
    assert [c.name for c in result] == ["A", "B"]