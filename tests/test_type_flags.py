import pytest

from cordlgen.type_flags import (
    FieldFlags,
    MethodFlags,
    ParamFlags,
    TypeDefFlags,
    TypeKind,
    is_compiler_generated_name,
    is_primitive_builtin,
)


def test_method_flag_values_match_metadata_constants():
    assert MethodFlags(0x0006) == MethodFlags.PUBLIC
    assert MethodFlags(0x0040) == MethodFlags.VIRTUAL
    assert MethodFlags(0x0800) == MethodFlags.SPECIAL_NAME
    assert MethodFlags(0x0040).is_virtual()
    assert MethodFlags(0x0800).is_special_name()


def test_method_predicates_from_raw_value():
    flags = MethodFlags(0x0006 | 0x0010 | 0x0400)
    assert flags.is_public()
    assert flags.is_static()
    assert flags.is_abstract()
    assert not flags.is_virtual()
    assert not flags.is_final()
    assert not flags.is_hidden_sig()
    assert not flags.is_special_name()


@pytest.mark.parametrize(
    "flag, predicate",
    [
        (MethodFlags.PUBLIC, "is_public"),
        (MethodFlags.STATIC, "is_static"),
        (MethodFlags.FINAL, "is_final"),
        (MethodFlags.VIRTUAL, "is_virtual"),
        (MethodFlags.HIDE_BY_SIG, "is_hidden_sig"),
        (MethodFlags.ABSTRACT, "is_abstract"),
        (MethodFlags.SPECIAL_NAME, "is_special_name"),
    ],
)
def test_each_method_flag_sets_only_its_predicate(flag, predicate):
    names = [
        "is_public",
        "is_static",
        "is_final",
        "is_virtual",
        "is_hidden_sig",
        "is_abstract",
        "is_special_name",
    ]
    results = {name: getattr(MethodFlags(flag), name)() for name in names}
    assert results[predicate] is True
    assert [n for n, v in results.items() if v] == [predicate]


def test_public_bits_count_partially():
    # any bit of the access mask satisfies the public check
    assert MethodFlags(0x0002).is_public()
    assert MethodFlags(0x0004).is_public()
    assert not MethodFlags(0).is_public()


def test_param_flags():
    flags = ParamFlags(0x0001 | 0x0010)
    assert flags.is_in()
    assert flags.is_optional()
    assert not flags.is_out()
    assert ParamFlags(0x0002).is_out()
    assert not ParamFlags(0).is_in()


def test_field_flags():
    static_const = FieldFlags(0x0010 | 0x0040)
    assert static_const.is_static()
    assert static_const.is_constant()
    assert not FieldFlags(FieldFlags.PUBLIC).is_static()
    assert not FieldFlags(FieldFlags.PRIVATE).is_constant()


def test_typedef_bitfield_predicates():
    value_enum = TypeDefFlags(bitfield=1 | 2)
    assert value_enum.is_value_type()
    assert value_enum.is_enum_type()
    plain = TypeDefFlags()
    assert not plain.is_value_type()
    assert not plain.is_enum_type()


def test_typedef_flag_predicates():
    flags = TypeDefFlags(
        flags=TypeDefFlags.INTERFACE | TypeDefFlags.EXPLICIT_LAYOUT | TypeDefFlags.SPECIAL_NAME
    )
    assert flags.is_interface()
    assert flags.is_explicit_layout()
    assert flags.is_special_name()
    nested = TypeDefFlags(flags=TypeDefFlags.NESTED_PUBLIC)
    assert not nested.is_interface()
    assert not nested.is_explicit_layout()
    assert not nested.is_special_name()


def test_reference_type_rules():
    assert TypeDefFlags().is_reference_type(TypeKind.CLASS)
    assert TypeDefFlags().is_reference_type(TypeKind.VALUETYPE)
    value = TypeDefFlags(bitfield=1)
    assert not value.is_reference_type(TypeKind.VALUETYPE)
    assert value.is_reference_type(TypeKind.CLASS)


@pytest.mark.parametrize(
    "name",
    ["<Run>d__5", "<>c", "<>c__DisplayClass4_0", "<PrivateImplementationDetails>"],
)
def test_compiler_generated_names(name):
    assert is_compiler_generated_name(name)


@pytest.mark.parametrize("name", ["List`1", "Object", "<Module>", "MyType"])
def test_ordinary_names_are_not_compiler_generated(name):
    assert not is_compiler_generated_name(name)
    assert is_compiler_generated_name(name, special_name=True)


@pytest.mark.parametrize(
    "kind",
    [TypeKind.I4, TypeKind.R8, TypeKind.BOOLEAN, TypeKind.CHAR, TypeKind.STRING, TypeKind.VOID],
)
def test_primitive_builtins(kind):
    assert is_primitive_builtin(kind)


@pytest.mark.parametrize(
    "kind",
    [
        TypeKind.CLASS,
        TypeKind.VALUETYPE,
        TypeKind.OBJECT,
        TypeKind.SZARRAY,
        TypeKind.GENERICINST,
        TypeKind.VAR,
        TypeKind.MVAR,
        TypeKind.ENUM,
        TypeKind.I,
        TypeKind.U,
    ],
)
def test_non_builtins(kind):
    assert not is_primitive_builtin(kind)


def test_primitive_builtin_accepts_raw_code():
    assert is_primitive_builtin(int(TypeKind.U8)) is True
    assert is_primitive_builtin(int(TypeKind.CLASS)) is False
    with pytest.raises(ValueError):
        is_primitive_builtin(0x17)


def test_type_kind_round_trip():
    for kind in TypeKind:
        assert TypeKind(int(kind)) is kind