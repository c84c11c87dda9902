"""Type kinds and attribute flags of il2cpp metadata, with their predicates."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TypeKind(enum.IntEnum):
    """Element type codes of an il2cpp type."""

    END = 0x00
    VOID = 0x01
    BOOLEAN = 0x02
    CHAR = 0x03
    I1 = 0x04
    U1 = 0x05
    I2 = 0x06
    U2 = 0x07
    I4 = 0x08
    U4 = 0x09
    I8 = 0x0A
    U8 = 0x0B
    R4 = 0x0C
    R8 = 0x0D
    STRING = 0x0E
    PTR = 0x0F
    BYREF = 0x10
    VALUETYPE = 0x11
    CLASS = 0x12
    VAR = 0x13
    ARRAY = 0x14
    GENERICINST = 0x15
    TYPEDBYREF = 0x16
    I = 0x18  # noqa: E741
    U = 0x19
    FNPTR = 0x1B
    OBJECT = 0x1C
    SZARRAY = 0x1D
    MVAR = 0x1E
    CMOD_REQD = 0x1F
    CMOD_OPT = 0x20
    INTERNAL = 0x21
    MODIFIER = 0x40
    SENTINEL = 0x41
    PINNED = 0x45
    ENUM = 0x55
    IL2CPP_TYPE_INDEX = 0xFF


_NON_BUILTIN_KINDS = frozenset(
    {
        TypeKind.BYREF,
        TypeKind.VALUETYPE,
        TypeKind.CLASS,
        TypeKind.VAR,
        TypeKind.ARRAY,
        TypeKind.GENERICINST,
        TypeKind.TYPEDBYREF,
        TypeKind.I,
        TypeKind.U,
        TypeKind.FNPTR,
        TypeKind.OBJECT,
        TypeKind.SZARRAY,
        TypeKind.MVAR,
        TypeKind.INTERNAL,
        TypeKind.MODIFIER,
        TypeKind.SENTINEL,
        TypeKind.PINNED,
        TypeKind.ENUM,
    }
)


def is_primitive_builtin(kind: TypeKind) -> bool:
    """True for kinds that map directly to a builtin, not to a class or reference."""
    return TypeKind(kind) not in _NON_BUILTIN_KINDS


class MethodFlags(enum.IntFlag):
    """Attribute bits of a method definition."""

    PUBLIC = 0x0006
    STATIC = 0x0010
    FINAL = 0x0020
    VIRTUAL = 0x0040
    HIDE_BY_SIG = 0x0080
    ABSTRACT = 0x0400
    SPECIAL_NAME = 0x0800

    def is_public(self) -> bool:
        return bool(self & MethodFlags.PUBLIC)

    def is_abstract(self) -> bool:
        return bool(self & MethodFlags.ABSTRACT)

    def is_static(self) -> bool:
        return bool(self & MethodFlags.STATIC)

    def is_virtual(self) -> bool:
        return bool(self & MethodFlags.VIRTUAL)

    def is_hidden_sig(self) -> bool:
        return bool(self & MethodFlags.HIDE_BY_SIG)

    def is_special_name(self) -> bool:
        return bool(self & MethodFlags.SPECIAL_NAME)

    def is_final(self) -> bool:
        return bool(self & MethodFlags.FINAL)


class ParamFlags(enum.IntFlag):
    """Attribute bits of a parameter's type."""

    IN = 0x0001
    OUT = 0x0002
    OPTIONAL = 0x0010

    def is_optional(self) -> bool:
        return bool(self & ParamFlags.OPTIONAL)

    def is_in(self) -> bool:
        return bool(self & ParamFlags.IN)

    def is_out(self) -> bool:
        return bool(self & ParamFlags.OUT)


class FieldFlags(enum.IntFlag):
    """Attribute bits of a field's type."""

    PRIVATE = 0x0001
    PUBLIC = 0x0006
    STATIC = 0x0010
    LITERAL = 0x0040

    def is_static(self) -> bool:
        return bool(self & FieldFlags.STATIC)

    def is_constant(self) -> bool:
        return bool(self & FieldFlags.LITERAL)


@dataclass(frozen=True)
class TypeDefFlags:
    """Attribute flags and the packed bitfield of a type definition."""

    flags: int = 0
    bitfield: int = 0

    NESTED_PUBLIC = 0x00000002
    EXPLICIT_LAYOUT = 0x00000010
    INTERFACE = 0x00000020
    SPECIAL_NAME = 0x00000400

    VALUE_TYPE_BIT = 1
    ENUM_TYPE_BIT = 2

    def is_value_type(self) -> bool:
        return bool(self.bitfield & self.VALUE_TYPE_BIT)

    def is_enum_type(self) -> bool:
        return bool(self.bitfield & self.ENUM_TYPE_BIT)

    def is_special_name(self) -> bool:
        return bool(self.flags & self.SPECIAL_NAME)

    def is_interface(self) -> bool:
        return bool(self.flags & self.INTERFACE)

    def is_explicit_layout(self) -> bool:
        return bool(self.flags & self.EXPLICIT_LAYOUT)

    def is_reference_type(self, byval_kind: TypeKind) -> bool:
        """Reference semantics: neither value nor enum type, or a class by value."""
        return (not self.is_value_type() and not self.is_enum_type()) or (
            TypeKind(byval_kind) == TypeKind.CLASS
        )


def is_compiler_generated_name(name: str, special_name: bool = False) -> bool:
    """True for types the compiler emitted rather than the programmer."""
    return (
        special_name
        or (name.startswith("<") and ">d__" in name)
        or "<>c" in name
        or name.startswith("<PrivateImplementationDetails>")
    )