"""Mapping of il2cpp types to the Rust names used in generated code."""

from __future__ import annotations

from cordlgen.members import RustGeneric
from cordlgen.name_components import RustNameComponents
from cordlgen.type_flags import TypeKind

LIBIL2CPP = "quest_hook::libil2cpp"

_PRIMITIVES: dict[TypeKind, str] = {
    TypeKind.I1: "i8",
    TypeKind.I2: "i16",
    TypeKind.I4: "i32",
    TypeKind.I8: "i64",
    TypeKind.U1: "u8",
    TypeKind.U2: "u16",
    TypeKind.U4: "u32",
    TypeKind.U8: "u64",
    TypeKind.R4: "f32",
    TypeKind.R8: "f64",
    TypeKind.VOID: "()",
    TypeKind.BOOLEAN: "bool",
    TypeKind.CHAR: "char",
}


def primitive_to_rust_ty(kind: TypeKind) -> str:
    """The Rust primitive for a primitive il2cpp kind; ValueError otherwise."""
    try:
        return _PRIMITIVES[TypeKind(kind)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported type {kind!r}") from None


def il2cpp_object() -> RustNameComponents:
    """A mutable pointer to the runtime's base object."""
    return RustNameComponents(
        name="Il2CppObject", namespace=LIBIL2CPP, is_mut=True, is_ptr=True
    )


def string_type() -> RustNameComponents:
    """A mutable pointer to the runtime string type."""
    return RustNameComponents(
        name="Il2CppString", namespace=LIBIL2CPP, is_mut=True, is_ptr=True
    )


def void_type() -> RustNameComponents:
    return RustNameComponents(name="Void", namespace=LIBIL2CPP)


def blacklisted_wrapper() -> RustNameComponents:
    """Stand-in name for types excluded from generation."""
    return RustNameComponents.from_name("Blacklisted")


def _wrapped_generic(inner: RustNameComponents) -> tuple[RustGeneric, ...]:
    return (RustGeneric(inner.wrap_by_gc().combine_all()),)


def array_of(element: RustNameComponents) -> RustNameComponents:
    """A mutable pointer to a runtime array of ``element``."""
    return RustNameComponents(
        name="Il2CppArray",
        namespace=LIBIL2CPP,
        generics=_wrapped_generic(element),
        is_ptr=True,
        is_mut=True,
    )


def by_ref(inner: RustNameComponents) -> RustNameComponents:
    """A mutable by-reference parameter wrapper around ``inner``."""
    return RustNameComponents(
        name="ByRefMut", namespace=LIBIL2CPP, generics=_wrapped_generic(inner)
    )


def by_ref_const(inner: RustNameComponents) -> RustNameComponents:
    """A read-only by-reference parameter wrapper around ``inner``."""
    return RustNameComponents(
        name="ByRef", namespace=LIBIL2CPP, generics=_wrapped_generic(inner)
    )


def primitive_type(kind: TypeKind) -> RustNameComponents:
    """Resolve a primitive kind, with strings, objects and void mapped to runtime types."""
    kind = TypeKind(kind)
    if kind == TypeKind.STRING:
        return string_type()
    if kind == TypeKind.OBJECT:
        return il2cpp_object()
    if kind == TypeKind.VOID:
        return void_type()
    return RustNameComponents.from_name(primitive_to_rust_ty(kind))