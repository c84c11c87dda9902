"""Field layout helpers: explicit-layout padding, union packing and constant values."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable
from dataclasses import dataclass, replace
from decimal import Decimal

from cordlgen.members import ConstRustField, RustField, RustStruct, Visibility
from cordlgen.type_flags import TypeKind

PADDING_FIELD = "padding"
PADDING_TYPE = "quest_hook::libil2cpp::ValueTypePadding"

_INT_SUFFIXES: dict[TypeKind, str] = {
    TypeKind.U1: "u8",
    TypeKind.U2: "u16",
    TypeKind.U4: "u32",
    TypeKind.U8: "u64",
    TypeKind.I1: "i8",
    TypeKind.I2: "i16",
    TypeKind.I4: "i32",
    TypeKind.I8: "i64",
}

_STRING_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


@dataclass(frozen=True)
class FieldSlot:
    """Where an instance field sits in its declaring type; offset is None when unknown."""

    name: str
    offset: int | None
    size: int


def explicit_layout_padding(fields: Iterable[FieldSlot]) -> RustField | None:
    """A private padding field sized to cover the furthest-reaching field.

    The last field is the one with the largest offset, ties broken by size.
    Returns None when no field has a known offset.
    """
    placed = [f for f in fields if f.offset is not None]
    if not placed:
        return None
    last = max(placed, key=lambda f: (f.offset, f.size))
    size = last.offset + last.size
    return RustField(
        name=PADDING_FIELD,
        field_type=f"{PADDING_TYPE}<{size}>",
        visibility=Visibility.PRIVATE,
        offset=0,
    )


def field_into_offset_structs(min_offset: int, field: RustField) -> tuple[RustStruct, RustStruct]:
    """Split a field into a packed struct and an alignment struct for a union.

    Each struct starts with a byte array padding the field out to its offset;
    the first is packed to 1 and exposes the field, the second keeps natural
    alignment and holds a private copy.
    """
    padding = field.offset

    packed_padding = RustField(
        name=f"{field.name}_padding",
        field_type=f"[u8; 0x{padding:x}]",
        visibility=Visibility.PRIVATE,
        offset=field.offset,
    )
    alignment_padding = RustField(
        name=f"{field.name}_padding_forAlignment",
        field_type=f"[u8; {padding}]",
        visibility=Visibility.PRIVATE,
        offset=field.offset,
    )
    alignment_field = replace(
        field, name=f"{field.name}_forAlignment", visibility=Visibility.PRIVATE
    )
    packed_field = replace(field, visibility=Visibility.PUBLIC)

    packed = RustStruct(fields=[packed_padding, packed_field], packing=1)
    aligned = RustStruct(fields=[alignment_padding, alignment_field], packing=None)
    return packed, aligned


def _string_literal(text: str) -> str:
    parts = []
    for ch in text:
        if ch in _STRING_ESCAPES:
            parts.append(_STRING_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\u{{{ord(ch):x}}}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def _plain_decimal(text: str) -> str:
    result = format(Decimal(text), "f")
    if "." in result:
        result = result.rstrip("0").rstrip(".")
    return result


def _f32_text(value: float) -> str:
    try:
        (rounded,) = struct.unpack("<f", struct.pack("<f", value))
    except OverflowError:
        raise ValueError(f"{value!r} does not fit in f32") from None
    for precision in range(1, 10):
        candidate = f"{rounded:.{precision}g}"
        if struct.unpack("<f", struct.pack("<f", float(candidate)))[0] == rounded:
            return _plain_decimal(candidate)
    return _plain_decimal(repr(rounded))


def _float_literal(value: float, single: bool) -> str:
    bits = "f32" if single else "f64"
    if math.isnan(value):
        return "std::f64::NAN"
    if math.isinf(value):
        return f"std::{bits}::INFINITY" if value > 0 else f"std::{bits}::NEG_INFINITY"
    text = _f32_text(value) if single else _plain_decimal(repr(float(value)))
    return f"{text}{bits}"


def render_const_value(value: tuple[TypeKind, object] | None) -> str:
    """Render a constant's default value as a Rust expression.

    ``value`` is None for a null constant, otherwise a ``(kind, payload)`` pair
    where ``kind`` is the constant's primitive type. Integers and floats carry
    their type suffix. Raises ValueError for kinds without a literal form.
    """
    if value is None:
        return "Default::default()"

    kind, payload = value
    kind = TypeKind(kind)

    if kind == TypeKind.STRING:
        return _string_literal(str(payload).replace("\\\\", "\\"))
    if kind == TypeKind.CHAR:
        return f"'{payload}'"
    if kind == TypeKind.BOOLEAN:
        return "true" if payload else "false"
    if kind in _INT_SUFFIXES:
        return f"{int(payload)}{_INT_SUFFIXES[kind]}"
    if kind == TypeKind.R4:
        return _float_literal(float(payload), single=True)
    if kind == TypeKind.R8:
        return _float_literal(float(payload), single=False)
    raise ValueError(f"Unsupported constant kind {kind.name}")


def unique_enum_constants(constants: Iterable[ConstRustField]) -> list[ConstRustField]:
    """Sort constants by name and keep only the first for each distinct value.

    Enum variants may not share a discriminant, so later duplicates are dropped.
    """
    seen: set[str] = set()
    result: list[ConstRustField] = []
    for constant in sorted(constants, key=lambda c: c.name):
        if constant.value in seen:
            continue
        seen.add(constant.value)
        result.append(constant)
    return result