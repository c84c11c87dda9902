"""Building blocks of generated Rust items: fields, params, generics and functions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Visibility(enum.Enum):
    """Item visibility in generated code."""

    PUBLIC = "pub"
    PUBLIC_CRATE = "pub(crate)"
    PRIVATE = ""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class RustGeneric:
    """A generic parameter with optional trait bounds."""

    name: str
    bounds: tuple[str, ...] = ()

    @classmethod
    def parse(cls, s: str) -> RustGeneric:
        return cls(name=s)

    def with_bounds(self, *bounds: str) -> RustGeneric:
        return RustGeneric(self.name, self.bounds + bounds)

    def without_bounds(self) -> RustGeneric:
        return RustGeneric(self.name)

    def render_param(self) -> str:
        """Render as a generic parameter declaration, e.g. ``T: A + B``."""
        if not self.bounds:
            return self.name
        return f"{self.name}: {' + '.join(self.bounds)}"

    def __str__(self) -> str:
        if not self.bounds:
            return self.name
        return f"{self.name}: {'+'.join(self.bounds)}"


@dataclass(frozen=True)
class RustField:
    name: str
    field_type: str
    visibility: Visibility = Visibility.PRIVATE
    offset: int = 0


@dataclass(frozen=True)
class ConstRustField:
    name: str
    field_type: str
    value: str
    visibility: Visibility = Visibility.PRIVATE


@dataclass(frozen=True)
class RustParam:
    name: str
    param_type: str


@dataclass
class RustStruct:
    fields: list[RustField] = field(default_factory=list)
    packing: int | None = None


@dataclass
class RustUnion:
    fields: list[RustField] = field(default_factory=list)


@dataclass(frozen=True)
class RustFeature:
    name: str


@dataclass
class RustFunction:
    """A function or method definition; without a body it renders as a declaration."""

    name: str
    params: list[RustParam] = field(default_factory=list)
    return_type: str | None = None
    body: list[str] | None = None
    generics: list[RustGeneric] = field(default_factory=list)
    where_clause: list[str] = field(default_factory=list)
    is_self: bool = False
    is_ref: bool = False
    is_mut: bool = False
    visibility: Visibility = Visibility.PRIVATE

    def _self_param(self) -> str | None:
        if not self.is_self:
            return None
        if self.is_ref and self.is_mut:
            return "&mut self"
        if self.is_ref:
            return "&self"
        if self.is_mut:
            return "mut self"
        return "self"

    def render(self) -> str:
        """Render the function as Rust source text."""
        prefix = f"{self.visibility} " if self.visibility.value else ""
        generics = (
            f"<{', '.join(g.render_param() for g in self.generics)}>" if self.generics else ""
        )
        params = [f"{p.name}: {p.param_type}" for p in self.params]
        self_param = self._self_param()
        if self_param is not None:
            params.insert(0, self_param)
        header = f"{prefix}fn {self.name}{generics}({', '.join(params)})"
        if self.return_type is not None:
            header += f" -> {self.return_type}"
        if self.where_clause:
            header += f" where {', '.join(self.where_clause)}"

        if self.body is None:
            return header + ";"
        lines = [header + " {"]
        lines.extend(f"    {statement}" for statement in self.body)
        lines.append("}")
        return "\n".join(lines)