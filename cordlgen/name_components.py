"""Fully qualified Rust type names with reference, pointer and generic decorations."""

from __future__ import annotations

from dataclasses import dataclass, replace

from cordlgen.members import RustGeneric

GC_NAMESPACE = "quest_hook::libil2cpp"
GC_NAME = "Gc"


@dataclass(frozen=True)
class RustNameComponents:
    """A Rust type name split into namespace, name, generics and prefix flags."""

    name: str
    namespace: str | None = None
    generics: tuple[RustGeneric, ...] | None = None

    is_ref: bool = False
    is_dyn: bool = False
    is_static_ref: bool = False
    is_ptr: bool = False
    is_mut: bool = False

    def __post_init__(self) -> None:
        if self.generics is not None and not isinstance(self.generics, tuple):
            object.__setattr__(self, "generics", tuple(self.generics))

    @classmethod
    def from_name(cls, name: str) -> RustNameComponents:
        """A bare name with no namespace, generics or prefix."""
        return cls(name=name)

    def _qualified(self) -> str:
        prefix = f"{self.namespace}::" if self.namespace is not None else ""
        return f"{prefix}{self.name}"

    def combine_all(self) -> str:
        """Render the whole name, including reference/pointer, mut and dyn prefixes."""
        completed = self._qualified()
        if self.generics is not None:
            completed = f"{completed}<{','.join(g.name for g in self.generics)}>"

        if self.is_static_ref:
            prefix = "&'static "
        elif self.is_ref:
            prefix = "&"
        elif self.is_ptr:
            prefix = "*"
        else:
            prefix = ""
        if self.is_mut:
            prefix += "mut "
        if self.is_dyn:
            prefix += "dyn "
        return prefix + completed

    def wrap_by_gc(self) -> RustNameComponents:
        """Wrap a pointer type in the garbage-collected handle type.

        Non-pointer types and types that already are the handle are returned as is.
        """
        if not self.is_ptr or (self.namespace == GC_NAMESPACE and self.name == GC_NAME):
            return self
        inner = self.with_no_prefix().combine_all()
        return RustNameComponents(
            name=GC_NAME,
            namespace=GC_NAMESPACE,
            generics=(RustGeneric(inner),),
        )

    def with_no_prefix(self) -> RustNameComponents:
        return replace(self, is_ref=False, is_ptr=False, is_mut=False, is_static_ref=False)

    def with_ref(self) -> RustNameComponents:
        return replace(self, is_ref=True, is_static_ref=False, is_ptr=False)

    def with_static_ref(self) -> RustNameComponents:
        return replace(self, is_static_ref=True, is_ref=False, is_ptr=False)

    def with_ptr(self) -> RustNameComponents:
        return replace(self, is_ptr=True, is_ref=False, is_static_ref=False)

    def with_mut(self) -> RustNameComponents:
        return replace(self, is_mut=True)

    def without_mut(self) -> RustNameComponents:
        return replace(self, is_mut=False)

    def remove_generics(self) -> RustNameComponents:
        return replace(self, generics=None)

    def remove_generics_bounds(self) -> RustNameComponents:
        if self.generics is None:
            return self
        return replace(self, generics=tuple(g.without_bounds() for g in self.generics))

    def remove_namespace(self) -> RustNameComponents:
        return replace(self, namespace=None)

    def to_name_ident(self) -> str:
        """The bare name followed by its generic arguments, bounds included."""
        if self.generics is None:
            return self.name
        return f"{self.name}<{', '.join(str(g) for g in self.generics)}>"

    def to_type_path(self) -> str:
        """The namespaced path with generic arguments, bounds dropped."""
        completed = self.remove_generics_bounds().to_name_ident()
        if self.namespace is not None:
            completed = f"{self.namespace}::{completed}"
        return completed

    def to_type(self) -> str:
        """Render as a Rust type, with reference or pointer sigil, mut and dyn.

        Raises ValueError for combinations that do not form a valid type.
        """
        if self.is_ref:
            sigil = "&"
        elif self.is_ptr:
            sigil = "*"
        else:
            sigil = ""

        if self.is_ptr and not self.is_ref and not self.is_mut:
            raise ValueError(f"raw pointer to {self.name} must be mutable")
        if self.is_mut and not sigil:
            raise ValueError(f"mut on {self.name} needs a reference or pointer")

        prefix = sigil
        if self.is_mut:
            prefix += "mut "
        if self.is_dyn:
            prefix += "dyn "
        return prefix + self.to_type_path()