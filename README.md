# cordlgen

Helpers for generating Rust binding sources from il2cpp type metadata.
The package has no dependencies outside the standard library.

## Modules

- `cordlgen.cursor` – `read_compressed_u32` and `read_compressed_i32` read
  il2cpp's variable-length compressed integers from a binary stream. They raise
  `EOFError` on a short read and `ValueError` on an invalid lead byte.
- `cordlgen.sorting` – `DependencyGraph`, with `add_root_dependency`,
  `add_dependency` and `topological_sort`. The sort puts dependencies before
  their dependents, breaks cycles, and orders siblings by an optional `key`.
- `cordlgen.writer` – `Writer`, a text sink that tracks an indentation level
  (`indent`, `dedent`) and whether the last write ended a line; it can be used
  as a context manager that flushes on exit. `SortLevel` is an ordered
  enumeration of declaration buckets.
- `cordlgen.naming` – `RustGenerationConfig` (and a default `STATIC_CONFIG`),
  which turns C# names and namespaces into Rust identifiers (`name_rs`,
  `name_rs_plus`, `sanitize_to_rs_name`), module paths (`namespace_rs`),
  directory paths (`namespace_path`) and Cargo feature names (`feature_name`).
  Reserved words are escaped with a `_cordl_` prefix.
- `cordlgen.members` – `Visibility`, `RustGeneric`, `RustField`,
  `ConstRustField`, `RustParam`, `RustStruct`, `RustUnion`, `RustFeature` and
  `RustFunction`; `RustFunction.render()` produces Rust source text.
- `cordlgen.type_flags` – the `TypeKind` enumeration, the attribute flags
  `MethodFlags`, `ParamFlags`, `FieldFlags` and `TypeDefFlags` with their
  predicates, and `is_compiler_generated_name` and `is_primitive_builtin`.
- `cordlgen.name_components` – `RustNameComponents`, a Rust type name with
  namespace, generics and reference/pointer/mut/dyn prefixes, rendered with
  `combine_all`, `to_name_ident`, `to_type_path` or `to_type`, and wrapped in
  the garbage-collected handle with `wrap_by_gc`.
- `cordlgen.resolver` – mappings from il2cpp types to Rust names:
  `primitive_to_rust_ty`, `primitive_type`, `il2cpp_object`, `string_type`,
  `void_type`, `blacklisted_wrapper`, `array_of`, `by_ref` and `by_ref_const`.
- `cordlgen.fields` – field layout helpers: `FieldSlot`,
  `explicit_layout_padding`, `field_into_offset_structs`,
  `render_const_value` and `unique_enum_constants`.
- `cordlgen.modules` – output layout on disk: `fundamental_path`,
  `get_module_path`, `build_feature_block`, `write_cargo_config`,
  `make_mod_dir` and `write_namespace_modules`.

## Example

```python
import io

from cordlgen.cursor import read_compressed_i32
from cordlgen.naming import RustGenerationConfig
from cordlgen.name_components import RustNameComponents
from cordlgen.sorting import DependencyGraph

config = RustGenerationConfig()
config.namespace_rs("UnityEngine.UI")   # "crate::UnityEngine::UI"
config.name_rs("type")                  # "_cordl_type"

name = RustNameComponents.from_name("Foo").with_ptr().with_mut()
name.combine_all()                       # "*mut Foo"

read_compressed_i32(io.BytesIO(b"\x03"))  # -2

graph = DependencyGraph()
graph.add_dependency("b", "a")
graph.topological_sort()                 # ["a", "b"]
```

## What it does not do

This package is a set of building blocks, not a complete generator. It does
not read `global-metadata.dat` or native binaries, it does not build whole type
definitions or write their bodies, and it has no command-line program. Callers
supply the names, flags, fields and constants they have already extracted.

## Running the tests

```
pip install -e .[test]
pytest
```