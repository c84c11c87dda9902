"""Layout of generated Rust sources on disk: file paths, module trees and Cargo features."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path, PurePath

from cordlgen.naming import RustGenerationConfig

GLOBAL_NAMESPACE = "GlobalNamespace"
FEATURES_PLACEHOLDER = "#cordl_features"

LIB_HEADER_ATTRIBUTES = (
    "#![feature(inherent_associated_types)]",
    "",
    "#![allow(clippy::all)]",
    "#![allow(unused)]",
    "#![allow(non_snake_case)]",
    "#![allow(non_camel_case_types)]",
    "#![allow(non_upper_case_globals)]",
    "#![allow(non_ascii_idents)]",
    "#![allow(bad_style)]",
    "#![allow(clippy::module_name_repetitions)]",
    "#![allow(clippy::similar_names)]",
    "#![allow(clippy::case_sensitive_file_name)]",
    "#![allow(clippy::enum_variant_names)]",
    "#![allow(clippy::large_enum_variant)]",
)


def fundamental_path(
    config: RustGenerationConfig,
    namespace: str | None,
    name: str,
    declaring_types: Sequence[str] | None = None,
) -> Path:
    """The source file that holds a root type and everything nested in it.

    Nested types (``declaring_types`` given) are named after their declaring
    types joined with underscores, followed by their own escaped name.
    """
    directory = Path(config.namespace_path(namespace or GLOBAL_NAMESPACE))

    if declaring_types is not None:
        base_name = "_".join(declaring_types)
        path_name = f"{base_name}_{config.name_rs(name)}"
    else:
        path_name = config.name_rs(name)

    return config.source_path / (directory / f"{path_name}_mod").with_suffix(".rs")


def get_module_path(fundamental_path: PurePath | str, source_path: PurePath | str) -> str:
    """The ``crate::`` module path of a generated file relative to the source root."""
    relative = PurePath(os.path.relpath(fundamental_path, source_path))
    module_path = "::".join(relative.parent.parts)
    return f"crate::{module_path}::{relative.stem}"


def build_feature_block(features: Iterable[tuple[str, Iterable[str]]]) -> str:
    """Render Cargo feature lines from ``(feature, dependency features)`` pairs.

    Pairs with the same feature name are merged. Dependencies within a line and
    the lines themselves are sorted so output is stable between runs.
    """
    merged: dict[str, list[str]] = {}
    for feature_name, dependencies in features:
        merged.setdefault(feature_name, []).extend(dependencies)

    lines = {
        f'"{feature_name}" = [{", ".join(sorted(f"{chr(34)}{d}{chr(34)}" for d in deps))}]'
        for feature_name, deps in merged.items()
    }
    return "\n".join(sorted(lines))


def write_cargo_config(
    template_path: PurePath | str, feature_block: str, output_path: PurePath | str
) -> None:
    """Fill the feature placeholder of a Cargo manifest template and write it out."""
    try:
        template = Path(template_path).read_text()
    except OSError as exc:
        raise OSError(f"Failed to load Cargo template {template_path}") from exc

    Path(output_path).write_text(template.replace(FEATURES_PLACEHOLDER, feature_block))


def make_mod_dir(directory: PurePath | str, name: str) -> None:
    """Append module declarations for a directory's contents to its module file.

    Sub-directories become public modules (and get their own ``mod.rs``);
    ``.rs`` files become private modules whose items are re-exported. Missing
    or empty directories are left alone.
    """
    directory = Path(directory)
    if not directory.exists():
        return

    module_paths = sorted(directory.iterdir())
    if not module_paths:
        return

    mod_path = (directory / name).with_suffix(".rs")
    lines: list[str] = []
    with mod_path.open("a") as mod_file:
        for module in module_paths:
            if module == directory or module == mod_path or not module.exists():
                continue

            stem = module.stem
            if module.is_dir():
                make_mod_dir(module, "mod.rs")
                lines.append(f"// namespace {stem};")
                lines.append(f"pub mod {stem};")
            elif module.suffix == ".rs":
                lines.append(f"// class {stem}; export all")
                lines.append(f"mod {stem};")
                lines.append(f"pub use {stem}::*;")

        mod_file.writelines(f"{line}\n" for line in lines)


def write_namespace_modules(source_path: PurePath | str) -> None:
    """Write the crate root ``lib.rs`` header and the whole module tree under it."""
    source_path = Path(source_path)
    with (source_path / "lib.rs").open("a") as lib_file:
        lib_file.write("\n".join(LIB_HEADER_ATTRIBUTES) + "\n")

    make_mod_dir(source_path, "lib.rs")