"""Building blocks for generating Rust bindings from il2cpp type metadata: names, flags, fields and output layout."""

__version__ = "0.1.0"