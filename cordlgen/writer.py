"""Output stream wrapper used when emitting generated source."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TextIO


class SortLevel(enum.IntEnum):
    """Ordering buckets for declarations inside a generated type."""

    SIZE_STRUCT = 0
    USING_ALIAS = 1
    NESTED_STRUCT = 2
    PROPERTIES = 3
    METHODS = 4
    CONSTRUCTORS = 5
    FIELDS_IMPL = 6
    UNKNOWN = 7
    NESTED_UNION = 8
    FIELDS = 9


@dataclass
class Writer:
    """Text sink that tracks indentation and whether the last write ended a line."""

    stream: TextIO
    level: int = 0
    newline: bool = True

    def indent(self) -> None:
        self.level += 1

    def dedent(self) -> None:
        if self.level == 0:
            raise ValueError("cannot dedent below zero indentation")
        self.level -= 1

    def write(self, text: str) -> int:
        self.newline = text.endswith("\n")
        return self.stream.write(text)

    def write_line(self, text: str = "") -> int:
        return self.write(text + "\n")

    def flush(self) -> None:
        self.stream.flush()

    def __enter__(self) -> Writer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.flush()