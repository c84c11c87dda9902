"""Dependency graph with a deterministic topological ordering."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class DependencyGraph(Generic[T]):
    """Records which items depend on which, tolerating cycles when sorting.

    ``key`` orders the roots and the dependencies of each item, so the
    result does not depend on insertion or hashing order.
    """

    def __init__(self, key: Callable[[T], Any] | None = None) -> None:
        self._dependencies: dict[T, set[T]] = {}
        self._key = key

    def __len__(self) -> int:
        return len(self._dependencies)

    def __contains__(self, item: object) -> bool:
        return item in self._dependencies

    def add_root_dependency(self, dependent: T) -> bool:
        """Register an item with no dependencies; False if it was already known."""
        if dependent in self._dependencies:
            return False
        self._dependencies[dependent] = set()
        return True

    def add_dependency(self, dependent: T, dependency: T) -> None:
        """Record that ``dependent`` needs ``dependency``."""
        self._dependencies.setdefault(dependent, set()).add(dependency)

    def _sorted(self, items) -> list[T]:
        return sorted(items, key=self._key)

    def topological_sort(self) -> list[T]:
        """Return every item with dependencies placed before their dependents.

        Items that only appear as dependencies are included. Cycles are broken
        at the first item reached again.
        """
        visited: set[T] = set()
        order: list[T] = []

        for root in self._sorted(self._dependencies):
            if root in visited:
                continue
            visited.add(root)
            stack = [(root, iter(self._sorted(self._dependencies.get(root, ()))))]
            while stack:
                node, pending = stack[-1]
                for dependency in pending:
                    if dependency not in visited:
                        visited.add(dependency)
                        children = self._sorted(self._dependencies.get(dependency, ()))
                        stack.append((dependency, iter(children)))
                        break
                else:
                    stack.pop()
                    order.append(node)

        return order