"""Read-only navigation over a parsed Kantara tree."""

from __future__ import annotations

from typing import Callable, TypeVar

from kantara.nodes import BaseNode, SectionNode, function_body, node_children
from kantara.values import Scalar

T = TypeVar("T")


class KantaraNode:
    """Wraps a node with lookup, filtering, search and dot-path traversal.

    The wrapper never mutates the node; every accessor returns new wrappers
    around the existing children.
    """

    __slots__ = ("_node",)

    def __init__(self, node: BaseNode):
        self._node = node

    def __repr__(self) -> str:
        return f"KantaraNode({self.kind}: {self.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KantaraNode):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    @property
    def raw(self) -> BaseNode:
        return self._node

    @property
    def name(self) -> str:
        return self._node.name

    @property
    def kind(self) -> str:
        return self._node.kind  # type: ignore[attr-defined]

    @property
    def type(self) -> str:
        return self._node.type  # type: ignore[attr-defined]

    @property
    def value(self) -> Scalar | None:
        return getattr(self._node, "value", None)

    @property
    def arguments(self) -> list[str]:
        return list(getattr(self._node, "arguments", []))

    @property
    def body(self) -> str | None:
        return function_body(self._node)

    def children(self) -> list[KantaraNode]:
        return [KantaraNode(child) for child in node_children(self._node)]

    def find(self, name: str) -> KantaraNode | None:
        """First child called ``name``."""
        for child in node_children(self._node):
            if child.name == name:
                return KantaraNode(child)
        return None

    def find_all(self, name: str) -> list[KantaraNode]:
        return [KantaraNode(child) for child in node_children(self._node) if child.name == name]

    def prop(self, key: str) -> Scalar | None:
        """Inline header attribute of a section, or ``None`` when unset."""
        if isinstance(self._node, SectionNode):
            return self._node.properties.get(key)
        return None

    def filter_by_kind(self, kind: str) -> list[KantaraNode]:
        return [KantaraNode(child) for child in node_children(self._node) if child.kind == kind]

    def search(self, name: str) -> KantaraNode | None:
        """Depth-first, pre-order search for ``name`` starting with this node."""
        if self._node.name == name:
            return self
        for child in self.children():
            found = child.search(name)
            if found is not None:
                return found
        return None

    def navigate(self, path: str) -> KantaraNode | Scalar | None:
        """Follow a dot-separated path of names.

        Every segment but the last moves into the first child with that name.
        The last segment resolves to an inline attribute of the current node
        when one exists, otherwise to the first child with that name: property
        children yield their scalar value, any other child is returned wrapped.
        A missing segment makes the whole lookup return ``None``.
        """
        if not path:
            return self
        parts = path.split(".")
        current = self
        for part in parts[:-1]:
            following = current.find(part)
            if following is None:
                return None
            current = following

        last = parts[-1]
        attribute = current.prop(last)
        if attribute is not None:
            return attribute
        target = current.find(last)
        if target is not None and target.kind == "property":
            return target.value
        return target

    def map_children(self, fn: Callable[[KantaraNode], T]) -> list[T]:
        return [fn(child) for child in self.children()]

    def has_child(self, name: str) -> bool:
        return any(child.name == name for child in node_children(self._node))

    def print_tree(self, indent: int = 0) -> None:
        print(f"{'  ' * indent}{self.kind}: {self.name}")
        # function bodies are opaque text
        if self.kind == "function":
            return
        for child in self.children():
            child.print_tree(indent + 1)


__all__ = ["KantaraNode"]
