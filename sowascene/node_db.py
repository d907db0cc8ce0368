"""Registry of node types and the factories that build them."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from sowascene.node import Node

NodeFactory = Callable[[], Node]


@dataclass(frozen=True)
class NodeType:
    """Description of a registered node type."""

    name: str = ""
    extends: int = 0


class NodeDB:
    """Assigns ids to node types and creates nodes of a given type."""

    def __init__(self) -> None:
        self._factories: dict[int, NodeFactory] = {}
        self._type_ids: dict[str, int] = {}
        self._types: dict[int, NodeType] = {}
        self._next_id = itertools.count(1)

    def new_node_type(self, name: str, factory: NodeFactory, extends: int = 0) -> int:
        """Register a node type and return its new id."""
        type_id = next(self._next_id)
        self._factories[type_id] = factory
        self._types[type_id] = NodeType(name=name, extends=extends)
        self._type_ids[name] = type_id
        return type_id

    def create(self, type_id: int) -> Node | None:
        """Build a node of the given type, or return None if the type is unknown."""
        factory = self._factories.get(type_id)
        if factory is None:
            return None
        node = factory()
        node.type_id = type_id
        return node

    def destroy(self, node: Node | None) -> None:
        """Release *node*; it no longer belongs to any scene."""
        if node is None:
            return
        node.scene = None

    def get_node_type_id(self, type_name: str) -> int:
        """Return the id registered under *type_name*, or 0 if there is none."""
        return self._type_ids.get(type_name, 0)

    def get_node_typename(self, type_id: int) -> str:
        return self._types.get(type_id, NodeType()).name

    def get_node_type(self, type_id: int) -> NodeType:
        return self._types.get(type_id, NodeType())

    def types(self) -> Mapping[int, NodeType]:
        """A read-only view of all registered types by id."""
        return MappingProxyType(self._types)