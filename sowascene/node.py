"""Scene-graph nodes with names, groups and a parent/child hierarchy."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from sowascene.text import split

if TYPE_CHECKING:
    from sowascene.scene import Scene


class NodeState(enum.Enum):
    """Where a node is in its lifecycle."""

    IDLE = "idle"
    RUNNING = "running"
    EXITED = "exited"


class Node:
    """A named element of a scene tree that may belong to any number of groups."""

    def __init__(self) -> None:
        self.type_id: int = 0
        self.id: int = 0
        self.scene: Scene | None = None
        self._name = ""
        self._groups: list[str] = []
        self._parent: Node | None = None
        self._children: list[Node] = []
        self._state = NodeState.IDLE
        self._update_count = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, id={self.id})"

    # Lifecycle hooks; specialised nodes extend them.
    @property
    def state(self) -> NodeState:
        return self._state

    @property
    def update_count(self) -> int:
        """How many updates this node has received since it last started."""
        return self._update_count

    def start(self) -> None:
        """Called once when the scene starts."""
        self._state = NodeState.RUNNING
        self._update_count = 0

    def update(self) -> None:
        """Called once per scene update."""
        self._update_count += 1

    def exit(self) -> None:
        """Called when the node leaves the running scene."""
        self._state = NodeState.EXITED

    def copy(self, dst: Node) -> None:
        """Copy this node's name and groups onto *dst*."""
        dst.rename(self._name)
        dst._groups = list(self._groups)

    @property
    def name(self) -> str:
        return self._name

    def rename(self, name: str) -> None:
        self._name = name

    @property
    def groups(self) -> tuple[str, ...]:
        return tuple(self._groups)

    def is_in_group(self, group: str) -> bool:
        return group in self._groups

    def add_group(self, group: str) -> None:
        """Add *group* unless the node already belongs to it."""
        if group not in self._groups:
            self._groups.append(group)

    def remove_group(self, group: str) -> None:
        """Remove *group* if present; absent groups are ignored."""
        if group in self._groups:
            self._groups.remove(group)

    @property
    def parent(self) -> Node | None:
        return self._parent

    @property
    def children(self) -> list[Node]:
        """A copy of the node's children, in insertion order."""
        return list(self._children)

    def _forget_child(self, child: Node) -> None:
        self._children = [c for c in self._children if c is not child]

    def add_child(self, child: Node) -> None:
        """Attach *child* to this node, detaching it from any previous parent."""
        if child._parent is not None:
            child._parent._forget_child(child)
        child._parent = self
        self._children.append(child)

    def remove_child(self, child: Node) -> None:
        child._parent = None
        self._forget_child(child)

    def free(self) -> None:
        """Queue this node for removal from its scene at the next update."""
        if self.scene is None:
            raise RuntimeError(f"node {self._name!r} does not belong to a scene")
        self.scene.free_node(self.id)

    def child_count(self) -> int:
        return len(self._children)

    def get_child(self, index: int) -> Node | None:
        """Return the child at *index*, or None when out of range."""
        if not 0 <= index < len(self._children):
            return None
        return self._children[index]

    def get_node(self, path: str, recursive: bool = True) -> Node | None:
        """Find a descendant by name, or by a slash-separated path if *recursive*."""
        if recursive:
            node: Node | None = self
            for part in split(path, "/"):
                node = node.get_node(part, False)
                if node is None:
                    break
            return node
        return next((child for child in self._children if child.name == path), None)

    def duplicate(self, scene: Scene | None = None) -> Node | None:
        """Deep-copy this node and its descendants into *scene* (default: its own)."""
        if scene is None:
            scene = self.scene
        if scene is None:
            return None
        node = scene.create(self.type_id, self._name, self.id)
        if node is None:
            return None
        self.copy(node)
        for child in self._children:
            copy = child.duplicate(scene)
            if copy is not None:
                node.add_child(copy)
        return node