"""A scene: the set of live nodes, their root and deferred removal."""

from __future__ import annotations

import uuid

from sowascene.node import Node
from sowascene.node_db import NodeDB

_ID_MASK = (1 << 64) - 1


def _new_node_id() -> int:
    while True:
        node_id = uuid.uuid4().int & _ID_MASK
        if node_id:
            return node_id


class Scene:
    """Owns nodes created through a node database and drives their lifecycle."""

    def __init__(self, node_db: NodeDB) -> None:
        self.node_db = node_db
        self._nodes: dict[int, Node] = {}
        self._free_list: list[int] = []
        self.root: Node | None = None
        self.current_camera_2d: int = 0
        self.scripts: list[str] = []
        self.filepath: str = ""

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    def start(self) -> None:
        for node in list(self._nodes.values()):
            node.start()

    def update(self) -> None:
        """Remove nodes queued for freeing, then update every remaining node."""
        pending, self._free_list = self._free_list, []
        for node_id in pending:
            self._free_node(node_id)
        for node in list(self._nodes.values()):
            node.update()

    def create(
        self, node_type: int | str, name: str = "Object", node_id: int = 0
    ) -> Node | None:
        """Create a node by type id or type name.

        A requested id is used when it is non-zero and free; otherwise a fresh
        id is generated. Returns None for an unknown type.
        """
        if isinstance(node_type, str):
            node_type = self.node_db.get_node_type_id(node_type)
        node = self.node_db.create(node_type)
        if node is None:
            return None
        node.scene = self
        if node_id == 0 or self.has_node(node_id):
            node_id = _new_node_id()
            while self.has_node(node_id):
                node_id = _new_node_id()
        node.id = node_id
        node.rename(name)
        self._nodes[node_id] = node
        return node

    def has_node(self, node_id: int) -> bool:
        return node_id in self._nodes

    def get_node(self, node_id: int) -> Node | None:
        return self._nodes.get(node_id)

    def free_node(self, node_id: int) -> None:
        """Queue a node, with its descendants, for removal at the next update."""
        self._free_list.append(node_id)

    def clear(self) -> None:
        if self.root is not None:
            self._free_node(self.root.id)
        self._nodes.clear()

    @staticmethod
    def copy(src: Scene, dst: Scene) -> None:
        """Replace *dst*'s contents with a duplicate of *src*."""
        dst.clear()
        dst.root = src.root.duplicate(dst) if src.root is not None else None
        dst.current_camera_2d = src.current_camera_2d
        dst.scripts = list(src.scripts)
        dst.filepath = src.filepath

    def _free_node(self, node_id: int) -> None:
        node = self.get_node(node_id)
        if node is None:
            return
        if node is self.root:
            self.root = None
        if node.parent is not None:
            node.parent.remove_child(node)
        children = node.children
        for child in children:
            child._parent = None
        for child in children:
            self._free_node(child.id)
        self.node_db.destroy(node)
        del self._nodes[node_id]