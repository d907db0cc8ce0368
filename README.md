# sowascene

The engine-independent core of a small 2D game engine, in plain Python with
no dependencies outside the standard library:

- `sowascene.node` — `Node`, a named scene-graph element with groups,
  parent/child links, path lookup (`get_node("A/B")`), lifecycle hooks
  (`start`, `update`, `exit`) and deep duplication into a scene.
- `sowascene.node_db` — `NodeDB`, a registry that gives node types ids and
  creates nodes from registered factories; `NodeType` describes a type.
- `sowascene.scene` — `Scene`, which owns nodes by id, queues nodes for freeing
  and removes them (with their descendants) on the next `update`, and can copy
  one scene into another with `Scene.copy(src, dst)`.
- `sowascene.vertex_layout` — `AttributeType`, `VertexLayout` and
  `AttributePointer`: the size, stride and offset of interleaved float
  vertex attributes.
- `sowascene.model` — `Model` (vertex data, index data, layout and the
  `DrawCall` it would issue) and the builders `quad_2d(size)` and
  `quad_2d_rect(x, y, w, h)`.
- `sowascene.renderer2d` — `Renderer2D`, which collects quads as triangles,
  assigns texture units, and hands a `Batch` to a callback on `end()` or
  when a batch reaches 16 textures or 6000 vertices.
- `sowascene.store` — `Store` and `StringStore`, key/value stores that read
  missing keys as a default.
- `sowascene.text` — `split`, `format_arg_count` and `get_time`.
- `sowascene.random_utils` — `randomize`, `rand`, `rand_range`, `rand_float`
  and `rand_range_float`, a seedable random number source.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short tour

```python
from sowascene.node import Node
from sowascene.node_db import NodeDB
from sowascene.scene import Scene

db = NodeDB()
node_type = db.new_node_type("Node", Node, 0)

scene = Scene(db)
root = scene.create(node_type, "Root", 0)
player = scene.create(node_type, "Player", 0)
weapon = scene.create(node_type, "Weapon", 0)

root.add_child(player)
player.add_child(weapon)
player.add_group("actors")

assert root.get_node("Player/Weapon", True) is weapon
assert player.is_in_group("actors")

scene.free_node(player.id)   # queued
scene.update()               # freed, together with its children
assert len(scene) == 1
```

Batching quads for drawing:

```python
from sowascene.renderer2d import Renderer2D

batches = []
renderer = Renderer2D(1, batches.append)  # 1 is the blank texture id
renderer.push_rect(0, 0, 0, 32, 32, 1, 1, 1, 1, 1, 0)
renderer.end()
assert len(batches) == 1
assert len(batches[0].vertices) == 6
```

## What it does not do

The package describes scenes and draw data; it does not draw anything. There
is no window, no graphics or audio output, no shader handling, no text or
sprite rendering, no scripting, and no saving or loading of scenes to files.
A `Batch` is plain data for a caller's own renderer to consume.