"""Batching of textured 2D quads into draw batches."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace

Matrix4 = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]

MAX_QUADS = 1000
MAX_VERTICES = MAX_QUADS * 6
MAX_TEXTURES = 16

IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> Matrix4:
    """An orthographic projection matrix, rows first."""
    return (
        (2.0 / (right - left), 0.0, 0.0, -(right + left) / (right - left)),
        (0.0, 2.0 / (top - bottom), 0.0, -(top + bottom) / (top - bottom)),
        (0.0, 0.0, -2.0 / (far - near), -(far + near) / (far - near)),
        (0.0, 0.0, 0.0, 1.0),
    )


def _transform_point(matrix: Sequence[Sequence[float]], x: float, y: float) -> tuple[float, float]:
    return (
        matrix[0][0] * x + matrix[0][1] * y + matrix[0][3],
        matrix[1][0] * x + matrix[1][1] * y + matrix[1][3],
    )


@dataclass(frozen=True)
class Color:
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0


@dataclass(frozen=True)
class Vertex2D:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    u: float = 0.0
    v: float = 0.0
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0
    d_id: float = 0.0  # draw id
    t_id: float = 0.0  # texture id


@dataclass(frozen=True)
class QuadArgs:
    """A unit quad, scaled and transformed, with a sub-rectangle of a texture."""

    transform: Matrix4 = IDENTITY
    texture_id: float = 0.0
    z: float = 0.0
    draw_id: float = 1.0
    color: Color = field(default_factory=Color)
    texture_scale: tuple[float, float] = (1.0, 1.0)
    uv_top_left: tuple[float, float] = (0.0, 1.0)
    uv_bottom_right: tuple[float, float] = (1.0, 0.0)


@dataclass(frozen=True)
class Batch:
    """A flushed set of triangles and the texture units they use."""

    vertices: tuple[Vertex2D, ...]
    textures: dict[int, int]  # texture id -> texture unit
    projection: Matrix4

    @property
    def units(self) -> list[int]:
        return sorted(self.textures.values())


class Renderer2D:
    """Collects quads and hands them to *flush* in batches.

    A batch is flushed on :meth:`end`, or as soon as it holds
    ``MAX_TEXTURES`` textures or ``MAX_VERTICES`` vertices.
    """

    def __init__(
        self,
        blank_texture_id: int,
        flush: Callable[[Batch], None] | None = None,
    ) -> None:
        self.blank_texture_id = blank_texture_id
        self.flush = flush
        self.projection: Matrix4 = ortho(0.0, 1280.0, 0.0, 720.0, -128.0, 128.0)
        self._vertices: list[Vertex2D] = []
        self._textures: dict[int, int] = {}
        self._texture_counter = 0

    @property
    def vertices(self) -> tuple[Vertex2D, ...]:
        return tuple(self._vertices)

    @property
    def texture_count(self) -> int:
        return len(self._textures)

    def reset(self) -> None:
        self._vertices.clear()
        self._textures.clear()
        self._texture_counter = 0

    def _texture_unit(self, texture_id: float) -> int:
        key = int(texture_id)
        if key == 0:
            key = self.blank_texture_id
        slot = self._textures.get(key)
        if slot is None:
            self._texture_counter += 1
            slot = self._texture_counter
            self._textures[key] = slot
        return slot - 1

    def push_vertices(self, vertices: Sequence[Vertex2D]) -> None:
        """Add a quad given by its four corners, as two triangles."""
        if len(vertices) != 4:
            raise ValueError(f"a quad needs 4 vertices, got {len(vertices)}")
        q = [replace(v, t_id=float(self._texture_unit(v.t_id))) for v in vertices]
        self._vertices.extend((q[0], q[1], q[2], q[0], q[2], q[3]))
        if len(self._textures) >= MAX_TEXTURES or len(self._vertices) >= MAX_VERTICES:
            self.end()

    def _push_corners(
        self,
        points: Sequence[tuple[float, float]],
        uvs: Sequence[tuple[float, float]],
        z: float,
        color: Color,
        draw_id: float,
        texture_id: float,
    ) -> None:
        self.push_vertices(
            [
                Vertex2D(
                    x=px, y=py, z=z, u=u, v=v,
                    r=color.r, g=color.g, b=color.b, a=color.a,
                    d_id=draw_id, t_id=texture_id,
                )
                for (px, py), (u, v) in zip(points, uvs)
            ]
        )

    def push_rect(
        self, x: float, y: float, z: float, w: float, h: float,
        r: float, g: float, b: float, a: float, draw_id: float, texture_id: float,
    ) -> None:
        """Add an axis-aligned quad with its bottom-left corner at (*x*, *y*)."""
        points = [(x, y + h), (x, y), (x + w, y), (x + w, y + h)]
        uvs = [(0.0, 1.0), (0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]
        self._push_corners(points, uvs, z, Color(r, g, b, a), draw_id, texture_id)

    def push_transformed(
        self,
        transform: Matrix4,
        texture_id: float,
        texture_scale: tuple[float, float],
        z: float = 0.0,
        color: Color = Color(),
        draw_id: float = 1.0,
    ) -> None:
        """Add a centred quad of size *texture_scale* moved by *transform*."""
        self.push_quad(
            QuadArgs(
                transform=transform,
                texture_id=texture_id,
                z=z,
                draw_id=draw_id,
                color=color,
                texture_scale=texture_scale,
            )
        )

    def push_quad(self, args: QuadArgs) -> None:
        sx, sy = args.texture_scale
        corners = [(-0.5 * sx, 0.5 * sy), (-0.5 * sx, -0.5 * sy), (0.5 * sx, -0.5 * sy), (0.5 * sx, 0.5 * sy)]
        points = [_transform_point(args.transform, px, py) for px, py in corners]
        (left, top), (right, bottom) = args.uv_top_left, args.uv_bottom_right
        uvs = [(left, top), (left, bottom), (right, bottom), (right, top)]
        self._push_corners(points, uvs, args.z, args.color, args.draw_id, args.texture_id)

    def end(self) -> Batch | None:
        """Flush pending quads as a batch and start afresh; None if nothing is pending."""
        if not self._vertices:
            return None
        batch = Batch(
            vertices=tuple(self._vertices),
            textures={tid: slot - 1 for tid, slot in sorted(self._textures.items())},
            projection=self.projection,
        )
        if self.flush is not None:
            self.flush(batch)
        self.reset()
        return batch