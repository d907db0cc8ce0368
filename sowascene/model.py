"""Vertex and index data for a drawable model, and builders for simple quads."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sowascene.vertex_layout import AttributePointer, AttributeType, VertexLayout

_UINT32_MAX = 0xFFFFFFFF
_QUAD_INDICES = (0, 1, 3, 1, 2, 3)


@dataclass(frozen=True)
class DrawCall:
    """How a model is drawn: indexed or not, and how many elements."""

    indexed: bool
    count: int


class Model:
    """Interleaved float vertex data, optional indices and an attribute layout."""

    def __init__(self) -> None:
        self.layout = VertexLayout()
        self._vertices: tuple[float, ...] = ()
        self._indices: tuple[int, ...] = ()

    @property
    def vertices(self) -> tuple[float, ...]:
        return self._vertices

    @property
    def indices(self) -> tuple[int, ...]:
        return self._indices

    def set_model_data(self, data: Iterable[float]) -> None:
        self._vertices = tuple(float(value) for value in data)

    def set_index_data(self, data: Iterable[int]) -> None:
        indices = tuple(int(value) for value in data)
        for index in indices:
            if not 0 <= index <= _UINT32_MAX:
                raise ValueError(f"index out of 32-bit unsigned range: {index}")
        self._indices = indices

    def reset_attributes(self) -> None:
        self.layout.reset()

    def set_attribute(self, slot: int, attribute_type: AttributeType) -> None:
        self.layout.set_attribute(slot, attribute_type)

    def attribute_pointers(self) -> list[AttributePointer]:
        return self.layout.pointers()

    def draw_call(self) -> DrawCall | None:
        """Describe the draw this model issues, or None if there is nothing to draw."""
        if self._indices:
            return DrawCall(indexed=True, count=len(self._indices))
        if self.layout.size_in_bytes() > 0:
            return DrawCall(indexed=False, count=len(self._vertices))
        return None


def _quad(right: float, top: float, left: float, bottom: float) -> Model:
    model = Model()
    model.set_model_data(
        (
            right, top, 0.0, 1.0, 1.0,      # top right
            right, bottom, 0.0, 1.0, 0.0,   # bottom right
            left, bottom, 0.0, 0.0, 0.0,    # bottom left
            left, top, 0.0, 0.0, 1.0,       # top left
        )
    )
    model.set_index_data(_QUAD_INDICES)
    model.reset_attributes()
    model.set_attribute(0, AttributeType.VEC3)
    model.set_attribute(1, AttributeType.VEC2)
    return model


def quad_2d(size: float = 1.0) -> Model:
    """A textured quad of side *size* centred on the origin."""
    half = size / 2.0
    return _quad(half, half, -half, -half)


def quad_2d_rect(x: float, y: float, w: float, h: float) -> Model:
    """A textured quad covering the rectangle at (*x*, *y*) of size *w* x *h*."""
    return _quad(x + w, y + h, x, y)