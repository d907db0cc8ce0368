"""Description of interleaved vertex attributes and their memory layout."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

FLOAT_SIZE = 4


class AttributeType(Enum):
    """The float-based attribute kinds a vertex may carry."""

    FLOAT = 0
    VEC2 = 1
    VEC3 = 2
    VEC4 = 3

    def component_count(self) -> int:
        """Number of float components in the attribute."""
        return self.value + 1

    def size(self) -> int:
        """Size of the attribute in bytes."""
        return FLOAT_SIZE * self.component_count()


@dataclass(frozen=True)
class VertexAttribute:
    """An attribute bound to a shader input slot."""

    slot: int
    type: AttributeType


@dataclass(frozen=True)
class AttributePointer:
    """Where an attribute lives inside one interleaved vertex."""

    slot: int
    component_count: int
    stride: int
    offset: int


class VertexLayout:
    """An ordered set of attributes packed one after another in each vertex."""

    def __init__(self) -> None:
        self._attributes: list[VertexAttribute] = []
        self._size_in_bytes = 0

    def reset(self) -> None:
        """Forget every attribute."""
        self._attributes.clear()
        self._size_in_bytes = 0

    def set_attribute(self, slot: int, attribute_type: AttributeType) -> None:
        """Add an attribute for *slot*; the vertex grows by its size."""
        if slot < 0:
            raise ValueError(f"attribute slot must not be negative: {slot}")
        self._attributes.append(VertexAttribute(slot, attribute_type))
        self._size_in_bytes += attribute_type.size()

    @property
    def attributes(self) -> tuple[VertexAttribute, ...]:
        return tuple(self._attributes)

    def pointers(self) -> list[AttributePointer]:
        """Order the attributes by slot and give each its offset in the vertex."""
        self._attributes.sort(key=lambda attribute: attribute.slot)
        result = []
        offset = 0
        for attribute in self._attributes:
            result.append(
                AttributePointer(
                    slot=attribute.slot,
                    component_count=attribute.type.component_count(),
                    stride=self._size_in_bytes,
                    offset=offset,
                )
            )
            offset += attribute.type.size()
        return result

    def size_in_bytes(self) -> int:
        """Size of one vertex in bytes."""
        return self._size_in_bytes