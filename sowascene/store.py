"""A small key-value store that yields a default for missing keys."""

from __future__ import annotations

from collections.abc import Callable, Hashable, ItemsView
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Store(Generic[K, V]):
    """Mapping of keys to values; reading a missing key gives a default value."""

    def __init__(self, default_factory: Callable[[], V]) -> None:
        self._default_factory = default_factory
        self._data: dict[K, V] = {}

    def clear(self) -> None:
        self._data.clear()

    def set(self, key: K, value: V) -> None:
        self._data[key] = value

    def get(self, key: K) -> V:
        """Return the stored value, or a fresh default when the key is absent."""
        if key not in self._data:
            return self._default_factory()
        return self._data[key]

    def has(self, key: K) -> bool:
        return key in self._data

    def remove(self, key: K) -> None:
        """Remove *key* if present; absent keys are ignored."""
        self._data.pop(key, None)

    def items(self) -> ItemsView[K, V]:
        return self._data.items()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data


class StringStore(Store[str, str]):
    """A store of strings whose missing entries read as the empty string."""

    def __init__(self) -> None:
        super().__init__(str)