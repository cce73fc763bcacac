"""A fixed-capacity list of strings serialized as a JSON array."""

from __future__ import annotations

from collections.abc import Iterator

from . import dictionary as d


class SerializerArray:
    """Holds up to ``size`` string items and renders them as a JSON array."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[str] = []

    def add(self, item: str) -> bool:
        """Append an item; return False when the array is already full."""
        if len(self._items) >= self.size:
            return False
        self._items.append(item)
        return True

    def calculate_size(self) -> int:
        """Return the length of the serialized JSON representation."""
        size = len(d.JSON_ARRAY_PREFIX) + len(d.JSON_ARRAY_SUFFIX)
        if not self._items:
            return size
        size += (len(self._items) - 1) * len(d.JSON_PROPERTIES_SEPARATOR)
        size += sum(2 * len(d.JSON_ESCAPE_CHAR) + len(item) for item in self._items)
        return size

    def serialize(self) -> str:
        """Return the items as a JSON array of strings."""
        body = d.JSON_PROPERTIES_SEPARATOR.join(
            f"{d.JSON_ESCAPE_CHAR}{item}{d.JSON_ESCAPE_CHAR}" for item in self._items
        )
        return f"{d.JSON_ARRAY_PREFIX}{body}{d.JSON_ARRAY_SUFFIX}"

    def clear(self) -> None:
        """Remove all items, keeping the capacity."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]