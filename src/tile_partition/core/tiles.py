"""Tile representation and tile id generation."""

from __future__ import annotations

from dataclasses import dataclass

# Canonical unordered dimension pair: (largest side, smallest side).
Dimensions = tuple[int, int]


def canonical_dimensions(width: int, height: int) -> Dimensions:
    """Return the unordered pair ``(width, height)`` in canonical form.

    Args:
        width: Extent along the x axis.
        height: Extent along the y axis.

    Returns:
        A tuple ``(largest, smallest)`` so that 3x5 and 5x3 collide.
    """
    return (width, height) if width >= height else (height, width)


@dataclass(frozen=True)
class Tile:
    """A rectangle identified by its dimensions and a unique id.

    A tile knows nothing about where it lies on a board. Two tiles with
    swapped width and height are dimension-equal, but remain distinct
    objects because of their ids.

    Attributes:
        width: Extent along the x axis, at least 1.
        height: Extent along the y axis, at least 1.
        id: Sequential identifier handed out by a ``TileIdGenerator``.

    Raises:
        ValueError: If a side is not positive or the id is negative.
    """

    width: int
    height: int
    id: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1 or self.id < 0:
            raise ValueError(
                f"Invalid tile: width={self.width}, height={self.height}, id={self.id}"
            )

    @property
    def dimensions(self) -> Dimensions:
        """Canonical ``(largest, smallest)`` dimension pair."""
        return canonical_dimensions(self.width, self.height)

    @property
    def largest_side(self) -> int:
        return max(self.width, self.height)

    @property
    def smallest_side(self) -> int:
        return min(self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    def has_same_dimensions(self, other: Tile) -> bool:
        """Return True if *other* has the same unordered width/height pair.

        Args:
            other: The tile to compare against. Its id is ignored.

        Returns:
            True when ``{width, height}`` match as unordered pairs.
        """
        return self.dimensions == other.dimensions

    def __str__(self) -> str:
        """Return a human-readable string like ``id: 3, width: 4, height: 2``."""
        return f"id: {self.id}, width: {self.width}, height: {self.height}"


class TileIdGenerator:
    """Hands out monotonically increasing tile ids, starting at zero.

    Each board owns its own generator, so independent generation runs
    number their tiles identically.
    """

    def __init__(self) -> None:
        self._next = 0

    @property
    def issued(self) -> int:
        """Number of ids handed out so far."""
        return self._next

    def next_id(self) -> int:
        tile_id = self._next
        self._next += 1
        return tile_id

    def new_tile(self, width: int, height: int) -> Tile:
        """Create a tile with the next free id.

        Raises:
            ValueError: If either side is not positive. No id is consumed.
        """
        if width < 1 or height < 1:
            raise ValueError(f"Invalid tile: width={width}, height={height}")
        return Tile(width, height, self.next_id())
