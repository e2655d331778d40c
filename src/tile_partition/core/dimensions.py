"""Bookkeeping of the dimensions currently taken by live tiles."""

from __future__ import annotations

from collections.abc import Iterator

from tile_partition.core.tiles import Dimensions, Tile, canonical_dimensions


class DimensionSet:
    """Set of canonical ``(largest, smallest)`` pairs.

    A pair is present iff exactly one tracked tile has those dimensions;
    the owning collection refuses a second tile with a taken pair, so the
    set never needs reference counts.
    """

    def __init__(self) -> None:
        self._taken: set[Dimensions] = set()

    def add(self, width: int, height: int) -> bool:
        """Mark a pair as taken.

        Returns:
            False if the pair was already taken, True otherwise.
        """
        key = canonical_dimensions(width, height)
        if key in self._taken:
            return False
        self._taken.add(key)
        return True

    def discard(self, width: int, height: int) -> bool:
        """Free a pair.

        Returns:
            False if the pair was not taken, True otherwise.
        """
        key = canonical_dimensions(width, height)
        if key not in self._taken:
            return False
        self._taken.remove(key)
        return True

    def contains(self, width: int, height: int) -> bool:
        return canonical_dimensions(width, height) in self._taken

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Tile):
            return item.dimensions in self._taken
        if isinstance(item, tuple) and len(item) == 2:
            return self.contains(*item)
        return False

    def __len__(self) -> int:
        return len(self._taken)

    def __iter__(self) -> Iterator[Dimensions]:
        return iter(sorted(self._taken))

    def __repr__(self) -> str:
        return f"DimensionSet({sorted(self._taken)})"
