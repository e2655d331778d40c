"""Board of cells covered by uniquely sized tiles.

``TileBoard`` places the tiles of a ``DivisibleTileCollection`` on a grid
and applies splits geometrically: the larger piece keeps the parent's
top-left corner and the smaller piece is placed right next to it.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from tile_partition.core.collection import DivisibleTileCollection
from tile_partition.core.splitting import Axis
from tile_partition.core.tiles import Tile, TileIdGenerator
from tile_partition.utils import get_logger

logger = get_logger(__name__)

# Grid value of a cell not covered by any tile.
EMPTY = -1


@dataclass(frozen=True)
class SplitRecord:
    """One applied split: *parent* replaced by *first* and *second*."""

    parent: Tile
    first: Tile
    second: Tile


class TileBoard:
    """A ``width`` x ``height`` grid, initially covered by a single tile.

    The grid has shape ``(height, width)`` and stores tile ids, so cell
    ``(x, y)`` lives at ``grid[y, x]``.

    Args:
        width: Number of columns, at least 1.
        height: Number of rows, at least 1.
        rng: Random source shared with the tile collection.
        rng_seed: Seed for a fresh ``numpy`` generator when ``rng`` is None.

    Raises:
        ValueError: If a dimension is not positive.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: np.random.Generator | None = None,
        *,
        rng_seed: int | None = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Invalid board dimensions: {width}x{height}")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else np.random.default_rng(rng_seed)
        self.collection = DivisibleTileCollection(self.rng)
        self.ids = TileIdGenerator()
        self.history: list[SplitRecord] = []
        self.grid: NDArray[np.int64] = np.full((height, width), EMPTY, dtype=np.int64)
        self._tiles: dict[int, Tile] = {}

        self.add_tile(self.ids.new_tile(width, height), 0, 0)

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def location(self, tile: Tile) -> tuple[int, int] | None:
        """Return the ``(x, y)`` of *tile*'s top-left cell, or None if absent."""
        if self._tiles.get(tile.id) != tile:
            return None
        cells = np.argwhere(self.grid == tile.id)
        if len(cells) == 0:
            return None
        y, x = cells[0]
        return (int(x), int(y))

    def tile_at(self, x: int, y: int) -> Tile | None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        tile_id = int(self.grid[y, x])
        return None if tile_id == EMPTY else self._tiles[tile_id]

    def add_tile(self, tile: Tile, x: int, y: int) -> bool:
        """Put *tile* on the board with its top-left cell at ``(x, y)``.

        Args:
            tile: The tile to place.
            x: Column of the top-left cell.
            y: Row of the top-left cell.

        Returns:
            False if the tile does not fit inside the board, overlaps
            another tile, reuses the id of a tile on the board, or its
            dimensions are taken; True otherwise.
        """
        if tile.id in self._tiles:
            return False
        if x < 0 or y < 0 or x + tile.width > self.width or y + tile.height > self.height:
            return False
        region = self.grid[y : y + tile.height, x : x + tile.width]
        if np.any(region != EMPTY):
            return False
        if not self.collection.add(tile):
            return False
        region[...] = tile.id
        self._tiles[tile.id] = tile
        return True

    def remove_tile(self, tile: Tile) -> bool:
        """Take *tile* off the board and out of the collection.

        Returns:
            False if the tile is not on the board.
        """
        if self._tiles.get(tile.id) != tile:
            return False
        self.collection.remove(tile)
        self.grid[self.grid == tile.id] = EMPTY
        del self._tiles[tile.id]
        return True

    # ------------------------------------------------------------------
    # Splitting
    # ------------------------------------------------------------------

    def split_random_tile(self) -> bool:
        """Split a random divisible tile at a random position.

        Returns:
            True if a split happened, False when the board is finished.
        """
        tile = self.collection.get_and_remove_random_tile()
        if tile is None:
            return False
        if not self.split_tile(tile):
            if self.location(tile) is not None:
                self.collection.add(tile)
            return False
        return True

    def split_tile(self, tile: Tile) -> bool:
        """Replace *tile* by the two pieces of a random legal split.

        Args:
            tile: A tile on the board. It may already have been taken out
                of the collection by ``get_and_remove_random_tile``.

        Returns:
            True on success, False if the tile is not on the board or has
            no legal split.
        """
        origin = self.location(tile)
        if origin is None or not self.collection.is_divisible(tile):
            return False

        self.remove_tile(tile)
        split = self.collection.get_dimensions_after_split(tile)
        if split is None:
            raise RuntimeError(f"No split left for {tile} after removing it")

        (w1, h1), (w2, h2) = split.dimensions()
        first = self._new_tile(w1, h1)
        second = self._new_tile(w2, h2)
        x, y = origin
        if split.axis is Axis.HEIGHT:
            second_origin = (x, y + h1)
        else:
            second_origin = (x + w1, y)

        if not (self.add_tile(first, x, y) and self.add_tile(second, *second_origin)):
            raise RuntimeError(f"Could not place the pieces of {tile}")

        self.history.append(SplitRecord(tile, first, second))
        logger.debug("Split %s into %dx%d and %dx%d", tile, w1, h1, w2, h2)
        return True

    def _new_tile(self, width: int, height: int) -> Tile:
        # Skip ids already taken by tiles placed with caller-chosen ids.
        tile = self.ids.new_tile(width, height)
        while tile.id in self._tiles:
            tile = self.ids.new_tile(width, height)
        return tile

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def num_tiles(self) -> int:
        return self.collection.size()

    def is_finished(self) -> bool:
        """Return True when no tile on the board can be split any further."""
        return self.collection.is_empty()

    def tiles(self) -> list[Tile]:
        """Return the tiles on the board ordered by id."""
        return [self._tiles[k] for k in sorted(self._tiles)]

    def is_fully_covered(self) -> bool:
        return bool(np.all(self.grid != EMPTY))

    def render(self) -> str:
        """Render the grid as rows of tile ids followed by the collection dump.

        Ids are right-aligned to the width of the largest issued or placed id
        and empty cells are shown as ``-``.
        """
        digits = len(str(max(self.ids.issued, max(self._tiles, default=0))))
        rows = []
        for row in self.grid:
            cells = ["-" if v == EMPTY else str(int(v)).rjust(digits) for v in row]
            rows.append("".join(cell + "," for cell in cells))
        return "\n".join(rows) + "\n\n" + str(self.collection)

    def __repr__(self) -> str:
        return f"TileBoard({self.width}x{self.height}, tiles={self.num_tiles()})"
