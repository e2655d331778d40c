"""Collection of tiles with pairwise distinct dimensions.

``DivisibleTileCollection`` tracks which tiles can still be split without
creating a piece whose dimensions are already taken. Divisibility depends on
every taken dimension in the collection, so each mutation is followed by a
``reclassify`` pass over the opposite subset:

- adding a tile can only take dimensions away, so divisible tiles may become
  undivisible;
- removing a tile can only free dimensions, so undivisible tiles may become
  divisible.

After every public call the following hold:

- **A** every tracked tile is in exactly one of ``divisible``/``undivisible``;
- **B** the taken dimensions are exactly those of the tracked tiles, and no
  two tracked tiles share them;
- **C** a tile is in ``divisible`` iff ``find_split`` succeeds for it against
  the current taken dimensions.
"""

from __future__ import annotations

import numpy as np

from tile_partition.core.dimensions import DimensionSet
from tile_partition.core.splitting import Split, find_split
from tile_partition.core.tiles import Tile
from tile_partition.utils import get_logger

logger = get_logger(__name__)


class DivisibleTileCollection:
    """Tiles with unique dimensions, partitioned by whether they can be split.

    The sets are insertion-ordered dicts so that random selection is
    reproducible for a given seed.

    Args:
        rng: Random source for split and tile selection. Takes precedence
            over ``rng_seed``.
        rng_seed: Seed for a fresh ``numpy`` generator when ``rng`` is None.
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        *,
        rng_seed: int | None = None,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(rng_seed)
        self._divisible: dict[Tile, None] = {}
        self._undivisible: dict[Tile, None] = {}
        self._dimensions = DimensionSet()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, tile: Tile) -> bool:
        """Track *tile* unless a tile with the same dimensions is present.

        Args:
            tile: The tile to add.

        Returns:
            True on success, False (and no change) if its dimensions are
            already taken.
        """
        if not self._dimensions.add(tile.width, tile.height):
            logger.debug("Rejected %s: dimensions %s already taken", tile, tile.dimensions)
            return False

        if self.is_divisible(tile):
            self._divisible[tile] = None
        else:
            self._undivisible[tile] = None

        self.reclassify(promote=False)
        return True

    def remove(self, tile: Tile) -> bool:
        """Stop tracking *tile* and free its dimensions.

        Args:
            tile: The tile to remove.

        Returns:
            True on success, False (and no change) if it is not tracked.
        """
        if tile in self._divisible:
            del self._divisible[tile]
        elif tile in self._undivisible:
            del self._undivisible[tile]
        else:
            logger.debug("Cannot remove untracked tile %s", tile)
            return False

        self._dimensions.discard(tile.width, tile.height)
        self.reclassify(demote=False)
        return True

    def get_and_remove_random_tile(self) -> Tile | None:
        """Remove and return a uniformly random divisible tile.

        Returns:
            The removed tile, or None when no tile is divisible.
        """
        if self.is_empty():
            return None
        index = int(self._rng.integers(len(self._divisible)))
        tile = list(self._divisible)[index]
        self.remove(tile)
        return tile

    def reclassify(self, *, promote: bool = True, demote: bool = True) -> int:
        """Move tiles whose divisibility changed into the right subset.

        Args:
            promote: Re-check undivisible tiles and move the splittable ones.
            demote: Re-check divisible tiles and move the blocked ones.

        Returns:
            The number of tiles moved.
        """
        moved = 0
        if demote:
            for tile in [t for t in self._divisible if not self.is_divisible(t)]:
                del self._divisible[tile]
                self._undivisible[tile] = None
                moved += 1
        if promote:
            for tile in [t for t in self._undivisible if self.is_divisible(t)]:
                del self._undivisible[tile]
                self._divisible[tile] = None
                moved += 1
        if moved:
            logger.debug("Reclassified %d tile(s)", moved)
        return moved

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, tile: Tile) -> bool:
        """Return True if a tile with *tile*'s dimensions is tracked."""
        return self.contains_dimensions(tile.width, tile.height)

    def contains_dimensions(self, width: int, height: int) -> bool:
        return self._dimensions.contains(width, height)

    def __contains__(self, tile: object) -> bool:
        return isinstance(tile, Tile) and self.contains(tile)

    def get_dimensions_after_split(self, tile: Tile) -> Split | None:
        """Pick a random split of *tile* whose pieces have free dimensions.

        Args:
            tile: Any tile, tracked or not.

        Returns:
            The chosen split, or None if no legal split exists.
        """
        return find_split(tile.width, tile.height, self._dimensions.contains, self._rng)

    def is_divisible(self, tile: Tile) -> bool:
        return self.get_dimensions_after_split(tile) is not None

    def is_empty(self) -> bool:
        """Return True when no tracked tile can be split any further."""
        return not self._divisible

    def size(self) -> int:
        return len(self._divisible) + len(self._undivisible)

    def __len__(self) -> int:
        return self.size()

    def divisible_tiles(self) -> tuple[Tile, ...]:
        return tuple(self._divisible)

    def undivisible_tiles(self) -> tuple[Tile, ...]:
        return tuple(self._undivisible)

    def tiles(self) -> tuple[Tile, ...]:
        return self.divisible_tiles() + self.undivisible_tiles()

    def verify_invariants(self) -> None:
        """Assert that the partition, uniqueness and divisibility invariants hold.

        Raises:
            AssertionError: If any invariant is violated.
        """
        overlap = self._divisible.keys() & self._undivisible.keys()
        assert not overlap, f"Invariant A: tiles in both subsets: {overlap}"

        dims = [tile.dimensions for tile in self.tiles()]
        assert len(dims) == len(set(dims)), f"Invariant B: duplicate dimensions in {dims}"
        assert set(dims) == set(self._dimensions), (
            f"Invariant B: taken dimensions {list(self._dimensions)} "
            f"do not match tracked tiles {sorted(dims)}"
        )

        for tile in self._divisible:
            assert self.is_divisible(tile), f"Invariant C: {tile} marked divisible"
        for tile in self._undivisible:
            assert not self.is_divisible(tile), f"Invariant C: {tile} marked undivisible"

    def __str__(self) -> str:
        lines = [f"{tile} [DIVISIBLE]" for tile in self._divisible]
        lines += [f"{tile} [UNDIVISIBLE]" for tile in self._undivisible]
        return "".join(line + "\n" for line in lines)

    def __repr__(self) -> str:
        return (
            f"DivisibleTileCollection(divisible={len(self._divisible)}, "
            f"undivisible={len(self._undivisible)})"
        )
