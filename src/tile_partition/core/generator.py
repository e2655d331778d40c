"""Generation driver: split random tiles until the board is finished.

Starting from a single tile covering the board, ``generate`` keeps splitting
random divisible tiles until none is left or the tile-count limit is reached.
Every split replaces one tile of positive integer area by two smaller ones,
so a ``W`` x ``H`` board is finished after at most ``W * H - 1`` splits.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from tile_partition.core.board import TileBoard
from tile_partition.utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeneratorConfig:
    """Parameters of one generation run.

    Attributes:
        width: Board width, at least 1.
        height: Board height, at least 1.
        max_tiles: Stop once the board holds this many tiles; None for no
            limit.
        seed: Seed of the random source; None for fresh entropy.

    Raises:
        ValueError: If a dimension or the tile limit is not positive.
    """

    width: int
    height: int
    max_tiles: int | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Invalid board dimensions: {self.width}x{self.height}")
        if self.max_tiles is not None and self.max_tiles < 1:
            raise ValueError(f"Invalid tile limit: {self.max_tiles}. Must be >= 1.")


def generate(
    width: int,
    height: int,
    max_tiles: int | None = None,
    *,
    rng_seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> TileBoard:
    """Generate a board of uniquely sized tiles.

    Args:
        width: Board width.
        height: Board height.
        max_tiles: Optional upper bound on the number of tiles.
        rng_seed: Optional seed for reproducibility.
        rng: Explicit random source; takes precedence over ``rng_seed``.

    Returns:
        The finished board. Its ``history`` lists the splits in order.

    Raises:
        ValueError: If a dimension or the tile limit is not positive.
    """
    config = GeneratorConfig(width, height, max_tiles, rng_seed)
    board = TileBoard(config.width, config.height, rng, rng_seed=config.seed)
    limit = config.max_tiles if config.max_tiles is not None else config.width * config.height

    while board.num_tiles() < limit and not board.is_finished():
        board.split_random_tile()

    logger.info(
        "Generated %dx%d board with %d tiles after %d splits",
        width,
        height,
        board.num_tiles(),
        len(board.history),
    )
    return board


def generate_from_config(config: GeneratorConfig) -> TileBoard:
    """Run ``generate`` with the parameters of *config*."""
    return generate(config.width, config.height, config.max_tiles, rng_seed=config.seed)
