"""Integration tests for full board generation.

Covers termination, coverage, dimension uniqueness, the tile-count limit and
reproducibility for a fixed seed.
"""

from __future__ import annotations

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tile_partition.core.board import TileBoard
from tile_partition.core.generator import GeneratorConfig, generate, generate_from_config

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _split_trace(board: TileBoard) -> list[tuple]:
    """Flatten a board's split history into comparable tuples."""
    return [
        (
            (r.parent.id, r.parent.width, r.parent.height),
            (r.first.id, r.first.width, r.first.height),
            (r.second.id, r.second.width, r.second.height),
        )
        for r in board.history
    ]


def _assert_valid_partition(board: TileBoard) -> None:
    """Check coverage, area conservation and dimension uniqueness."""
    tiles = board.tiles()
    assert board.is_fully_covered()
    assert sum(t.area for t in tiles) == board.width * board.height
    dims = [t.dimensions for t in tiles]
    assert len(dims) == len(set(dims)), f"Duplicate dimensions: {sorted(dims)}"
    for tile in tiles:
        assert int(np.count_nonzero(board.grid == tile.id)) == tile.area
    board.collection.verify_invariants()


# ---------------------------------------------------------------------------
# GeneratorConfig
# ---------------------------------------------------------------------------


class TestGeneratorConfig:
    """Tests for validation of generation parameters."""

    def test_defaults(self) -> None:
        config = GeneratorConfig(10, 10)
        assert config.max_tiles is None
        assert config.seed is None

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-3, -3)])
    def test_invalid_dimensions(self, width: int, height: int) -> None:
        with pytest.raises(ValueError, match="Invalid board dimensions"):
            GeneratorConfig(width, height)

    @pytest.mark.parametrize("limit", [0, -1])
    def test_invalid_limit(self, limit: int) -> None:
        with pytest.raises(ValueError, match="Invalid tile limit"):
            GeneratorConfig(10, 10, max_tiles=limit)


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class TestGenerate:
    """Tests for the generation driver."""

    def test_runs_to_completion(self) -> None:
        board = generate(10, 10, rng_seed=42)
        assert board.is_finished()
        assert len(board.history) <= 10 * 10 - 1
        assert board.num_tiles() == 1 + len(board.history)
        _assert_valid_partition(board)

    def test_tile_limit(self) -> None:
        board = generate(10, 10, 10, rng_seed=42)
        assert board.num_tiles() <= 10
        assert board.num_tiles() == 10 or board.is_finished()
        _assert_valid_partition(board)

    def test_limit_of_one_means_no_split(self) -> None:
        board = generate(10, 10, 1, rng_seed=0)
        assert board.num_tiles() == 1
        assert board.history == []

    def test_undivisible_board(self) -> None:
        board = generate(3, 3, rng_seed=0)
        assert board.num_tiles() == 1
        assert board.is_finished()

    def test_invalid_arguments(self) -> None:
        with pytest.raises(ValueError):
            generate(0, 10)

    def test_same_seed_same_splits(self) -> None:
        a = generate(14, 9, rng_seed=2024)
        b = generate(14, 9, rng_seed=2024)
        assert _split_trace(a) == _split_trace(b)
        assert np.array_equal(a.grid, b.grid)

    def test_same_seed_same_splits_with_limit(self) -> None:
        a = generate(14, 9, 6, rng_seed=5)
        b = generate(14, 9, 6, rng_seed=5)
        assert _split_trace(a) == _split_trace(b)

    def test_explicit_rng(self) -> None:
        a = generate(9, 7, rng=np.random.default_rng(8))
        b = generate(9, 7, rng_seed=8)
        assert _split_trace(a) == _split_trace(b)

    def test_generate_from_config(self) -> None:
        config = GeneratorConfig(12, 8, max_tiles=7, seed=3)
        a = generate_from_config(config)
        b = generate(12, 8, 7, rng_seed=3)
        assert _split_trace(a) == _split_trace(b)

    @settings(max_examples=40, deadline=None)
    @given(
        width=st.integers(1, 14),
        height=st.integers(1, 14),
        seed=st.integers(0, 2**32 - 1),
    )
    def test_hypothesis_valid_partition(self, width: int, height: int, seed: int) -> None:
        board = generate(width, height, rng_seed=seed)
        assert board.is_finished()
        assert len(board.history) < width * height
        _assert_valid_partition(board)
