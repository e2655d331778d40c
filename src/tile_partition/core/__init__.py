"""Core domain types for the unique-dimension tile partition generator."""

from tile_partition.core.board import EMPTY, SplitRecord, TileBoard
from tile_partition.core.collection import DivisibleTileCollection
from tile_partition.core.dimensions import DimensionSet
from tile_partition.core.generator import GeneratorConfig, generate, generate_from_config
from tile_partition.core.splitting import Axis, Split, candidate_splits, find_split
from tile_partition.core.tiles import Dimensions, Tile, TileIdGenerator, canonical_dimensions

__all__ = [
    "Axis",
    "DimensionSet",
    "Dimensions",
    "DivisibleTileCollection",
    "EMPTY",
    "GeneratorConfig",
    "Split",
    "SplitRecord",
    "Tile",
    "TileBoard",
    "TileIdGenerator",
    "canonical_dimensions",
    "candidate_splits",
    "find_split",
    "generate",
    "generate_from_config",
]
