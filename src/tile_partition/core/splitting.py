"""Candidate enumeration and random choice of tile splits.

A split cuts a tile along one axis at an integer position into two pieces
of different length along that axis. For an axis of length ``n`` the cut
``j`` runs over ``1 <= j < n // 2`` (integer division), producing pieces of
lengths ``n - j`` and ``j``. Axes of length 3 or less therefore contribute
no candidates at all.

``find_split`` shuffles every candidate and returns the first one whose two
pieces both have untaken dimensions. The shuffle makes every feasible
candidate equally likely.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import numpy as np

from tile_partition.core.tiles import Dimensions, canonical_dimensions

# Predicate telling whether a (width, height) pair is already in use.
TakenPredicate = Callable[[int, int], bool]


class Axis(Enum):
    """The axis a split cuts across."""

    WIDTH = 0
    HEIGHT = 1


@dataclass(frozen=True)
class Split:
    """The two pieces produced by cutting a tile.

    Attributes:
        axis: Which side of the parent was divided.
        first: ``(width, height)`` of the larger piece along ``axis``.
        second: ``(width, height)`` of the smaller piece along ``axis``.
    """

    axis: Axis
    first: tuple[int, int]
    second: tuple[int, int]

    def dimensions(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """Return ``(first, second)`` as oriented ``(width, height)`` pairs."""
        return (self.first, self.second)

    def canonical(self) -> tuple[Dimensions, Dimensions]:
        return (canonical_dimensions(*self.first), canonical_dimensions(*self.second))

    def conserves(self, width: int, height: int) -> bool:
        """Return True if the pieces exactly tile a ``width`` x ``height`` parent.

        Args:
            width: Parent width.
            height: Parent height.

        Returns:
            True when both pieces share the uncut side and the cut sides sum
            to the parent's length, with every side positive.
        """
        (w1, h1), (w2, h2) = self.first, self.second
        if min(w1, h1, w2, h2) < 1:
            return False
        if self.axis is Axis.WIDTH:
            return h1 == h2 == height and w1 + w2 == width
        return w1 == w2 == width and h1 + h2 == height


def candidate_splits(width: int, height: int) -> list[Split]:
    """Enumerate every syntactically valid split of a tile, in a fixed order.

    Width-axis cuts come first, each axis ordered by increasing cut ``j``.

    Args:
        width: Tile width.
        height: Tile height.

    Returns:
        A list of splits, empty when both sides are 3 or less.
    """
    sides = (width, height)
    candidates: list[Split] = []
    for axis in Axis:
        length = sides[axis.value]
        for j in range(1, length // 2):
            first = list(sides)
            first[axis.value] = length - j
            second = list(sides)
            second[axis.value] = j
            if first[axis.value] != second[axis.value]:
                candidates.append(Split(axis, (first[0], first[1]), (second[0], second[1])))
    return candidates


def find_split(
    width: int,
    height: int,
    is_taken: TakenPredicate,
    rng: np.random.Generator,
) -> Split | None:
    """Pick a split uniformly at random among those with free dimensions.

    Args:
        width: Tile width.
        height: Tile height.
        is_taken: Returns True for ``(w, h)`` pairs already in use; it must
            treat ``(w, h)`` and ``(h, w)`` alike.
        rng: Random source used to shuffle the candidates.

    Returns:
        A split whose two pieces are both untaken, or None if there is none.
    """
    candidates = candidate_splits(width, height)
    if not candidates:
        return None
    for index in rng.permutation(len(candidates)):
        split = candidates[int(index)]
        if not is_taken(*split.first) and not is_taken(*split.second):
            return split
    return None
