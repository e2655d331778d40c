"""Command-line entry point: generate a board and print it."""

from __future__ import annotations

import argparse
import logging

from tile_partition.core.generator import GeneratorConfig, generate_from_config
from tile_partition.utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tile-partition",
        description="Partition a board into tiles that all have different dimensions.",
    )
    parser.add_argument("--width", type=int, default=10, help="Board width (default: 10)")
    parser.add_argument("--height", type=int, default=10, help="Board height (default: 10)")
    parser.add_argument(
        "--max-tiles",
        type=int,
        default=10,
        help="Stop after this many tiles; 0 means no limit (default: 10)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every split")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = GeneratorConfig(
            width=args.width,
            height=args.height,
            max_tiles=args.max_tiles or None,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))

    board = generate_from_config(config)
    print(board.render(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
