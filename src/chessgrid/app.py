"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessgrid.ui.settings import START_EMPTY, START_STANDARD, AppSettings


def _tile_size(value: str) -> int:
    size = int(value)
    if size < 1:
        raise argparse.ArgumentTypeError(f"tile size must be at least 1, got {size}")
    return size


def _parse_args(argv: list[str]) -> argparse.Namespace:
    defaults = AppSettings()
    parser = argparse.ArgumentParser(
        prog="chessgrid", description="Drag-and-drop chess board"
    )
    parser.add_argument(
        "--theme",
        default=defaults.board_theme,
        choices=["Classic", "Blue", "Green"],
        help="board colour scheme",
    )
    parser.add_argument(
        "--tile-size",
        type=_tile_size,
        default=defaults.tile_size,
        help="square size in scene pixels",
    )
    parser.add_argument(
        "--empty",
        action="store_true",
        help="start from an empty board instead of the standard setup",
    )
    parser.add_argument(
        "--no-highlights",
        action="store_true",
        help="do not highlight valid moves while dragging",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    return AppSettings(
        board_theme=args.theme,
        show_legal_moves=not args.no_highlights,
        tile_size=args.tile_size,
        start_position=START_EMPTY if args.empty else START_STANDARD,
    )


def main(argv: list[str] | None = None) -> None:
    """Launch the chessgrid application."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from chessgrid.ui.bootstrap import run_application

    sys.exit(run_application([sys.argv[0]], settings_from_args(args)))


if __name__ == "__main__":
    main()
