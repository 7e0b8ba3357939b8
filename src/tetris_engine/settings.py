"""Command line configuration and logging setup."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .board import HEIGHT, WIDTH


@dataclass(frozen=True)
class Settings:
    interval: float = 1.0  # seconds between gravity ticks
    width: int = WIDTH
    height: int = HEIGHT
    seed: Optional[int] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None
    ascii: bool = False


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tetris_engine", description="Play Tetris.")
    parser.add_argument(
        "-i", "--interval", type=_positive_float, default=1.0, help="Seconds between gravity ticks."
    )
    parser.add_argument("-w", "--width", type=_positive_int, default=WIDTH, help="Board width in cells.")
    parser.add_argument("-H", "--height", type=_positive_int, default=HEIGHT, help="Board height in cells.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible piece sequences.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    parser.add_argument("--log-file", default=None, help="Write logs to this file instead of stderr.")
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Print text frames to stdout instead of opening a pygame window.",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Settings:
    args = build_parser().parse_args(argv)
    return Settings(
        interval=args.interval,
        width=args.width,
        height=args.height,
        seed=args.seed,
        log_level=args.log_level.upper(),
        log_file=args.log_file,
        ascii=args.ascii,
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        filename=settings.log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
