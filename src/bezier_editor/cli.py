"""
Command-line interface for the curve editor.

Usage:
    bezier-editor gui [--config editor.yaml]
    bezier-editor sample 0,0 50,100 100,0 [--steps 100] [--include-end] [--at 0.5]
    bezier-editor config [--config editor.yaml]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from pydantic import ValidationError

from .config import EditorConfig, resolve_editor_config
from .core import CurveEvaluator, evaluate
from .settings import get_settings

Logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(message)s")


def parse_point(text: str) -> Tuple[float, float]:
    """Parse an ``X,Y`` command-line argument."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected X,Y but got '{text}'")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid coordinate in '{text}'") from exc


def add_shared_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML editor configuration (defaults to BEZIER_EDITOR_CONFIG_PATH or built-in values).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bezier-editor",
        description="Interactively edit a Bézier curve defined by control points.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # gui command
    gui_parser = subparsers.add_parser("gui", help="Launch the interactive editor.")
    add_shared_config_argument(gui_parser)

    # sample command
    sample_parser = subparsers.add_parser(
        "sample",
        help="Print the sampled curve polyline for the given control points.",
    )
    sample_parser.add_argument(
        "points",
        type=parse_point,
        nargs="+",
        metavar="X,Y",
        help="Control points in curve order (use '--' before negative coordinates).",
    )
    sample_parser.add_argument("--steps", type=int, default=None, help="Parameter subdivisions (default from config).")
    sample_parser.add_argument(
        "--include-end",
        action="store_true",
        help="Also sample t=1 so the polyline ends on the last control point.",
    )
    sample_parser.add_argument("--at", type=float, default=None, help="Evaluate a single parameter t in [0, 1] instead.")
    sample_parser.add_argument("--json", action="store_true", help="Emit JSON instead of one 'x y' pair per line.")
    add_shared_config_argument(sample_parser)

    # config command
    config_parser = subparsers.add_parser("config", help="Validate and print the effective configuration.")
    add_shared_config_argument(config_parser)

    return parser


def _load_config(args: argparse.Namespace) -> Optional[EditorConfig]:
    config_path: Optional[Path] = args.config or get_settings().config_path
    if config_path is not None and not config_path.exists():
        Logger.error("Configuration file not found: %s", config_path)
        return None
    return resolve_editor_config(config_path)


def _format_vertices(vertices: Sequence[Sequence[float]], as_json: bool) -> str:
    if as_json:
        return json.dumps([[float(x), float(y)] for x, y in vertices])
    return "\n".join(f"{float(x):.6g} {float(y):.6g}" for x, y in vertices)


def sample_command(args: argparse.Namespace) -> int:
    try:
        config = _load_config(args)
        if config is None:
            return 2
        if args.at is not None:
            if not 0.0 <= args.at <= 1.0:
                Logger.error("Parameter t must lie in [0, 1], got %s", args.at)
                return 2
            vertices: List[Tuple[float, float]] = [evaluate(args.points, args.at)]
        else:
            steps = args.steps if args.steps is not None else config.sample_steps
            evaluator = CurveEvaluator(steps=steps, include_end=args.include_end or config.include_end)
            vertices = [tuple(row) for row in evaluator.sample(args.points)]
    except Exception as exc:  # pylint: disable=broad-except
        Logger.error("Sampling failed: %s", exc)
        if Logger.isEnabledFor(logging.DEBUG):
            Logger.exception("Stack trace")
        return 1

    print(_format_vertices(vertices, args.json))
    return 0


def config_command(args: argparse.Namespace) -> int:
    try:
        config = _load_config(args)
        if config is None:
            return 2
    except Exception as exc:  # pylint: disable=broad-except
        Logger.error("Validation failed: %s", exc)
        if Logger.isEnabledFor(logging.DEBUG):
            Logger.exception("Stack trace")
        return 1

    print(json.dumps(config.model_dump(), indent=2))
    return 0


def gui_command(args: argparse.Namespace) -> int:
    try:
        config = _load_config(args)
        if config is None:
            return 2
    except Exception as exc:  # pylint: disable=broad-except
        Logger.error("Invalid configuration: %s", exc)
        return 1

    from .gui import run as run_gui  # Local import to avoid Qt initialization unless needed

    return run_gui(config)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.verbose)
    except ValidationError as exc:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        Logger.error("Invalid settings: %s", exc)
        return 1

    if args.command == "gui":
        return gui_command(args)
    if args.command == "sample":
        return sample_command(args)
    if args.command == "config":
        return config_command(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
