"""Command-line tools for haptic timeline files.

Subcommands:
- reconstruct: capture samples JSON -> pattern JSON
- expand: pattern JSON -> capture samples JSON
- trim: re-slice a pattern to resume at a seek position
- compose: composer events JSON -> pattern JSON
- info: summarize a pattern
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from ..config import TimelineConfig, load_config
from ..timeline import (
    ContinuousEvent,
    compose,
    composition_duration,
    drop_insignificant_curves,
    expand,
    reconstruct,
    trim,
)
from ..timeline.codec import (
    composition_from_dict,
    load_pattern,
    load_samples,
    pattern_to_dict,
    samples_to_list,
)


def _status(message: str) -> None:
    print(f"[TIMELINE] {message}", file=sys.stderr)


def _write_json(data: Any, output: Path | None, indent: int) -> None:
    text = json.dumps(data, indent=indent)
    if output is None:
        print(text)
    else:
        output.write_text(text + "\n")
        _status(f"Wrote {output}")


def cmd_reconstruct(args: argparse.Namespace, config: TimelineConfig) -> None:
    samples = load_samples(args.samples)
    pattern = reconstruct(samples)
    _status(f"{len(samples)} samples -> {len(pattern.events)} events, {len(pattern.curves)} curves")
    _write_json(pattern_to_dict(pattern), args.output, config.output.json_indent)


def cmd_expand(args: argparse.Namespace, config: TimelineConfig) -> None:
    pattern = load_pattern(args.pattern)
    samples = expand(pattern, tolerance_ms=config.match_tolerance_ms)
    _status(f"{len(pattern.events)} events -> {len(samples)} samples")
    _write_json(samples_to_list(samples), args.output, config.output.json_indent)


def cmd_trim(args: argparse.Namespace, config: TimelineConfig) -> None:
    pattern = load_pattern(args.pattern)
    trimmed = trim(pattern, args.seek, tolerance_ms=config.match_tolerance_ms)
    if config.drop_insignificant_curves:
        trimmed = drop_insignificant_curves(trimmed)
    _status(f"Seek {args.seek}ms: {len(trimmed.events)} events, {len(trimmed.curves)} curves remain")
    _write_json(pattern_to_dict(trimmed), args.output, config.output.json_indent)


def cmd_compose(args: argparse.Namespace, config: TimelineConfig) -> None:
    with open(args.composition) as f:
        events = composition_from_dict(json.load(f))
    pattern = compose(events)
    length = composition_duration(events, transient_tail=config.transient_tail)
    _status(f"{len(events)} composer events, {length:.3f}s long")
    _write_json(pattern_to_dict(pattern), args.output, config.output.json_indent)


def cmd_info(args: argparse.Namespace, config: TimelineConfig) -> None:
    pattern = load_pattern(args.pattern)
    continuous = sum(1 for e in pattern.events if isinstance(e, ContinuousEvent))
    print(f"Events:     {len(pattern.events)} ({len(pattern.events) - continuous} transient, "
          f"{continuous} continuous)")
    print(f"Curves:     {len(pattern.curves)}")
    print(f"Duration:   {pattern.duration:.1f}ms")


COMMANDS = {
    "reconstruct": cmd_reconstruct,
    "expand": cmd_expand,
    "trim": cmd_trim,
    "compose": cmd_compose,
    "info": cmd_info,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="haptic-timeline",
        description="Reconstruct, trim and expand haptic patterns",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: ./haptic-timeline.yaml if present)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("reconstruct", help="Capture samples -> pattern")
    p.add_argument("samples", type=Path, help="Samples JSON file")
    p.add_argument("-o", "--output", type=Path, help="Output file (default: stdout)")

    p = sub.add_parser("expand", help="Pattern -> capture samples")
    p.add_argument("pattern", type=Path, help="Pattern JSON file")
    p.add_argument("-o", "--output", type=Path, help="Output file (default: stdout)")

    p = sub.add_parser("trim", help="Trim a pattern to resume at a seek position")
    p.add_argument("pattern", type=Path, help="Pattern JSON file")
    p.add_argument("--seek", type=float, required=True, help="Seek position in ms")
    p.add_argument("-o", "--output", type=Path, help="Output file (default: stdout)")

    p = sub.add_parser("compose", help="Composer events -> pattern")
    p.add_argument("composition", type=Path, help="Composition JSON file")
    p.add_argument("-o", "--output", type=Path, help="Output file (default: stdout)")

    p = sub.add_parser("info", help="Summarize a pattern")
    p.add_argument("pattern", type=Path, help="Pattern JSON file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the haptic-timeline command."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"[TIMELINE] Error loading config: {e}", file=sys.stderr)
        return 1

    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        COMMANDS[args.command](args, config)
    except (OSError, ValueError) as e:
        print(f"[TIMELINE] Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
