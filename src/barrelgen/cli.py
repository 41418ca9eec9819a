"""Command-line entry point: generate or check a barrel file once."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from barrelgen.config import BarrelConfig, load_config
from barrelgen.errors import BarrelError
from barrelgen.observability.context_logger import ContextLogger
from barrelgen.registry import Registry

__all__ = ["build_parser", "main"]

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the barrelgen CLI."""
    p = argparse.ArgumentParser(
        prog="barrelgen",
        description="Regenerate a barrel file re-exporting every component entry point.",
    )
    p.add_argument("-c", "--config", help="YAML config file. Flags override its values.")
    p.add_argument("--base", help="Directory to scan, relative to the working directory.")
    p.add_argument("--output", help="Barrel file path, relative to --base. Must already exist.")
    p.add_argument("--header", help="Literal text written at the top of the barrel file.")
    p.add_argument("--pattern", help="Regular expression matched against each file's absolute path.")
    p.add_argument(
        "--no-recursive",
        dest="recursive",
        action="store_false",
        default=None,
        help="Only match files directly inside --base.",
    )
    p.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if the barrel file is out of date.",
    )
    p.add_argument(
        "--log-level",
        default="info",
        choices=["trace", "debug", "info", "warn", "error"],
    )
    p.add_argument("--log-format", default="text", choices=["text", "json"])
    return p


def _config_from_args(args: argparse.Namespace) -> BarrelConfig:
    overrides: dict[str, Any] = {
        "base": args.base,
        "output": args.output,
        "header": args.header,
        "pattern": args.pattern,
        "recursive": args.recursive,
    }
    if args.config:
        return load_config(args.config, **overrides)
    return BarrelConfig.from_mapping({k: v for k, v in overrides.items() if v is not None})


def _check(registry: Registry) -> int:
    expected = registry.render()
    if expected is None:
        return EXIT_FAILED
    output = registry.output_path
    try:
        current = output.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        registry.logger.error("Cannot read barrel file", extra={"output": str(output), "reason": str(e)})
        return EXIT_FAILED
    if current != expected:
        registry.logger.error("Barrel file is out of date", extra={"output": str(output)})
        return EXIT_FAILED
    registry.logger.info("Barrel file is up to date")
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = _config_from_args(args)
    except BarrelError as e:
        print(str(e), file=sys.stderr)
        return EXIT_USAGE

    logger = ContextLogger.from_config(
        config, name="barrelgen", output_format=args.log_format, level=args.log_level
    )
    registry = Registry(config=config, logger=logger)

    if args.check:
        return _check(registry)

    registry.initial_scan()
    return EXIT_FAILED if registry.last_error is not None else EXIT_OK
