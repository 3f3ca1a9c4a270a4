"""CLI entry point for the net-worth projector."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from .engine import project
from .params import ParameterError, Parameters, load_params
from .report import render_summary, write_json
from .validate import validate_params


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rent vs. buy net-worth projector")
    parser.add_argument("params", help="Path to parameters JSON file")
    parser.add_argument("-o", "--output", default="projection.json", help="Output JSON path")
    parser.add_argument("--years", type=int, help="Override yearsToAnalyze")
    parser.add_argument("--validate", action="store_true", help="Validate parameters only")
    parser.add_argument("--summary", action="store_true", help="Print text summary to stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _print_validation(errors: list[str], warnings: list[str]) -> None:
    for warning in warnings:
        print(f"WARNING: {warning}")
    for error in errors:
        print(f"ERROR: {error}", file=sys.stderr)


def _load(args: argparse.Namespace) -> Parameters:
    params = load_params(args.params)
    if args.years is not None:
        params = params.replace(years_to_analyze=args.years)
    return params


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        params = _load(args)
    except (ParameterError, OSError, json.JSONDecodeError) as exc:
        print(f"Failed to load parameters: {exc}", file=sys.stderr)
        return 2

    validation = validate_params(params)
    _print_validation(validation.errors, validation.warnings)
    if not validation.is_valid:
        return 1

    if args.validate:
        print("Parameters are valid.")
        return 0

    result = project(params)
    write_json(args.output, result)
    if args.summary:
        print(render_summary(result))
    print(f"Wrote projection to {Path(args.output)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
