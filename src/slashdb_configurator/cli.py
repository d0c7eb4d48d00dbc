"""Command-line tool to list delta candidates and apply a selection."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import orjson

from .candidates import MalformedSchemaError, derive_candidates
from .logging_io import configure_logging, make_change_logger
from .selector import apply_selection, default_shape
from .utils import load_schema


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slashdb-configurator",
        description="List delta field candidates for a SlashDB source schema.",
    )
    parser.add_argument("--schema", type=str, required=True, help="Path to the schema JSON file")
    parser.add_argument("--select", type=str, default=None, help="Candidate value to store as the delta field")
    parser.add_argument("--log-dir", type=str, default=None, help="Record the change event in this directory")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Diagnostic log level")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run."""

    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        schema = load_schema(args.schema)
    except MalformedSchemaError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.select is None:
        for candidate in derive_candidates(schema):
            sys.stdout.write(orjson.dumps(candidate.model_dump()).decode("utf-8") + "\n")
        return 0

    notify = make_change_logger(Path(args.log_dir), {"source": "cli"}) if args.log_dir else None
    configuration = apply_selection(default_shape(), args.select, notify=notify)
    sys.stdout.write(orjson.dumps(configuration.as_dict()).decode("utf-8") + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
