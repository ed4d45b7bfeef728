"""Command-line interface for jsxify."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import DEFAULT_OPTIONS, ConvertOptions, load_options
from .convert import convert
from .errors import InvalidOptions, UnsupportedNodeKind
from .io_utils import read_markup, write_jsx


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert an HTML fragment to JSX")
    parser.add_argument(
        "--input",
        default="-",
        help="HTML file to convert (default: read from stdin)",
    )
    parser.add_argument("--out", type=Path, help="Write the JSX to this file instead of stdout")
    parser.add_argument("--config", type=Path, help="YAML file with conversion options")
    parser.add_argument("--verbose", action="store_true", help="Log conversion details to stderr")
    return parser.parse_args(argv)


def _load_options(path: Optional[Path]) -> ConvertOptions:
    if path is None:
        return DEFAULT_OPTIONS
    if not path.exists():
        raise SystemExit(f"Config file not found: {path}")
    try:
        return load_options(path)
    except InvalidOptions as exc:
        raise SystemExit(str(exc)) from exc


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    options = _load_options(args.config)

    try:
        html = read_markup(args.input)
    except FileNotFoundError as exc:
        raise SystemExit(f"Input HTML not found: {args.input}") from exc

    try:
        jsx = convert(html, options)
    except UnsupportedNodeKind as exc:
        raise SystemExit(f"Cannot convert {args.input}: {exc}") from exc

    if jsx is None:
        print("Input is empty; nothing to convert.", file=sys.stderr)
        return

    out_path = write_jsx(args.out, jsx)
    if out_path is not None:
        print(f"Wrote JSX to {out_path}", file=sys.stderr)


if __name__ == "__main__":
    main(sys.argv[1:])
