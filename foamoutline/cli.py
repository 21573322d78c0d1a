"""Command-line front door for foamoutline.

Parses CLI options, loads the dictionary file, and prints its outline as a
tree, as picker rows, or as JSON.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .detect import is_foam_dictionary
from .document import TextDocument, read_text
from .fuzzy import match_entries
from .outline import breadcrumb, flatten_outline, provide_document_symbols
from .render import normalize_style, render_entries, render_json, render_tree

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foamoutline",
        description="Print the block/list/entry outline of an OpenFOAM dictionary.",
    )
    parser.add_argument("path", help="Dictionary file to outline.")
    parser.add_argument(
        "--format",
        choices=config.OUTPUT_FORMATS,
        default=None,
        help="Output format (default from config, else tree).",
    )
    parser.add_argument("--query", default=None, help="Fuzzy-filter picker rows by symbol path.")
    parser.add_argument(
        "--line",
        type=_positive_int,
        default=None,
        help="Print the enclosing symbol chain for this 1-based line and exit.",
    )
    parser.add_argument("--max-symbols", type=_positive_int, default=None, help="Cap on picker rows.")
    parser.add_argument("--style", default=None, help="Pygments style name for JSON output.")
    parser.add_argument("--save-style", action="store_true", help="Persist --style as the default style.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--force", action="store_true", help="Outline files not recognized as dictionaries.")
    parser.add_argument(
        "--remember",
        action="store_true",
        help="Remember this file name as an OpenFOAM dictionary so later runs need no --force.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log scanning details to stderr.")
    return parser


def main() -> None:
    """Parse CLI arguments and print the outline of one dictionary file."""
    args = build_parser().parse_args()
    _configure_logging(args.verbose)

    if args.save_style:
        if not args.style:
            raise SystemExit("--save-style needs --style")
        config.save_style(normalize_style(args.style))

    path = Path(args.path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_file():
        raise SystemExit("Symbol outline is available for files only.")

    try:
        source = read_text(path)
    except OSError as exc:
        raise SystemExit(f"Failed to read {path}: {exc}") from exc

    extra_names = config.load_extra_dictionary_names()
    if not args.force and not is_foam_dictionary(path, source, extra_names):
        raise SystemExit(f"Not an OpenFOAM dictionary: {path} (use --force to outline anyway)")
    if args.remember and path.name not in extra_names:
        config.save_extra_dictionary_names([*extra_names, path.name])

    symbols = provide_document_symbols(TextDocument.from_text(source, path=path))
    no_color = args.no_color or not sys.stdout.isatty()

    if args.line is not None:
        sys.stdout.write(breadcrumb(symbols, args.line - 1) + "\n")
        return

    output_format = args.format or config.load_output_format()
    if args.query is not None:
        output_format = "symbols"
    logger.debug("rendering %s as %s", path, output_format)

    if output_format == "json":
        style = args.style or config.load_style()
        sys.stdout.write(render_json(symbols, style=style, no_color=no_color))
    elif output_format == "symbols":
        max_symbols = args.max_symbols or config.load_max_symbols()
        entries = flatten_outline(symbols, max_symbols=max_symbols)
        if args.query:
            entries = [entry for entry, _score in match_entries(args.query, entries, limit=max_symbols)]
        sys.stdout.write(render_entries(entries, no_color=no_color))
    else:
        sys.stdout.write(render_tree(symbols, no_color=no_color))


if __name__ == "__main__":
    main()
