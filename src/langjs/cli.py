"""Command-line interface for langjs.

Usage:
    langjs [target] [-s SOURCE] [-m GROUP]... [--no-lib] [--json] [--no-sort]
           [--config FILE] [--validate-locales] [--format {rust,simple,json}]
           [-v | -q]

Exit codes:
    0: Output file created.
    1: Fatal error (missing source directory, undecodable resource,
       corrupted template, unwritable output, invalid configuration).

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from langjs.config import LangJsConfig, load_config
from langjs.diagnostics import DiagnosticFormatter, LangJsError, OutputFormat
from langjs.generator import GenerateOptions, LangJsGenerator
from langjs.sources import LocalFileSystem

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="langjs",
        description="Generate a JavaScript file exposing the application's translations.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        help="Output file (default: output_path from the configuration).",
    )
    parser.add_argument(
        "--source", "-s",
        help="Language directory to scan instead of the configured one.",
    )
    parser.add_argument(
        "--messages", "-m",
        action="append",
        metavar="GROUP",
        help="Only include this group; repeat for more (e.g. -m messages -m forum/thread).",
    )
    parser.add_argument(
        "--no-lib",
        action="store_true",
        help="Do not embed the lang.js library; output messages only.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write the messages as plain JSON instead of a script.",
    )
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep messages in source order instead of sorting by key.",
    )
    parser.add_argument(
        "--config", "-c",
        help="TOML file holding a [tool.langjs] table (default: ./pyproject.toml).",
    )
    parser.add_argument(
        "--validate-locales",
        action="store_true",
        default=None,
        help="Warn about locale directories Babel does not recognize.",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Error report format (default: rust).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Log debug output.")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log errors.")
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _options(args: argparse.Namespace, config: LangJsConfig) -> GenerateOptions:
    messages = args.messages if args.messages is not None else config.messages
    return GenerateOptions(
        source_path=args.source if args.source is not None else config.source_path,
        include_library=config.include_library and not args.no_lib,
        json_only=args.json,
        sort=config.sort and not args.no_sort,
        messages_included=tuple(messages) or None,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator from the command line.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args)
    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.format),
        color=args.format == OutputFormat.RUST and sys.stderr.isatty(),
    )

    try:
        config = load_config(args.config)
        validate = (
            args.validate_locales
            if args.validate_locales is not None
            else config.validate_locales
        )
        generator = LangJsGenerator(
            LocalFileSystem(), config.source_path, validate_locales=validate
        )
        target = args.target if args.target is not None else config.output_path
        result = generator.generate(target, _options(args, config))
    except LangJsError as e:
        logger.debug("Generation failed", exc_info=True)
        if e.diagnostic is not None:
            print(formatter.format(e.diagnostic), file=sys.stderr)
        else:
            print(f"error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"Created: {result.target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
