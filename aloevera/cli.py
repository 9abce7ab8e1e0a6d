"""Command-line interface for the aloevera asset exporter.

WHY: Users drive exports from the terminal or from a Makefile. The CLI
wires argument parsing, logging, the global project context, and the
configured export backend around the ``asm`` validators.

HOW: Uses argparse with a top-level parser (global flags), an ``asm``
subparser (shared export flags), and ``all`` / ``select`` sub-subparsers.
Flags that the validators check are declared optional here so that a
missing flag is reported by the validators, in the same words as every
other argument problem. Errors go to stderr.

RULES:
- Global flags: --project_file, -v/--verbose
- asm flags: --out_dir, --format, --sd_image, --conflate_tilemaps
- asm select flags: --asset_id, --out_file, --bin_address
- Backend: the ``operations`` argument, else ALOEVERA_ASM_BACKEND
- Any ValueError (ArgumentError included) prints "Error: ..." and exits 1
- Python 3.9 compatible: no match/case, no X | Y unions
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from aloevera import __version__, config
from aloevera.cmd.asm.command import AsmOperations
from aloevera.cmd.asm.parse import execute_asm_command
from aloevera.cmd.common import parse_global_args
from aloevera.core.asm_format import AsmFormat

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed immediately."""
    print(msg, file=sys.stderr, flush=True)


def _configure_logging(verbose: bool) -> None:
    """Set up root logging from --verbose or ALOEVERA_LOG_LEVEL.

    RULES:
    - --verbose forces DEBUG
    - Otherwise ALOEVERA_LOG_LEVEL, falling back to WARNING if unrecognized
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, config.LOG_LEVEL, logging.WARNING)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _add_asm_parser(subparsers: argparse._SubParsersAction) -> None:
    formats = ", ".join(
        "{} ({})".format(f.value, f.description) for f in AsmFormat
    )
    asm = subparsers.add_parser(
        "asm",
        help="Export assets as assembler, C, BASIC, or binary files.",
        description="Export project assets. Formats: {}.".format(formats),
    )
    asm.add_argument(
        "--out_dir",
        default=None,
        help="Root directory for exported files (required).",
    )
    asm.add_argument(
        "--format",
        default=None,
        help="Output format (required). One of: {}.".format(", ".join(AsmFormat.tokens())),
    )
    asm.add_argument(
        "--sd_image",
        default=None,
        help="SD card image to write exported files into.",
    )
    asm.add_argument(
        "--conflate_tilemaps",
        action="store_true",
        help="Merge tilemap assets during bulk export.",
    )

    asm_sub = asm.add_subparsers(dest="asm_command", metavar="{all,select}")
    asm_sub.add_parser("all", help="Export every asset in the project.")

    select = asm_sub.add_parser("select", help="Export a single asset.")
    select.add_argument(
        "--asset_id",
        default=None,
        help="Identifier of the asset to export (required).",
    )
    select.add_argument(
        "--out_file",
        default=None,
        help="Output file name, relative to --out_dir (required).",
    )
    select.add_argument(
        "--bin_address",
        default=None,
        help="16-bit load address as 4 hex digits, optional 0x prefix (required).",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() lets tests inspect
    parsed namespaces without running an export.
    """
    parser = argparse.ArgumentParser(
        prog="aloevera",
        description="Asset export tooling for VERA-based projects.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )
    parser.add_argument(
        "--project_file",
        default=None,
        help="Project file to operate on (default: $ALOEVERA_PROJECT_FILE).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="{asm}")
    _add_asm_parser(subparsers)
    return parser


def main(
    argv: Optional[List[str]] = None,
    operations: Optional[AsmOperations] = None,
) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - operations=None loads the backend named by ALOEVERA_ASM_BACKEND
    - Explicit argv and operations are for testing and embedding
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    g_args = parse_global_args(args)
    _configure_logging(g_args.verbose)

    if args.command != "asm":
        parser.print_usage(sys.stderr)
        print("Error: Unknown command, use 'aloevera --help' for details", file=sys.stderr)
        sys.exit(1)

    try:
        if operations is None:
            operations = config.load_asm_backend()
        logger.debug("Using asm backend %s", type(operations).__name__)
        execute_asm_command(g_args, args, operations)
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    _status("asm {} complete".format(args.asm_command))


if __name__ == "__main__":
    main()
