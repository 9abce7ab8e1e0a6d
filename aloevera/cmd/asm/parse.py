"""Validation and dispatch for the ``asm`` subcommand.

WHY: Export backends write files. Every check that can reject a command
(project configured, flags present, format known, load address the right
width) has to run before a backend is touched, so a bad invocation never
leaves a partial export behind.

HOW: parse_asm_args() builds AsmArgs from the top-level flags,
parse_asm_select_args() builds AsmSelectArgs for ``asm select``, and
execute_asm_command() runs them in order and calls exactly one backend
method.

RULES:
- The project check runs before any flag is read
- --bin_address is uppercased, then a leading "0X" is stripped
- The decoded address must be exactly 2 bytes; nothing is padded or cut
- out_file is out_dir + os.sep + the given name, with no normalization
- Unknown or missing sub commands raise ArgumentError; no backend runs
"""

from __future__ import annotations

import argparse
import logging
import os

from aloevera import config
from aloevera.cmd import common
from aloevera.cmd.asm.command import AsmArgs, AsmOperations, AsmSelectArgs
from aloevera.cmd.common import GlobalArgs
from aloevera.core.asm_format import AsmFormat
from aloevera.errors import ArgumentError
from aloevera.util.hex import from_hex, to_hex

logger = logging.getLogger(__name__)


def parse_asm_args(g_args: GlobalArgs, args: argparse.Namespace) -> AsmArgs:
    """Validate the top-level ``asm`` flags.

    Raises:
        ArgumentError: If no project file is configured, a required flag
            is missing, or the format token is unknown.
    """
    if g_args.project_file is None:
        raise ArgumentError("--project_file is required in this context")

    out_dir = common.parse_required(args, "out_dir")
    format_token = common.parse_required(args, "format")
    try:
        asm_format = AsmFormat.from_str(format_token)
    except ValueError as e:
        raise ArgumentError(str(e)) from e

    return AsmArgs(
        out_dir=out_dir,
        format=asm_format,
        sd_image=common.parse_optional(args, "sd_image"),
        conflate_tilemaps=common.parse_flag(args, "conflate_tilemaps"),
    )


def parse_asm_select_args(asm_args: AsmArgs, args: argparse.Namespace) -> AsmSelectArgs:
    """Validate the ``asm select`` flags against already-validated AsmArgs.

    Raises:
        ArgumentError: If a flag is missing, the address is not valid hex,
            or it does not decode to exactly 2 bytes.
    """
    asset_id = common.parse_required(args, "asset_id")
    out_file = common.parse_required(args, "out_file")

    bin_address = common.parse_required(args, "bin_address").upper()
    if bin_address.startswith("0X"):
        bin_address = bin_address[2:]
    try:
        decoded = from_hex(bin_address)
    except ValueError as e:
        raise ArgumentError(str(e)) from e

    if len(decoded) != config.BIN_ADDRESS_BYTES:
        raise ArgumentError(
            ".bin start address must be {} bytes ({} hex digits)".format(
                config.BIN_ADDRESS_BYTES, config.BIN_ADDRESS_BYTES * 2
            )
        )

    return AsmSelectArgs(
        asset_id=asset_id,
        out_file="{}{}{}".format(asm_args.out_dir, os.sep, out_file),
        bin_address=(decoded[0], decoded[1]),
    )


def execute_asm_command(
    g_args: GlobalArgs,
    args: argparse.Namespace,
    operations: AsmOperations,
) -> None:
    """Validate ``asm`` arguments and run the requested export.

    Args:
        g_args: Global context for this invocation.
        args: Parsed namespace; the sub command name is ``args.asm_command``.
        operations: Backend that performs the export.

    Raises:
        ArgumentError: On any validation failure, before the backend runs.
    """
    asm_args = parse_asm_args(g_args, args)
    sub_command = getattr(args, "asm_command", None)
    logger.debug("asm %s with %s", sub_command, asm_args)

    if sub_command == "all":
        operations.asm_all(g_args, asm_args)
    elif sub_command == "select":
        select_args = parse_asm_select_args(asm_args, args)
        logger.debug(
            "Selected asset %s -> %s at $%s",
            select_args.asset_id,
            select_args.out_file,
            to_hex(select_args.bin_address_bytes),
        )
        operations.asm_select(g_args, asm_args, select_args)
    else:
        raise ArgumentError("Unknown sub command, use 'aloevera asm --help' for details")
