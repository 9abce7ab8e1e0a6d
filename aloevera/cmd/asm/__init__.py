"""The ``asm`` subcommand: export assets as ca65, cc65, BASIC, or .bin files.

WHY: Export has two modes, everything at once (``asm all``) or a single
asset at a chosen load address (``asm select``). Both share the top-level
flags, so validation is split into a shared stage and a select-only stage.

HOW: command.py defines the validated records and the backend interface;
parse.py validates raw arguments and dispatches.
"""

from aloevera.cmd.asm.command import AsmArgs, AsmOperations, AsmSelectArgs
from aloevera.cmd.asm.parse import (
    execute_asm_command,
    parse_asm_args,
    parse_asm_select_args,
)

__all__ = [
    "AsmArgs",
    "AsmOperations",
    "AsmSelectArgs",
    "execute_asm_command",
    "parse_asm_args",
    "parse_asm_select_args",
]
