"""Validated ``asm`` command records and the export backend interface.

WHY: The export backends should never see a half-filled command. These
records are only built by the validators in parse.py, so a backend can
rely on every field being present and well-formed.

HOW: AsmArgs and AsmSelectArgs are frozen dataclasses. AsmOperations is
an ABC with one method per export mode; the dispatcher calls exactly one
of them per invocation.

RULES:
- AsmArgs.out_dir and AsmArgs.format are always set
- AsmSelectArgs.bin_address is always exactly 2 bytes (high, low order as
  typed by the user)
- AsmSelectArgs.out_file already includes out_dir
- Records are immutable once built

To add an export backend:
1. Subclass AsmOperations
2. Implement asm_all() and asm_select()
3. Point ALOEVERA_ASM_BACKEND at it ("package.module:ClassName")
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from aloevera.cmd.common import GlobalArgs
from aloevera.core.asm_format import AsmFormat


@dataclass(frozen=True)
class AsmArgs:
    """Top-level ``asm`` arguments, shared by every export mode.

    Attributes:
        out_dir: Destination root for all emitted files.
        format: Output flavour.
        sd_image: Optional SD card image to write into, as given.
        conflate_tilemaps: Merge tilemap assets during bulk export.
    """

    out_dir: str
    format: AsmFormat
    sd_image: Optional[str] = None
    conflate_tilemaps: bool = False


@dataclass(frozen=True)
class AsmSelectArgs:
    """Arguments for exporting a single asset with ``asm select``.

    Attributes:
        asset_id: Identifier of the asset to export.
        out_file: Output path, out_dir joined with the user's file name.
        bin_address: 16-bit load address as two bytes.
    """

    asset_id: str
    out_file: str
    bin_address: Tuple[int, int]

    @property
    def bin_address_bytes(self) -> bytes:
        return bytes(self.bin_address)


class AsmOperations(ABC):
    """Export backend invoked once validation has succeeded."""

    @abstractmethod
    def asm_all(self, g_args: GlobalArgs, asm_args: AsmArgs) -> None:
        """Export every asset in the project to ``asm_args.out_dir``."""

    @abstractmethod
    def asm_select(
        self,
        g_args: GlobalArgs,
        asm_args: AsmArgs,
        select_args: AsmSelectArgs,
    ) -> None:
        """Export one asset to ``select_args.out_file``."""
