"""Global command context and raw-argument field extractors.

WHY: argparse hands every command a loosely typed Namespace in which an
absent flag is simply None. Commands want the opposite: records whose
fields are guaranteed present. The extractors here sit at that boundary so
the "is it there?" question is answered once, with a consistent error.

HOW: parse_required() returns the string value or raises ArgumentError;
parse_optional() returns the value or None; parse_flag() reports presence.
parse_global_args() builds the GlobalArgs every command receives.

RULES:
- A required field that is absent or empty raises ArgumentError naming it
- Optional fields are returned untouched; no default substitution
- Presence flags ignore any value text: present means True
- --project_file falls back to ALOEVERA_PROJECT_FILE, else stays None
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional

from aloevera import config
from aloevera.errors import ArgumentError


@dataclass(frozen=True)
class GlobalArgs:
    """Context shared by every subcommand of a single invocation.

    Attributes:
        project_file: Path to the configured project file, or None.
        verbose: True when debug logging was requested.
    """

    project_file: Optional[str] = None
    verbose: bool = False


def parse_global_args(args: argparse.Namespace) -> GlobalArgs:
    """Build GlobalArgs from the top-level parser's namespace."""
    project_file = parse_optional(args, "project_file") or config.DEFAULT_PROJECT_FILE
    return GlobalArgs(
        project_file=project_file,
        verbose=parse_flag(args, "verbose"),
    )


def parse_required(args: argparse.Namespace, name: str) -> str:
    """Return the value of a required argument.

    Raises:
        ArgumentError: If the argument is missing or empty.
    """
    value = getattr(args, name, None)
    if value is None or value == "":
        raise ArgumentError(
            "Value for argument '{}' is required in this context".format(name)
        )
    return value


def parse_optional(args: argparse.Namespace, name: str) -> Optional[str]:
    return getattr(args, name, None)


def parse_flag(args: argparse.Namespace, name: str) -> bool:
    # store_true flags default to False; anything else set means present
    value = getattr(args, name, None)
    return value is not None and value is not False
