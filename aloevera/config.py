"""Configuration constants and .env loading.

WHY: A project usually exports with the same project file and the same
backend every time. Reading those from the environment (or a .env file in
the project folder) saves retyping them on every invocation, while keeping
the command-line flags authoritative.

HOW: python-dotenv loads the .env file on import. Defaults are plain
module-level values read with os.getenv(). load_asm_backend() resolves the
configured export backend by its ``module:Class`` path.

RULES:
- --project_file on the command line wins over ALOEVERA_PROJECT_FILE
- ALOEVERA_ASM_BACKEND names an AsmOperations subclass as "module:Class"
- A missing or broken backend setting raises ValueError, never a default
"""

from __future__ import annotations

import importlib
import inspect
import os
from typing import TYPE_CHECKING, Optional

from dotenv import load_dotenv

if TYPE_CHECKING:
    from aloevera.cmd.asm.command import AsmOperations

# Load .env from the directory the tool is run from
load_dotenv()

# ---------------------------------------------------------------------------
# Environment defaults
# ---------------------------------------------------------------------------

DEFAULT_PROJECT_FILE = os.getenv("ALOEVERA_PROJECT_FILE") or None
LOG_LEVEL = os.getenv("ALOEVERA_LOG_LEVEL", "WARNING").upper()
ASM_BACKEND = os.getenv("ALOEVERA_ASM_BACKEND", "").strip()

# ---------------------------------------------------------------------------
# Command constants
# ---------------------------------------------------------------------------

BIN_ADDRESS_BYTES = 2
"""Width of the .bin load address (16 bits)."""


def load_asm_backend(path: Optional[str] = None) -> "AsmOperations":
    """Instantiate the export backend named by ``path`` or ALOEVERA_ASM_BACKEND.

    RULES:
    - Format is "package.module:ClassName"
    - The class must subclass AsmOperations and take no constructor arguments
    - Raises ValueError with a readable message on any problem
    """
    from aloevera.cmd.asm.command import AsmOperations

    target = (path if path is not None else ASM_BACKEND).strip()
    if not target:
        raise ValueError(
            "No asm export backend configured. "
            "Set ALOEVERA_ASM_BACKEND to 'module:Class' in the environment or .env file."
        )

    module_name, sep, class_name = target.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(
            "Invalid ALOEVERA_ASM_BACKEND '{}': expected 'module:Class'".format(target)
        )

    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        raise ValueError("Cannot import asm backend module '{}': {}".format(module_name, e)) from e

    backend_cls = getattr(module, class_name, None)
    if not isinstance(backend_cls, type) or not issubclass(backend_cls, AsmOperations):
        raise ValueError(
            "asm backend '{}' is not an AsmOperations subclass".format(target)
        )
    if inspect.isabstract(backend_cls):
        raise ValueError(
            "asm backend '{}' is abstract; it must implement asm_all and asm_select".format(target)
        )

    try:
        return backend_cls()
    except TypeError as e:
        raise ValueError("Cannot instantiate asm backend '{}': {}".format(target, e)) from e
