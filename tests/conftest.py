"""Shared test fixtures for the aloevera test suite.

WHY: Almost every test needs a global context, a raw argument namespace
shaped like argparse's output, and a backend that records what it was
asked to do instead of writing files.

HOW: make_args builds an argparse.Namespace with every asm flag defaulted
the way the real parser leaves them. RecordingOperations is an
AsmOperations that appends each call to a list.

RULES:
- Namespaces mirror cli.build_parser() defaults: None for values, False
  for store_true flags
- RecordingOperations never touches the file system
"""

import argparse
from typing import Any, List, Tuple

import pytest

from aloevera.cmd.asm.command import AsmArgs, AsmOperations
from aloevera.cmd.common import GlobalArgs
from aloevera.core.asm_format import AsmFormat

PROJECT_FILE = "project.av"


class RecordingOperations(AsmOperations):
    """Backend fake that records calls as ("all"|"select", args...) tuples."""

    def __init__(self):
        self.calls: List[Tuple[Any, ...]] = []

    def asm_all(self, g_args, asm_args):
        self.calls.append(("all", g_args, asm_args))

    def asm_select(self, g_args, asm_args, select_args):
        self.calls.append(("select", g_args, asm_args, select_args))


def build_namespace(**overrides) -> argparse.Namespace:
    values = {
        "command": "asm",
        "project_file": None,
        "verbose": False,
        "out_dir": "build",
        "format": "ca65",
        "sd_image": None,
        "conflate_tilemaps": False,
        "asm_command": None,
        "asset_id": None,
        "out_file": None,
        "bin_address": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.fixture
def g_args():
    """Global context with a project file configured."""
    return GlobalArgs(project_file=PROJECT_FILE)


@pytest.fixture
def g_args_no_project():
    return GlobalArgs(project_file=None)


@pytest.fixture
def make_args():
    """Factory for asm namespaces; keyword arguments override defaults."""
    return build_namespace


@pytest.fixture
def select_namespace():
    """A complete, valid ``asm select`` namespace."""
    return build_namespace(
        asm_command="select",
        asset_id="tiles",
        out_file="tile.bin",
        bin_address="0x1234",
    )


@pytest.fixture
def asm_args():
    return AsmArgs(out_dir="build", format=AsmFormat.CA65)


@pytest.fixture
def recorder():
    return RecordingOperations()
