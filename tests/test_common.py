"""Unit tests for the field extractors and global context.

WHY: Every command relies on these to turn "flag absent" into either a
clear error (required) or None/False (optional, presence flags).
"""

import argparse

import pytest

from aloevera import config
from aloevera.cmd.common import (
    GlobalArgs,
    parse_flag,
    parse_global_args,
    parse_optional,
    parse_required,
)
from aloevera.errors import ArgumentError


class TestParseRequired:

    def test_returns_value(self):
        args = argparse.Namespace(out_dir="build")
        assert parse_required(args, "out_dir") == "build"

    def test_none_is_missing(self):
        args = argparse.Namespace(out_dir=None)
        with pytest.raises(ArgumentError, match="'out_dir' is required"):
            parse_required(args, "out_dir")

    def test_absent_attribute_is_missing(self):
        with pytest.raises(ArgumentError, match="'asset_id'"):
            parse_required(argparse.Namespace(), "asset_id")

    def test_empty_string_is_missing(self):
        with pytest.raises(ArgumentError):
            parse_required(argparse.Namespace(out_dir=""), "out_dir")


class TestParseOptional:

    def test_returns_value(self):
        assert parse_optional(argparse.Namespace(sd_image="sd.img"), "sd_image") == "sd.img"

    def test_absent_is_none(self):
        assert parse_optional(argparse.Namespace(sd_image=None), "sd_image") is None
        assert parse_optional(argparse.Namespace(), "sd_image") is None


class TestParseFlag:

    def test_absent_is_false(self):
        assert parse_flag(argparse.Namespace(), "conflate_tilemaps") is False
        assert parse_flag(argparse.Namespace(conflate_tilemaps=None), "conflate_tilemaps") is False

    def test_store_true_default_is_false(self):
        assert parse_flag(argparse.Namespace(conflate_tilemaps=False), "conflate_tilemaps") is False

    def test_present_is_true(self):
        assert parse_flag(argparse.Namespace(conflate_tilemaps=True), "conflate_tilemaps") is True

    def test_value_text_ignored(self):
        """Any supplied value counts as present, even one that reads as false."""
        assert parse_flag(argparse.Namespace(conflate_tilemaps="false"), "conflate_tilemaps") is True
        assert parse_flag(argparse.Namespace(conflate_tilemaps=""), "conflate_tilemaps") is True


class TestParseGlobalArgs:

    def test_flag_value_used(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_PROJECT_FILE", "env.av")
        args = argparse.Namespace(project_file="cli.av", verbose=False)
        assert parse_global_args(args) == GlobalArgs(project_file="cli.av", verbose=False)

    def test_env_default_used_when_flag_absent(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_PROJECT_FILE", "env.av")
        args = argparse.Namespace(project_file=None, verbose=True)
        assert parse_global_args(args) == GlobalArgs(project_file="env.av", verbose=True)

    def test_no_project_anywhere(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_PROJECT_FILE", None)
        args = argparse.Namespace(project_file=None, verbose=False)
        assert parse_global_args(args).project_file is None
