"""Core domain types shared by every command.

WHY: The output format enumeration is used by the argument validators,
the CLI help text, and the export backends alike, so it lives outside any
single command package.
"""
