"""Command implementations, one subpackage per top-level subcommand.

RULES:
- common.py holds the global context and the field extractors
- Each subpackage splits record types (command.py) from validation and
  dispatch (parse.py)
"""
