"""Hex string encoding and decoding.

WHY: Load addresses and other raw values arrive on the command line as hex
text. Decoding must be strict: a stray space or an odd digit count is a
typo, not something to guess around.

HOW: binascii.unhexlify does the decoding; a regex pre-check rejects
anything that is not a plain run of hex digits (``bytes.fromhex`` would
silently accept embedded whitespace).

RULES:
- Input must be an even number of hex digits, either case, nothing else
- The empty string decodes to empty bytes
- Callers strip any ``0x`` prefix themselves
- Output of to_hex() is uppercase with no prefix
"""

from __future__ import annotations

import binascii
import re

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def from_hex(text: str) -> bytes:
    """Decode a string of hex digits into bytes.

    Args:
        text: Hex digits, e.g. ``"1234"`` or ``"beef"``.

    Returns:
        The decoded bytes, one per digit pair.

    Raises:
        ValueError: If the string has an odd length or contains anything
            other than hex digits.
    """
    if not _HEX_RE.fullmatch(text):
        raise ValueError("Invalid hex string '{}': only 0-9, A-F allowed".format(text))
    if len(text) % 2 != 0:
        raise ValueError("Invalid hex string '{}': odd number of digits".format(text))
    return binascii.unhexlify(text)


def to_hex(data: bytes) -> str:
    """Encode bytes as an uppercase hex string."""
    return binascii.hexlify(data).decode("ascii").upper()
