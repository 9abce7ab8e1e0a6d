"""Output formats understood by the ``asm`` exporter.

WHY: Each export backend writes assets in one of a small, fixed set of
flavours. The user picks one by name with ``--format``; a typo must be
rejected rather than quietly falling back to some default flavour.

HOW: AsmFormat is a str-valued enum whose values are the command-line
tokens. from_str() is an exact lookup over the members.

RULES:
- Tokens are matched exactly (case-sensitive): ca65, cc65, basic, bin
- Unknown tokens raise ValueError listing the valid choices
- There is no default member
"""

from __future__ import annotations

import enum
from typing import List


class AsmFormat(str, enum.Enum):
    """Asset export output format.

    RULES:
    - ca65: assembler include for the ca65 assembler
    - cc65: C header for the cc65 compiler
    - basic: BASIC DATA statements
    - bin: raw binary prefixed with a 2-byte load address
    """

    CA65 = "ca65"
    CC65 = "cc65"
    BASIC = "basic"
    BIN = "bin"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def tokens(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def from_str(cls, token: str) -> "AsmFormat":
        """Parse a command-line token into an AsmFormat.

        Raises:
            ValueError: If the token names no known format.
        """
        for member in cls:
            if member.value == token:
                return member
        raise ValueError(
            "Unknown asm format '{}'. Available formats: {}".format(
                token, ", ".join(cls.tokens())
            )
        )


_DESCRIPTIONS = {
    AsmFormat.CA65: "ca65 assembler include",
    AsmFormat.CC65: "C header for cc65",
    AsmFormat.BASIC: "BASIC DATA statements",
    AsmFormat.BIN: "raw binary with load address header",
}
