"""Aloevera asset export tooling: the ``asm`` command front end.

WHY: Exporting graphics assets for the target machine involves several
output flavours (assembler includes, C headers, BASIC, raw binaries) and a
handful of flags that only make sense together. Validating those flags in
one place keeps the export backends free of argument plumbing.

HOW: Raw CLI values are turned into immutable command records
(cmd.asm.command), validated by cmd.asm.parse, and handed to a pluggable
export backend that implements AsmOperations.

RULES:
- Validation always completes before any backend is called
- Every user-facing validation failure is an ArgumentError
- The backend, not this package, owns asset I/O
"""

__version__ = "0.1.0"
