"""Package entry point for ``python -m aloevera``.

WHY: Users run the exporter as ``python -m aloevera asm ...`` without
needing an installed console script.

HOW: Delegates straight to the CLI's main() function.
"""

if __name__ == "__main__":
    from aloevera.cli import main
    main()
