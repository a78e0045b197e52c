"""
Package entry point.

Allows running the application via:

    python -m semplan

This simply forwards execution to semplan.cli.main().
"""

from semplan.cli import main

if __name__ == "__main__":
    main()
