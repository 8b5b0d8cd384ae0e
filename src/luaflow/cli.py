"""Command-line entry point.

Usage:
    luaflow path/to/file.lua > formatted.lua

Takes exactly one positional argument and no options. The formatted text
goes to stdout only after the whole pipeline has succeeded; any failure
prints a diagnostic on stderr and exits non-zero with nothing on stdout.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from luaflow import __version__, reflow_file
from luaflow.errors import LuaflowError
from luaflow.utils.logger import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="luaflow",
        description="Reflow a Lua source file: one statement per line, tab indentation.",
        epilog=f"luaflow {__version__}",
    )
    parser.add_argument("path", help="source file to reflow")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Process exit status (argparse exits with 2 on usage errors).
    """
    args = build_parser().parse_args(argv)

    try:
        output = reflow_file(args.path)
    except LuaflowError as exc:
        logger.debug("reflow of %s failed", args.path, exc_info=True)
        print(f"luaflow: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    sys.stdout.write(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
