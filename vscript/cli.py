"""
Command-line driver for VScript.

Reads a source file line by line, prints every token it produced and the
total token count. Compile and run modes are accepted but not wired up yet.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __build_id__
from .lexer import tokenize_file

LOG = logging.getLogger("vscript")


def _help_text() -> str:
    return (
        f"VScript {__build_id__}\n"
        "Commands:\n"
        "-c Compile\n"
        "-r Execute\n"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vscript",
        description=f"VScript {__build_id__}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    vscript main.vs              # List the tokens of main.vs
    vscript --strict main.vs     # Also report characters outside the grammar
        """
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('-c', '--compile', action='store_true',
                      help='Compile the source file')
    mode.add_argument('-r', '--run', action='store_true',
                      help='Execute the source file')

    parser.add_argument('--strict', action='store_true',
                        help='Report unrecognized characters instead of skipping them')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose logging')
    parser.add_argument('file', help='VScript source file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not LOG.handlers and not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    if args.verbose:
        LOG.setLevel(logging.DEBUG)
        LOG.debug("Verbose mode enabled")

    if args.compile or args.run:
        LOG.warning("%s mode is not implemented; listing tokens only",
                    "compile" if args.compile else "run")

    try:
        lexer = tokenize_file(args.file, strict=args.strict)
    except OSError as e:
        LOG.error("Cannot open %s: %s", args.file, e)
        print(_help_text(), end="")
        return 1

    for diagnostic in lexer.get_diagnostics():
        print(diagnostic, file=sys.stderr)

    for token in lexer.tokens:
        print(token)
    print(len(lexer.tokens))

    if args.strict and lexer.has_errors():
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
