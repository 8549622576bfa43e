"""Command-line interface for go-forth.

Usage:
    goforth                  - Start the interactive REPL
    goforth <file>           - Evaluate each line of a file
    goforth -c "<line>"      - Evaluate a single line
"""

import argparse
import logging
import sys
from pathlib import Path

import goforth
from . import repl


def build_parser():
    parser = argparse.ArgumentParser(
        prog="goforth",
        description="Evaluate forth interactively, from a file, or from the command line",
    )
    parser.add_argument("source", nargs="?",
        help="File with one line of forth per line")
    parser.add_argument("-c", "--command", metavar="TEXT",
        help="Evaluate a single line and exit")
    parser.add_argument("--stack", type=int, default=goforth.STACK_CAPACITY, metavar="N",
        help=f"Operand stack capacity (default {goforth.STACK_CAPACITY})")
    parser.add_argument("--dict", type=int, default=goforth.DICTIONARY_CAPACITY, metavar="N",
        help=f"Dictionary capacity (default {goforth.DICTIONARY_CAPACITY})")
    parser.add_argument("--rich", action="store_true",
        help="Style output with rich")
    parser.add_argument("-v", "--verbose", action="store_true",
        help="Log engine activity")
    parser.add_argument("--version", action="store_true",
        help="Print version and exit")
    return parser


def main(argv=None):
    """Main entry point for the goforth CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"goforth {goforth.__version__}")
        return 0

    if args.source and args.command:
        parser.error("give either a file or --command, not both")
    if args.stack < 0 or args.dict < 0:
        parser.error("capacities must not be negative")
    builtin_count = len(goforth.builtin.builtin_names())
    if args.dict < builtin_count:
        parser.error(f"dictionary capacity must hold the {builtin_count} builtin words")

    if args.verbose:
        logging.basicConfig(format="%(message)s", level=logging.DEBUG, stream=sys.stderr)

    context = repl.ReplContext(args.stack, args.dict, use_rich=args.rich)

    if args.command is not None:
        return repl.run_lines(context, [args.command])

    if args.source:
        filepath = Path(args.source)
        if not filepath.exists():
            print(f"Error: File not found: {filepath}", file=sys.stderr)
            return 1
        lines = filepath.read_text(encoding="utf-8").splitlines()
        return repl.run_lines(context, lines)

    try:
        repl.repl(context)
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
