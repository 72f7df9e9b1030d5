from __future__ import annotations

import argparse
import sys
from typing import Sequence

from intcnv.runner import format_type_table, print_usage, run_conversion
from intcnv.types import TAG_NAMES

PROG_NAME = "intcnv"
DESCRIPTION = "Truncate a decimal integer to a fixed-width integer type"
EPILOG = f"""\
Types:
  {", ".join(TAG_NAMES)}

Examples:
  intcnv i32 134
  intcnv u8 256
  intcnv i8 -129
  intcnv u8 --strict 12
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "type",
        metavar="TYPE",
        nargs="?",
        help="target integer type",
    )
    parser.add_argument(
        "value",
        metavar="VALUE",
        nargs="?",
        help="decimal input value",
    )
    parser.add_argument(
        "extra",
        nargs="*",
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject values without leading digits instead of reading them as 0",
    )
    parser.add_argument(
        "--list-types",
        action="store_true",
        help="print the supported types and their ranges, then exit",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    if args.list_types:
        print(format_type_table())
        return 0

    if args.type is None or args.value is None:
        given = sum(arg is not None for arg in (args.type, args.value))
        return print_usage(given)

    return run_conversion(args.type, args.value, strict=args.strict)


if __name__ == "__main__":
    sys.exit(main())
