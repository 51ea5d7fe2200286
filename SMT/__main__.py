import argparse
import logging
import sys
from typing import List, Optional
from . import __version__
from .errors import SMTError
from .tool.merge.merge_sbom import Merge_SBOM
from .tool.util.utils import Util


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smt-merge",
        description="Merge two SPDX 2.3 JSON documents into one deduplicated SBOM",
    )
    parser.add_argument("path1", help="first SPDX 2.3 JSON document")
    parser.add_argument("path2", help="second SPDX 2.3 JSON document")
    parser.add_argument(
        "-o", "--output", default="-",
        help="write the merged SBOM to this file, with a .sha256 beside it (default: stdout)"
    )
    parser.add_argument(
        "-f", "--format", choices=["json", "yaml"], default="json",
        help="output format (default: json)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    print(f"Merging {args.path1} and {args.path2}", file=sys.stderr)

    try:
        bom = Merge_SBOM([args.path1, args.path2]).merge_sbom()
        Util.make_output(bom, args.output, args.format)
    except SMTError as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
