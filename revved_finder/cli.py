"""Command line entry point for resolving revved asset references."""

import argparse
from pathlib import Path

from revved_finder.run_commands import run_find, run_rewrite


def _add_common(ap: argparse.ArgumentParser) -> None:
    ap.add_argument(
        "--search-dir",
        action="append",
        default=[],
        metavar="DIR",
        help="Directory the original file lives under (repeatable, tried in order)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log every lookup",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its ``find`` and ``rewrite`` commands."""
    ap = argparse.ArgumentParser(
        description="Find the revved (hash-prefixed) version of asset references.",
    )
    sub = ap.add_subparsers(dest="command")

    find_parser = sub.add_parser("find", help="Resolve a single reference")
    find_parser.add_argument("reference", help="Reference as written in the asset")
    _add_common(find_parser)
    find_parser.set_defaults(func=run_find)

    rewrite_parser = sub.add_parser(
        "rewrite", help="Rewrite url()/src/href references in a file"
    )
    rewrite_parser.add_argument("file", type=Path, help="CSS or HTML file")
    rewrite_parser.add_argument(
        "--in-place",
        action="store_true",
        help="Write the result back instead of printing it",
    )
    _add_common(rewrite_parser)
    rewrite_parser.set_defaults(func=run_rewrite)

    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the requested command."""
    ap = build_parser()
    args = ap.parse_args(argv)
    if not args.command:
        ap.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
