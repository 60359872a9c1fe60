"""Orchestration logic behind the ``find`` and ``rewrite`` commands."""

import argparse
import logging
from pathlib import Path
from typing import Any

from revved_finder.build_finder import build_finder
from revved_finder.load_config import ConfigError, load_config
from revved_finder.revved_finder import RevvedFinder
from revved_finder.rewrite_references import rewrite_references

logger = logging.getLogger(__name__)


def run_find(args: argparse.Namespace) -> int:
    """Print the revved version of a single reference."""
    config, finder = _init_infra(args)
    print(finder.find(args.reference, config["search_dirs"]))
    return 0


def run_rewrite(args: argparse.Namespace) -> int:
    """Rewrite the asset references of a CSS/HTML file."""
    config, finder = _init_infra(args)

    path: Path = args.file
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Cannot read {path}: {e}"
        raise SystemExit(msg) from e

    rewritten = rewrite_references(
        text,
        finder,
        config["search_dirs"],
        patterns=config["rewrite"]["patterns"],
    )

    if args.in_place:
        if rewritten != text:
            path.write_text(rewritten, encoding="utf-8")
            logger.info("Rewrote references in %s", path)
        else:
            logger.info("No revved references for %s", path)
    else:
        print(rewritten, end="")
    return 0


def _init_infra(args: argparse.Namespace) -> tuple[dict[str, Any], RevvedFinder]:
    """Load configuration, set up logging and build the finder."""
    try:
        config = load_config(args.config)
    except ConfigError as e:
        raise SystemExit(str(e)) from e

    if args.search_dir:
        config["search_dirs"] = list(args.search_dir)

    level = "DEBUG" if args.verbose else str(config["log_level"]).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    return config, build_finder(config)
