"""Construct a RevvedFinder from loaded configuration."""

import logging
from typing import Any

from revved_finder.expand_glob import expand_glob
from revved_finder.revved_finder import RevvedFinder

logger = logging.getLogger(__name__)


def build_finder(config: dict[str, Any]) -> RevvedFinder:
    """Use the configured mapping when there is one, the disk otherwise."""
    mapping = config.get("mapping") or {}
    if mapping:
        logger.info("Resolving through a mapping of %d entries", len(mapping))
        return RevvedFinder(mapping)
    logger.info("Resolving by looking for revved files on disk")
    return RevvedFinder(expand_glob)
