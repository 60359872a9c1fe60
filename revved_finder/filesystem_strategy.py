"""Candidate discovery by looking for hash-prefixed files on disk."""

import glob
import logging
import re
from collections.abc import Callable, Sequence

from revved_finder.path_helpers import basename, dirname, join
from revved_finder.regexp_quote import regexp_quote

logger = logging.getLogger(__name__)

ExpandFn = Callable[[str], Sequence[str]]


def revved_name_pattern(name: str) -> re.Pattern[str]:
    """Build the pattern a revved version of ``name`` must match.

    Rev output looks like ``<hex digits>.<original name>``.
    """
    return re.compile(r"[0-9a-fA-F]+\." + regexp_quote(name) + r"\Z")


class FilesystemStrategy:
    """Finds revved files through an injected glob-style ``expand`` function."""

    def __init__(self, expand: ExpandFn):
        self.expand = expand

    def get_candidates(self, file: str, search_dirs: Sequence[str]) -> list[str]:
        """Return revved siblings of ``file`` found under each search directory.

        Matches keep the order ``expand`` returned them in, directory by
        directory.
        """
        name = basename(file)
        file_dir = dirname(file)
        revved_rx = revved_name_pattern(name)
        single_segment = "/" not in file
        candidates: list[str] = []

        for sp in search_dirs:
            # only the wildcard in front of the name may act as a glob
            search_string = join(
                glob.escape(sp), glob.escape(file_dir), f"*.{glob.escape(name)}"
            )
            logger.debug("Looking for %s on disk", search_string)

            files = self.expand(search_string)
            logger.debug("Found %s", files)

            for found in files:
                if not revved_rx.search(found):
                    continue
                found_name = basename(found)
                if single_segment:
                    logger.debug("Adding %s to candidates", found_name)
                    candidates.append(found_name)
                else:
                    logger.debug("Adding %s / %s to candidates", file_dir, found_name)
                    candidates.append(f"{file_dir}/{found_name}")

        return candidates
